import json
from pathlib import Path
from unittest import mock

import pytest
from streamlit.testing.v1 import AppTest

from frontend import config

APP = str(Path(__file__).resolve().parents[1] / "frontend" / "app.py")

USER = {"id": "u1", "name": "Ada Lovelace", "email": "ada@firm.com"}
DOCS = [
    {"id": "d1", "filename": "nda.pdf", "size": 2048, "status": "processed"},
    {"id": "d2", "filename": "msa.docx", "size": 4096, "status": "processed"},
]
COMPARISON = {
    "left_text": "Term: two years.",
    "right_text": "Term: three years.",
    "added": ["three years"],
    "removed": ["two years"],
    "confidence": 0.87,
}


@pytest.fixture
def backend(make_response):
    """Route requests.request calls to canned replies by path."""

    def route(method, url, **kwargs):
        path = url[len(config.API_BASE):]
        if path == "/api/auth/login":
            if kwargs["json"]["password"] == "s3cret":
                return make_response(json_data={"access_token": "tok-1", "user": USER})
            if kwargs["json"]["password"] == "no-token":
                return make_response(json_data={"user": USER})
            return make_response(status=401, json_data={"detail": "Invalid email or password."})
        if path == "/api/documents":
            return make_response(json_data={"documents": DOCS})
        if path == "/api/documents/summarize":
            return make_response(json_data={"summary": f"Summary of {kwargs['json']['document_id']}"})
        if path == "/api/documents/compare":
            return make_response(json_data=COMPARISON)
        if path == "/api/chat":
            return make_response(json_data={
                "answer": f"You asked: {kwargs['json']['message']}",
                "sources": [{"filename": "nda.pdf", "score": 0.9, "snippet": "Clause 4"}],
            })
        if path == "/health":
            return make_response(json_data={"status": "ok"})
        return make_response(status=404, json_data={"detail": "Not Found"})

    with mock.patch("frontend.api.requests.request", side_effect=route) as m:
        yield m


def _signed_in(tmp_stores):
    with open(config.AUTH_PATH, "w", encoding="utf-8") as f:
        json.dump({"token": "tok-1", "user": USER}, f)


def test_signed_out_shows_auth_view(tmp_stores, backend):
    at = AppTest.from_file(APP, default_timeout=30).run()

    assert not at.exception
    assert at.text_input(key="auth_email").label == "Email"
    assert at.button(key="auth_submit").disabled


def test_create_account_mode_asks_for_name(tmp_stores, backend):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.radio(key="auth_mode").set_value("Create account").run()

    assert at.text_input(key="auth_name").label == "Full Name"
    assert at.button(key="auth_submit").label == "Create account"


def test_sign_in_reaches_dashboard(tmp_stores, backend):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.text_input(key="auth_email").input("ada@firm.com")
    at.text_input(key="auth_password").input("s3cret")
    at.run()
    at.button(key="auth_submit").click().run()

    assert not at.exception
    assert at.session_state["js_token"] == "tok-1"
    with open(config.AUTH_PATH, encoding="utf-8") as f:
        assert json.load(f)["token"] == "tok-1"
    metrics = {m.label: m.value for m in at.metric}
    assert metrics["Documents Processed"] == "2"


def test_sign_in_failure_shows_error(tmp_stores, backend):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.text_input(key="auth_email").input("ada@firm.com")
    at.text_input(key="auth_password").input("wrong")
    at.run()
    at.button(key="auth_submit").click().run()

    assert at.session_state["js_token"] == ""
    assert "Invalid email or password." in at.error[0].value


def test_chat_round_trip(tmp_stores, backend):
    _signed_in(tmp_stores)
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="nav_chat").click().run()

    assert at.session_state["tab"] == "chat"
    at.chat_input(key="chat_input").set_value("/risk").run()

    assert not at.exception
    turns = at.session_state["chat_messages"]
    assert turns[-1]["a"] == "You asked: /risk"
    assert turns[-1]["sources"][0]["filename"] == "nda.pdf"


def test_logout_returns_to_auth_view(tmp_stores, backend):
    _signed_in(tmp_stores)
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="logout_btn").click().run()

    assert at.session_state["js_token"] == ""
    assert at.text_input(key="auth_email").label == "Email"


def test_sign_in_without_access_token_stays_signed_out(tmp_stores, backend):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.text_input(key="auth_email").input("ada@firm.com")
    at.text_input(key="auth_password").input("no-token")
    at.run()
    at.button(key="auth_submit").click().run()

    assert at.session_state["js_token"] == ""
    assert "did not return an access token" in at.error[0].value
    assert at.text_input(key="auth_email").label == "Email"


def _requested(backend, path):
    return [c for c in backend.call_args_list if c.args[1] == f"{config.API_BASE}{path}"]


def test_compare_views(tmp_stores, backend):
    _signed_in(tmp_stores)
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="nav_compare").click().run()

    assert at.button(key="compare_go").disabled
    at.selectbox(key="compare_left").set_value("d1")
    at.selectbox(key="compare_right").set_value("d2")
    at.run()
    at.button(key="compare_go").click().run()

    assert not at.exception
    body = _requested(backend, "/api/documents/compare")[-1].kwargs["json"]
    assert body == {"left_id": "d1", "right_id": "d2"}
    assert at.session_state["compare_result"]["confidence"] == 0.87

    # side by side
    shown = [m.value for m in at.markdown]
    assert "Term: two years." in shown
    assert "Term: three years." in shown

    at.radio(key="compare_mode").set_value("overlay").run()
    overlay = " ".join(m.value for m in at.markdown)
    assert "<span class='js-added'>three years</span>" in overlay
    assert "<span class='js-removed'>two years</span>" in overlay
    assert "Modified segments highlighted" in overlay

    at.radio(key="compare_mode").set_value("summary").run()
    assert {"ADDED", "REMOVED", "CONFIDENCE"} <= {c.value for c in at.caption}
    shown = [m.value for m in at.markdown]
    assert "- three years" in shown
    assert "- two years" in shown
    assert not at.exception


def test_compare_error_is_shown_inline(tmp_stores, backend, make_response):
    _signed_in(tmp_stores)
    route = backend.side_effect

    def failing_compare(method, url, **kwargs):
        if url.endswith("/api/documents/compare"):
            return make_response(status=404, json_data={"detail": "Document not found."})
        return route(method, url, **kwargs)

    backend.side_effect = failing_compare
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="nav_compare").click().run()
    at.selectbox(key="compare_left").set_value("d1")
    at.selectbox(key="compare_right").set_value("d2")
    at.run()
    at.button(key="compare_go").click().run()

    assert "Document not found." in at.error[0].value


def test_documents_summarize_and_refresh(tmp_stores, backend):
    _signed_in(tmp_stores)
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="nav_documents").click().run()

    assert "**nda.pdf**" in [m.value for m in at.markdown]
    assert "2 KB • processed" in [c.value for c in at.caption]

    at.button(key="summarize_d1").click().run()

    assert not at.exception
    assert at.session_state["doc_summary"] == "Summary of d1"
    assert at.text[0].value == "Summary of d1"

    before = len(_requested(backend, "/api/documents"))
    at.button(key="docs_refresh").click().run()

    assert len(_requested(backend, "/api/documents")) == before + 1
    assert at.session_state["docs_loading"] is False


def test_upload_panel_renders(tmp_stores, backend):
    _signed_in(tmp_stores)
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="nav_upload").click().run()

    assert not at.exception
    assert "PDF and DOCX supported. Max 10MB each." in [c.value for c in at.caption]
