from unittest import mock

import pytest
import streamlit as st

from frontend import config


@pytest.fixture
def make_response():
    """Build a stand-in for requests.Response."""

    def _make(status=200, json_data=None, text="", content_type="application/json"):
        resp = mock.Mock()
        resp.status_code = status
        resp.ok = 200 <= status < 400
        resp.headers = {"content-type": content_type} if content_type else {}
        resp.text = text
        if json_data is None:
            resp.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            resp.json.return_value = json_data
        return resp

    return _make


@pytest.fixture
def tmp_stores(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "AUTH_PATH", str(tmp_path / "auth.json"))
    monkeypatch.setattr(config, "PREFS_PATH", str(tmp_path / "prefs.json"))
    return tmp_path


@pytest.fixture
def session(monkeypatch):
    """Plain dict in place of st.session_state for logic outside a script run."""
    state = {}
    monkeypatch.setattr(st, "session_state", state)
    return state
