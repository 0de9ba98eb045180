import pytest

from frontend import api, chat


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_messages_are_ignored(session, monkeypatch, text):
    monkeypatch.setattr(api, "send_chat", lambda token, m: pytest.fail("should not be called"))
    assert chat.send_message("tok", text) is None
    assert chat.MESSAGES_KEY not in session


def test_answer_and_sources_are_appended(session, monkeypatch):
    sources = [{"filename": "nda.pdf", "score": 0.91, "snippet": "Term: 2 years"}]
    monkeypatch.setattr(api, "send_chat", lambda token, m: {"answer": "Two years.", "sources": sources})

    chat.send_message("tok", "How long is the NDA?")

    assert session[chat.MESSAGES_KEY] == [
        {"q": "How long is the NDA?", "a": "Two years.", "sources": sources}
    ]


def test_errors_become_a_turn(session, monkeypatch):
    def boom(token, m):
        raise api.ApiError("Not authenticated.", status_code=401)

    monkeypatch.setattr(api, "send_chat", boom)
    chat.send_message("tok", "/risk")

    assert session[chat.MESSAGES_KEY][-1] == {"q": "/risk", "a": "Error: Not authenticated.", "sources": []}


def test_source_label():
    assert chat.source_label({"filename": "nda.pdf", "score": 0.876}) == "nda.pdf • Confidence 0.88"
    assert chat.source_label({"filename": "msa.docx"}) == "msa.docx • Confidence 0.00"
