# frontend/upload.py
from __future__ import annotations

import io
import logging
from typing import Callable, Optional

import streamlit as st

from frontend import api, config
from frontend.documents import refresh_documents, size_kb
from frontend.toasts import push_toast

logger = logging.getLogger("jurisight.upload")

QUEUE_KEY = "upload_queue"
SIGNATURE_KEY = "upload_signature"

ACCEPTED_TYPES = ["pdf", "docx"]
CONTENT_TYPES = {
    "pdf":  "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


# ====================== Small helpers ======================
def _ext(name: str) -> str:
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


def _pdf_page_count(data: bytes) -> Optional[int]:
    try:
        from pypdf import PdfReader
        if not data:
            return None
        return len(PdfReader(io.BytesIO(data)).pages)
    except Exception as e:
        logger.debug("Could not count PDF pages: %s", e)
        return None


def _too_big(item: dict) -> bool:
    return (item.get("size") or 0) > config.MAX_UPLOAD_MB * 1024 * 1024


def make_queue(files) -> list[dict]:
    """One queue entry per picked file, all starting as queued at 0%."""
    items = []
    for f in files or []:
        data = f.getvalue()
        ext = _ext(f.name)
        items.append({
            "name": f.name,
            "size": len(data),
            "data": data,
            "content_type": CONTENT_TYPES.get(ext, "application/octet-stream"),
            "pages": _pdf_page_count(data) if ext == "pdf" else None,
            "progress": 0,
            "status": "queued",
        })
    return items


def start_upload(token: str, items: list[dict], on_done: Optional[Callable[[], None]] = None) -> list[dict]:
    """Upload sequentially, updating each item's status/progress in place."""
    for item in items:
        item["status"] = "uploading"
        item["progress"] = 10
        item.pop("error", None)
        if _too_big(item):
            item["status"] = "error"
            item["error"] = f"{item['name']} is larger than {config.MAX_UPLOAD_MB} MB"
            push_toast("Upload failed", item["error"])
            continue
        try:
            api.upload_document(token, item["name"], item["data"], item["content_type"])
            item["progress"] = 100
            item["status"] = "done"
            push_toast("Upload complete", item["name"])
        except api.ApiError as e:
            item["status"] = "error"
            item["error"] = str(e)
            push_toast("Upload failed", str(e))
    if on_done:
        on_done()
    return items


# ====================== Panel ======================
def render_upload_panel(token: str) -> None:
    st.markdown("#### Drag & drop your legal documents")
    st.caption(f"PDF and DOCX supported. Max {config.MAX_UPLOAD_MB}MB each.")
    files = st.file_uploader(
        "Choose files",
        type=ACCEPTED_TYPES,
        accept_multiple_files=True,
        key="upload_files",
    )

    # A new selection replaces the queue
    signature = [(f.name, f.size) for f in files or []]
    if signature != st.session_state.get(SIGNATURE_KEY):
        st.session_state[SIGNATURE_KEY] = signature
        st.session_state[QUEUE_KEY] = make_queue(files)

    items = st.session_state.get(QUEUE_KEY) or []
    if not items:
        return

    for it in items:
        with st.container(border=True):
            left, right = st.columns([4, 1])
            meta = f"{size_kb(it['size'])} KB"
            if it.get("pages"):
                meta += f" • {it['pages']} pages"
            left.markdown(f"{it['name']} <span class='js-muted'>• {meta}</span>", unsafe_allow_html=True)
            right.markdown(it["status"].capitalize())
            st.progress(it["progress"])
            if it.get("error"):
                st.caption(f"⚠️ {it['error']}")

    if st.button("Start upload", key="upload_start", type="primary"):
        with st.spinner("Uploading…"):
            start_upload(token, items, on_done=lambda: refresh_documents(token))
        st.rerun()
