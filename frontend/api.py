# frontend/api.py
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from frontend import config

logger = logging.getLogger("jurisight.api")


class ApiError(Exception):
    """Raised for any failed call to the JuriSight API (HTTP or transport)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


def _error_message(resp: requests.Response) -> str:
    message = "Request failed"
    try:
        data = resp.json()
    except ValueError:
        return message
    if not isinstance(data, dict):
        return message
    detail = data.get("detail") or data.get("message")
    if isinstance(detail, list):
        # FastAPI validation errors: [{"loc": [...], "msg": "...", ...}, ...]
        msgs = [str(d.get("msg", d)) if isinstance(d, dict) else str(d) for d in detail]
        detail = "; ".join(m for m in msgs if m)
    return str(detail) if detail else message


def api(
    path: str,
    token: str | None = None,
    method: str = "GET",
    body: Any = None,
    files: dict | None = None,
    headers: dict | None = None,
    timeout: float | None = None,
) -> Any:
    """
    Call the backend and return decoded JSON (or text for non-JSON replies).

    JSON bodies get a Content-Type header; multipart uploads (``files``) let
    requests build their own boundary header. Raises ApiError on failure.
    """
    hdrs = dict(headers or {})
    if files is None:
        hdrs["Content-Type"] = "application/json"
    if token:
        hdrs["Authorization"] = f"Bearer {token}"

    url = f"{config.API_BASE}{path}"
    logger.debug("%s %s", method, path)
    try:
        resp = requests.request(
            method,
            url,
            headers=hdrs,
            json=body if files is None else None,
            data=body if files is not None else None,
            files=files,
            timeout=timeout or config.REQUEST_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        logger.warning("%s %s failed: %s", method, path, e)
        raise ApiError(str(e)) from e

    if not resp.ok:
        message = _error_message(resp)
        logger.warning("%s %s -> %s: %s", method, path, resp.status_code, message)
        raise ApiError(message, status_code=resp.status_code)

    ct = resp.headers.get("content-type") or ""
    if "application/json" in ct:
        return resp.json()
    return resp.text


# ---------------- Endpoint wrappers ----------------
def _expect_dict(res: Any) -> dict:
    # a proxy or HTML page can answer 2xx with a non-JSON body
    if not isinstance(res, dict):
        raise ApiError("Unexpected response from server.")
    return res


def login(email: str, password: str) -> dict:
    return api("/api/auth/login", method="POST", body={"email": email, "password": password})


def register(name: str, email: str, password: str) -> dict:
    return api(
        "/api/auth/register",
        method="POST",
        body={"name": name, "email": email, "password": password},
    )


def list_documents(token: str) -> list[dict]:
    res = _expect_dict(api("/api/documents", token=token))
    return res.get("documents") or []


def upload_document(token: str, filename: str, data: bytes, content_type: str = "application/octet-stream") -> dict:
    return api(
        "/api/documents/upload",
        token=token,
        method="POST",
        files={"file": (filename, data, content_type)},
    )


def summarize_document(token: str, document_id: str) -> str:
    res = _expect_dict(
        api("/api/documents/summarize", token=token, method="POST", body={"document_id": document_id})
    )
    return res.get("summary", "")


def compare_documents(token: str, left_id: str, right_id: str) -> dict:
    return api(
        "/api/documents/compare",
        token=token,
        method="POST",
        body={"left_id": left_id, "right_id": right_id},
    )


def send_chat(token: str, message: str) -> dict:
    return api("/api/chat", token=token, method="POST", body={"message": message})


def health() -> bool:
    try:
        api("/health", timeout=3)
        return True
    except ApiError:
        return False
