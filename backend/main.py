# backend/main.py
from fastapi import FastAPI, UploadFile, File, HTTPException, Header
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from datetime import datetime
import hashlib
import secrets
import logging
import uuid
import os

logger = logging.getLogger("jurisight.demo_api")

# -----------------------------------------------------------------------------
# Limits
# -----------------------------------------------------------------------------
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "10"))
ALLOWED_EXTENSIONS = (".pdf", ".docx")

# -----------------------------------------------------------------------------
# In-memory store (demo only; resets on restart)
# -----------------------------------------------------------------------------
class Store:
    def __init__(self) -> None:
        self.users: Dict[str, Dict[str, Any]] = {}      # email -> user record
        self.tokens: Dict[str, str] = {}                # token -> email
        self.documents: Dict[str, List[Dict[str, Any]]] = {}  # email -> docs

    def reset(self) -> None:
        self.users.clear()
        self.tokens.clear()
        self.documents.clear()


STORE = Store()


def _hash_password(password: str, salt: str) -> str:
    return hashlib.sha256(f"{salt}:{password}".encode("utf-8")).hexdigest()


def _public_user(u: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": u["id"], "name": u["name"], "email": u["email"]}


def _issue_token(email: str) -> str:
    token = secrets.token_urlsafe(32)
    STORE.tokens[token] = email
    return token


def _current_email(authorization: Optional[str]) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Not authenticated.")
    email = STORE.tokens.get(authorization[len("Bearer "):].strip())
    if not email:
        raise HTTPException(status_code=401, detail="Not authenticated.")
    return email


def _find_doc(email: str, doc_id: str) -> Dict[str, Any]:
    for d in STORE.documents.get(email, []):
        if d["id"] == doc_id:
            return d
    raise HTTPException(status_code=404, detail="Document not found.")


def _doc_out(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: d[k] for k in ("id", "filename", "size", "status", "uploaded_at")}

# -----------------------------------------------------------------------------
# FastAPI app + health
# -----------------------------------------------------------------------------
app = FastAPI(title="JuriSight Demo API")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/")
def root():
    return {"ok": True, "message": "JuriSight demo API is running. See /docs and /health."}

# -----------------------------------------------------------------------------
# Auth
# -----------------------------------------------------------------------------
class RegisterIn(BaseModel):
    name: str
    email: str
    password: str


class LoginIn(BaseModel):
    email: str
    password: str


@app.post("/api/auth/register")
def register(payload: RegisterIn):
    name = payload.name.strip()
    email = payload.email.strip().lower()
    if not name or not email or not payload.password:
        raise HTTPException(status_code=400, detail="Name, email and password are required.")
    if email in STORE.users:
        raise HTTPException(status_code=409, detail="An account with this email already exists.")
    salt = secrets.token_hex(8)
    user = {
        "id": uuid.uuid4().hex,
        "name": name,
        "email": email,
        "salt": salt,
        "password": _hash_password(payload.password, salt),
    }
    STORE.users[email] = user
    STORE.documents.setdefault(email, [])
    logger.info("Registered user %s", user["id"])
    return {"access_token": _issue_token(email), "user": _public_user(user)}


@app.post("/api/auth/login")
def login(payload: LoginIn):
    email = payload.email.strip().lower()
    user = STORE.users.get(email)
    if not user or _hash_password(payload.password, user["salt"]) != user["password"]:
        logger.warning("Failed sign-in attempt")
        raise HTTPException(status_code=401, detail="Invalid email or password.")
    return {"access_token": _issue_token(email), "user": _public_user(user)}

# -----------------------------------------------------------------------------
# Documents
# -----------------------------------------------------------------------------
class SummarizeIn(BaseModel):
    document_id: str


class CompareIn(BaseModel):
    left_id: str
    right_id: str


class ChatIn(BaseModel):
    message: str


@app.get("/api/documents")
def list_documents(authorization: Optional[str] = Header(default=None)):
    email = _current_email(authorization)
    return {"documents": [_doc_out(d) for d in STORE.documents.get(email, [])]}


@app.post("/api/documents/upload")
async def upload_document(
    file: UploadFile = File(...),
    authorization: Optional[str] = Header(default=None),
):
    email = _current_email(authorization)
    if not file or not file.filename or not file.filename.lower().endswith(ALLOWED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Please upload a PDF or DOCX file.")
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty.")
    if len(content) > MAX_UPLOAD_MB * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"File exceeds the {MAX_UPLOAD_MB} MB limit.")
    doc = {
        "id": uuid.uuid4().hex,
        "filename": file.filename,
        "size": len(content),
        "status": "processed",
        "uploaded_at": datetime.now().strftime("%Y-%m-%d %H:%M"),
    }
    STORE.documents.setdefault(email, []).append(doc)
    logger.info("Stored document %s (%d bytes)", doc["id"], doc["size"])
    return _doc_out(doc)

# -----------------------------------------------------------------------------
# Canned analysis (the real service does extraction, summarization & diffing)
# -----------------------------------------------------------------------------
@app.post("/api/documents/summarize")
def summarize(payload: SummarizeIn, authorization: Optional[str] = Header(default=None)):
    email = _current_email(authorization)
    d = _find_doc(email, payload.document_id)
    summary = (
        f"{d['filename']} ({int(d['size'] / 1024 + 0.5)} KB, uploaded {d['uploaded_at']}).\n"
        "Demo API: connect the analysis service to get an AI summary of this document."
    )
    return {"document_id": d["id"], "summary": summary}


@app.post("/api/documents/compare")
def compare(payload: CompareIn, authorization: Optional[str] = Header(default=None)):
    email = _current_email(authorization)
    left = _find_doc(email, payload.left_id)
    right = _find_doc(email, payload.right_id)
    bigger = max(left["size"], right["size"]) or 1
    return {
        "left_text": f"{left['filename']}: text preview is provided by the analysis service.",
        "right_text": f"{right['filename']}: text preview is provided by the analysis service.",
        "added": [f"Content only in {right['filename']}"] if left["id"] != right["id"] else [],
        "removed": [f"Content only in {left['filename']}"] if left["id"] != right["id"] else [],
        "confidence": round(min(left["size"], right["size"]) / bigger, 2),
    }


@app.post("/api/chat")
def chat(payload: ChatIn, authorization: Optional[str] = Header(default=None)):
    email = _current_email(authorization)
    message = payload.message.strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message is empty.")
    docs = STORE.documents.get(email, [])
    sources = [
        {"filename": d["filename"], "score": round(1 / (i + 1), 2), "snippet": ""}
        for i, d in enumerate(reversed(docs[-3:]))
    ]
    return {
        "answer": f"Demo API received: {message}",
        "sources": sources,
    }
