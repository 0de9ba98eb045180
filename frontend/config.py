# frontend/config.py
import os
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env that sits next to app.py/config.py (local dev)
load_dotenv(dotenv_path=Path(__file__).with_name(".env"))

API_BASE = os.getenv("BACKEND_URL", "http://localhost:8000").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Local stores (the browser build kept these in localStorage)
AUTH_PATH = os.path.expanduser(os.getenv("JURISIGHT_AUTH_PATH", "~/.jurisight_auth.json"))
PREFS_PATH = os.path.expanduser(os.getenv("JURISIGHT_PREFS_PATH", "~/.jurisight_prefs.json"))


def configure_logging() -> None:
    """
    Root logging setup for the Streamlit process.
    Safe to call on every rerun; basicConfig is a no-op once handlers exist.
    """
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
    )
