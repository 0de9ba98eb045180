# backend/run.py
import os
import logging

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    uvicorn.run(
        "backend.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
        reload_excludes=["frontend/*", "tests/*", ".venv/*", "venv/*"],
    )
