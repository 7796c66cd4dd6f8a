"""
App assembly entry point.

Re-exports the FastAPI `app` from `user_api.api.main` for ASGI servers and runs
uvicorn when executed directly.
"""
import os

import uvicorn

from user_api.api.main import app  # noqa: F401


if __name__ == "__main__":
    uvicorn.run(
        "app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
