"""
App assembly entry point.

Re-exports the FastAPI `app` from `crowdfund.api.main` for ASGI servers
(`uvicorn app:app`).
"""

from crowdfund.api.main import app  # noqa: F401
