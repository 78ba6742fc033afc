"""
Typed service errors.

Each error carries the HTTP status it maps to and a message that is safe to
show to API clients. Handlers in `crowdfund.api.errors` turn them into
`{"success": false, "message": ...}` responses.
"""
from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class CrowdfundError(Exception):
    """Base error for the service."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, *, meta: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.meta = dict(meta or {})
        super().__init__(self.message)

    def to_public_dict(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}


class ValidationError(CrowdfundError):
    status_code = 400
    default_message = "Invalid request"

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        return cls(format_validation_errors(exc.errors()), meta={"errors": len(exc.errors())})


class InvalidCredentials(CrowdfundError):
    status_code = 401
    default_message = "Invalid email or password"


class NotFound(CrowdfundError):
    status_code = 404
    default_message = "Not found"


class Conflict(CrowdfundError):
    status_code = 409
    default_message = "Conflict"


class PersistenceError(CrowdfundError):
    status_code = 500
    default_message = "A database error occurred"


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Render pydantic/FastAPI error dicts as one readable sentence."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "form")]
        field = ".".join(loc)
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or ValidationError.default_message
