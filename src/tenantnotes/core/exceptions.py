"""HTTP errors raised by the service layer.

Each failure kind gets its own class so callers and tests can tell them apart,
while FastAPI still renders them like any other ``HTTPException``.
"""

from typing import Optional

from fastapi import HTTPException, status

from .quota import NOTE_LIMIT_MESSAGE, QuotaDecision


class NotFoundError(HTTPException):
    """Missing resource, or one living in another tenant."""

    def __init__(self, resource: str = "Resource"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource} not found")


class AccessDeniedError(HTTPException):
    """Role or tenant-slug mismatch."""

    def __init__(self, detail: str = "Access denied"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class QuotaExceededError(HTTPException):
    """Free-tier note cap reached; the body flags it so clients can offer an upgrade."""

    def __init__(self, decision: Optional[QuotaDecision] = None):
        detail = {"message": NOTE_LIMIT_MESSAGE, "limit_reached": True}
        if decision is not None:
            detail["note_limit"] = decision.note_limit
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ConflictError(HTTPException):
    """Unique value (slug, email) already taken."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class AuthenticationError(HTTPException):
    """Missing, invalid, expired or revoked credentials."""

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
