"""Authentication middleware."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import AuthenticationError
from ..core.principal import Principal
from ..core.services import AuthService
from ..database import get_db_session
from ..security import get_user_id_from_token


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication; yields the raw token."""

    def __init__(self, auto_error: bool = False):
        super(JWTBearer, self).__init__(auto_error=auto_error)

    async def __call__(self, request: Request) -> str:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise AuthenticationError("Not authenticated")
        if credentials.scheme.lower() != "bearer":
            raise AuthenticationError("Invalid authentication scheme")
        return credentials.credentials


jwt_bearer = JWTBearer()


async def get_bearer_token(token: str = Depends(jwt_bearer)) -> str:
    """Raw bearer token of the request, used by logout."""
    return token


# Dependency for getting current user ID from JWT
async def get_current_user_id(token: str = Depends(jwt_bearer)) -> UUID:
    """Get current authenticated user ID."""
    user_id = await get_user_id_from_token(token)
    if not user_id:
        raise AuthenticationError("Invalid token or expired token")
    return user_id


async def get_current_principal(
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
) -> Principal:
    """Caller identity with role and tenant, read fresh from the database."""
    return await AuthService(session).get_principal(user_id)
