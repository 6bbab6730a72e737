"""JWT token utilities."""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import get_settings
from ..core.redis_client import get_redis_client

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token with JTI for Redis blacklisting."""
    settings = get_settings()
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.access_token_expire_minutes
        )

    to_encode.update({"exp": expire, "type": ACCESS_TOKEN_TYPE, "jti": str(uuid.uuid4())})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def _decode(token: str) -> Optional[Dict[str, Any]]:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        return None
    return payload


async def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate access token, checking the Redis blacklist."""
    payload = _decode(token)
    if payload is None:
        return None

    jti = payload.get("jti")
    if jti and await get_redis_client().is_token_blacklisted(jti):
        return None

    return payload


async def get_user_id_from_token(token: str) -> Optional[UUID]:
    """Extract user ID from token."""
    payload = await decode_access_token(token)
    if not payload:
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    try:
        return UUID(user_id)
    except ValueError:
        return None


async def blacklist_token(token: str) -> bool:
    """Add token to Redis blacklist for logout. False when nothing was recorded."""
    payload = _decode(token)
    if payload is None:
        return False

    jti = payload.get("jti")
    exp = payload.get("exp")
    if not jti or not exp:
        return False

    remaining_seconds = int(exp - datetime.now(timezone.utc).timestamp())
    if remaining_seconds <= 0:
        return False

    recorded = await get_redis_client().add_to_blacklist(jti, remaining_seconds)
    if not recorded:
        logger.warning("Token %s not blacklisted; Redis unavailable", jti)
    return recorded
