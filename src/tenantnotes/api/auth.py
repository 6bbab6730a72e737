"""Authentication API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import LoginRequest, SignupRequest, TokenResponse, UserResponse
from ..core.schemas.common import SuccessResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_bearer_token, get_current_user_id

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest, session: AsyncSession = Depends(get_db_session)):
    """Create a tenant on the free plan with its first admin."""
    auth_service = AuthService(session)
    return await auth_service.signup(request)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login user and get a JWT access token."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    return await auth_service.get_current_user(current_user_id)


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Logout user (revoke the presented access token)."""
    auth_service = AuthService(session)
    revoked = await auth_service.logout_user(token)
    return SuccessResponse(message="Logged out successfully", data={"token_revoked": revoked})
