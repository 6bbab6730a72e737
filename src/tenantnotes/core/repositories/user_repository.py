"""User repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.user import User


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict, commit: bool = True) -> User:
        """Create new user. With ``commit=False`` the row is only flushed."""
        user = User(**user_data)
        self.session.add(user)
        if commit:
            await self.session.commit()
        else:
            await self.session.flush()
        await self.session.refresh(user, ["tenant"])
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID, tenant included."""
        stmt = select(User).options(selectinload(User.tenant)).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email, tenant included."""
        stmt = (
            select(User)
            .options(selectinload(User.tenant))
            .where(User.email == email.strip().lower())
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_email_taken(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def update_password_hash(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        await self.session.commit()
        return user
