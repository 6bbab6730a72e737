# Note model for tenant content
import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .tenant import Tenant
    from .user import User

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 10_000


class Note(BaseModel):
    """Note written by a user; scoped to that user's tenant for its whole life."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    tenant_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )

    author: Mapped[Optional["User"]] = relationship("User", lazy="selectin")
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="notes", lazy="raise")

    __table_args__ = (
        # listing pattern: WHERE tenant_id = ? ORDER BY created_at DESC
        Index("idx_notes_tenant_created", "tenant_id", "created_at"),
        Index("idx_notes_author_id", "author_id"),
        CheckConstraint(
            f"length(title) BETWEEN 1 AND {TITLE_MAX_LENGTH}", name="ck_notes_title_len"
        ),
        CheckConstraint(
            f"length(content) BETWEEN 1 AND {CONTENT_MAX_LENGTH}", name="ck_notes_content_len"
        ),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', tenant_id={self.tenant_id})>"

    @validates("tenant_id", "author_id")
    def _freeze_ownership(self, key, value):
        current = self.__dict__.get(key)
        if current is not None and value != current:
            raise ValueError(f"{key} of an existing note cannot be changed")
        return value

    @property
    def author_email(self) -> Optional[str]:
        return self.author.email if self.author is not None else None

    def belongs_to(self, tenant_id: uuid.UUID) -> bool:
        return self.tenant_id == tenant_id
