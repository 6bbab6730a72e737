"""Create tenants, users and notes tables

Revision ID: 5b1e7c2d9a40
Revises:
Create Date: 2025-09-20 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5b1e7c2d9a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'tenants',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=100), nullable=False),
        sa.Column('subscription', sa.String(length=20), nullable=False, server_default='free'),
        *_timestamps(),
        sa.UniqueConstraint('slug', name='uq_tenants_slug'),
        sa.CheckConstraint('slug = lower(slug)', name='ck_tenants_slug_lowercase'),
        sa.CheckConstraint("subscription IN ('free', 'pro')", name='ck_tenants_subscription'),
    )
    op.create_index('idx_tenants_slug', 'tenants', ['slug'])

    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='member'),
        sa.Column(
            'tenant_id',
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey('tenants.id', ondelete='CASCADE'),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint('email', name='uq_users_email'),
        sa.CheckConstraint("role IN ('admin', 'member')", name='ck_users_role'),
    )
    op.create_index('idx_users_email', 'users', ['email'])
    op.create_index('idx_users_tenant_id', 'users', ['tenant_id'])

    op.create_table(
        'notes',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column(
            'author_id',
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey('users.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column(
            'tenant_id',
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey('tenants.id', ondelete='CASCADE'),
            nullable=False,
        ),
        *_timestamps(),
        sa.CheckConstraint('length(title) BETWEEN 1 AND 100', name='ck_notes_title_len'),
        sa.CheckConstraint('length(content) BETWEEN 1 AND 10000', name='ck_notes_content_len'),
    )
    op.create_index('idx_notes_tenant_created', 'notes', ['tenant_id', 'created_at'])
    op.create_index('idx_notes_author_id', 'notes', ['author_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_notes_author_id', table_name='notes')
    op.drop_index('idx_notes_tenant_created', table_name='notes')
    op.drop_table('notes')
    op.drop_index('idx_users_tenant_id', table_name='users')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_table('users')
    op.drop_index('idx_tenants_slug', table_name='tenants')
    op.drop_table('tenants')
