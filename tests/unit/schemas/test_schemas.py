"""
Unit tests for request schemas: trimming, length limits, formats.
"""

import uuid

import pytest
from pydantic import ValidationError

from tenantnotes.core.schemas import (
    LoginRequest,
    NoteCreate,
    NoteUpdate,
    SignupRequest,
    TenantSummary,
    UserCreateRequest,
)
from tenantnotes.core.models import Tenant, UserRole


class TestNoteSchemas:
    def test_trims_title_and_content(self):
        note = NoteCreate(title="  Groceries  ", content="\n milk, eggs \t")
        assert note.title == "Groceries"
        assert note.content == "milk, eggs"

    def test_limits_checked_after_trimming(self):
        # 100 chars plus padding is still valid
        note = NoteCreate(title="  " + "a" * 100 + "  ", content="x")
        assert len(note.title) == 100

        with pytest.raises(ValidationError):
            NoteCreate(title="a" * 101, content="x")

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError):
            NoteCreate(title=title, content="body")

    def test_content_limit(self):
        assert len(NoteCreate(title="t", content="c" * 10_000).content) == 10_000
        with pytest.raises(ValidationError):
            NoteCreate(title="t", content="c" * 10_001)
        with pytest.raises(ValidationError):
            NoteCreate(title="t", content="  ")

    def test_update_partial(self):
        update = NoteUpdate(content=" new body ")
        assert update.model_dump(exclude_none=True) == {"content": "new body"}

    def test_empty_update_is_allowed(self):
        assert NoteUpdate().model_dump(exclude_none=True) == {}

    def test_update_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            NoteUpdate(title="   ")


class TestAuthSchemas:
    def test_login_email_normalized(self):
        req = LoginRequest(email="  Admin@Acme.TEST ", password="password")
        assert req.email == "admin@acme.test"

    def test_login_rejects_non_email(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="not-an-email", password="password")

    @pytest.mark.parametrize("slug", ["Acme", "acme corp", "acme_corp", ""])
    def test_signup_slug_format(self, slug):
        with pytest.raises(ValidationError):
            SignupRequest(
                tenant_name="Acme", tenant_slug=slug, email="a@acme.test", password="longenough"
            )

    def test_signup_short_password(self):
        with pytest.raises(ValidationError):
            SignupRequest(
                tenant_name="Acme", tenant_slug="acme", email="a@acme.test", password="short"
            )

    def test_user_create_defaults_to_member(self):
        req = UserCreateRequest(email="m@acme.test", password="longenough")
        assert req.role is UserRole.MEMBER

    def test_user_create_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            UserCreateRequest(email="m@acme.test", password="longenough", role="owner")


def test_tenant_summary_reads_derived_limit():
    tenant = Tenant(name="Acme", slug="acme", subscription="pro")
    tenant.id = uuid.uuid4()
    summary = TenantSummary.model_validate(tenant)
    assert summary.note_limit == -1
    assert summary.subscription == "pro"
