"""Tests for tenant and user repositories against SQLite."""

import uuid

from tenantnotes.core.repositories import TenantRepository, UserRepository


class TestTenantRepository:
    async def test_lookup_by_slug_and_id(self, test_session, acme):
        repo = TenantRepository(test_session)
        assert (await repo.get_by_slug("ACME ")).id == acme.id
        assert (await repo.get_by_id(acme.id)).slug == "acme"
        assert await repo.get_by_id(uuid.uuid4()) is None

    async def test_is_slug_taken(self, test_session, acme):
        repo = TenantRepository(test_session)
        assert await repo.is_slug_taken("acme") is True
        assert await repo.is_slug_taken("initech") is False

    async def test_create_and_save(self, test_session):
        repo = TenantRepository(test_session)
        tenant = await repo.create_tenant({"name": "Initech", "slug": "initech"})
        assert tenant.subscription == "free"

        tenant.subscription = "pro"
        saved = await repo.save(tenant)
        assert saved.note_limit == -1
        assert (await repo.get_by_slug("initech")).subscription == "pro"


class TestUserRepository:
    async def test_get_by_email_loads_tenant(self, test_session, acme_admin):
        repo = UserRepository(test_session)
        user = await repo.get_by_email("Admin@Acme.test")
        assert user.id == acme_admin.id
        assert user.tenant.slug == "acme"

    async def test_get_by_id(self, test_session, acme_member):
        repo = UserRepository(test_session)
        user = await repo.get_by_id(acme_member.id)
        assert user.email == "user@acme.test"
        assert user.tenant.slug == "acme"
        assert await repo.get_by_id(uuid.uuid4()) is None

    async def test_create_user(self, test_session, acme, password_hash):
        repo = UserRepository(test_session)
        user = await repo.create_user(
            {
                "email": "new@acme.test",
                "password_hash": password_hash,
                "role": "member",
                "tenant_id": acme.id,
            }
        )
        assert user.tenant.slug == "acme"
        assert await repo.is_email_taken("new@acme.test") is True
        assert await repo.is_email_taken("nobody@acme.test") is False

    async def test_update_password_hash(self, test_session, acme_member):
        repo = UserRepository(test_session)
        await repo.update_password_hash(acme_member, "new-hash")
        assert (await repo.get_by_id(acme_member.id)).password_hash == "new-hash"
