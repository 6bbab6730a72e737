"""AuthService against a real SQLite session."""

import uuid

import pytest

from tenantnotes.core.exceptions import AuthenticationError, ConflictError
from tenantnotes.core.schemas.auth import LoginRequest, SignupRequest
from tenantnotes.core.services.auth_service import AuthService
from tenantnotes.security.jwt import decode_access_token


class TestLogin:
    async def test_login_returns_token_and_tenant(self, test_session, acme_admin):
        resp = await AuthService(test_session).authenticate_user(
            LoginRequest(email="ADMIN@acme.test", password="password")
        )

        assert resp.token_type == "bearer"
        assert resp.user.email == "admin@acme.test"
        assert resp.user.role == "admin"
        assert resp.user.tenant.slug == "acme"
        assert resp.user.tenant.note_limit == 3

        payload = await decode_access_token(resp.access_token)
        assert payload["sub"] == str(acme_admin.id)
        assert payload["type"] == "access"
        assert payload["jti"]

    async def test_wrong_password(self, test_session, acme_admin):
        with pytest.raises(AuthenticationError) as exc:
            await AuthService(test_session).authenticate_user(
                LoginRequest(email="admin@acme.test", password="nope")
            )
        assert exc.value.detail == "Invalid credentials"

    async def test_unknown_email(self, test_session):
        with pytest.raises(AuthenticationError):
            await AuthService(test_session).authenticate_user(
                LoginRequest(email="ghost@acme.test", password="password")
            )

    async def test_outdated_hash_is_upgraded(self, test_session, acme_admin, monkeypatch):
        import tenantnotes.core.services.auth_service as auth_module

        monkeypatch.setattr(auth_module, "needs_update", lambda h: True)
        monkeypatch.setattr(auth_module, "hash_password", lambda p: "rehashed")

        await AuthService(test_session).authenticate_user(
            LoginRequest(email="admin@acme.test", password="password")
        )
        assert acme_admin.password_hash == "rehashed"


class TestSignup:
    def _request(self, **kw):
        data = {
            "tenant_name": "Initech",
            "tenant_slug": "initech",
            "email": "boss@initech.test",
            "password": "longenough",
        }
        data.update(kw)
        return SignupRequest(**data)

    async def test_signup_creates_free_tenant_and_admin(self, test_session):
        resp = await AuthService(test_session).signup(self._request())

        assert resp.user.role == "admin"
        assert resp.user.tenant.slug == "initech"
        assert resp.user.tenant.subscription == "free"
        assert resp.user.tenant.note_limit == 3

    async def test_duplicate_slug(self, test_session, acme):
        with pytest.raises(ConflictError):
            await AuthService(test_session).signup(self._request(tenant_slug="acme"))

    async def test_duplicate_email(self, test_session, acme_admin):
        with pytest.raises(ConflictError):
            await AuthService(test_session).signup(self._request(email="admin@acme.test"))


class TestPrincipal:
    async def test_principal_from_db(self, test_session, acme_member):
        principal = await AuthService(test_session).get_principal(acme_member.id)
        assert principal.tenant_slug == "acme"
        assert principal.is_admin is False

    async def test_unknown_user_is_unauthenticated(self, test_session):
        with pytest.raises(AuthenticationError):
            await AuthService(test_session).get_principal(uuid.uuid4())

    async def test_current_user(self, test_session, globex_admin):
        user = await AuthService(test_session).get_current_user(globex_admin.id)
        assert user.tenant.slug == "globex"
