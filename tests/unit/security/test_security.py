"""Unit tests for JWT and password helpers."""

import uuid
from datetime import timedelta

import pytest
from jose import jwt

from tenantnotes.config import get_settings
from tenantnotes.core.redis_client import get_redis_client
from tenantnotes.security.jwt import (
    blacklist_token,
    create_access_token,
    decode_access_token,
    get_user_id_from_token,
)
from tenantnotes.security.password import hash_password, needs_update, verify_password


class FakeRedis:
    """Minimal async stand-in for redis.asyncio.Redis."""

    def __init__(self):
        self.storage = {}

    async def setex(self, key, expire, value):
        self.storage[key] = (value, expire)
        return True

    async def exists(self, key):
        return 1 if key in self.storage else 0


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(get_redis_client(), "redis", fake)
    return fake


class TestJWT:
    async def test_round_trip_user_id(self):
        uid = uuid.uuid4()
        token = create_access_token({"sub": str(uid)})
        assert await get_user_id_from_token(token) == uid

    async def test_expired_token(self):
        token = create_access_token({"sub": str(uuid.uuid4())}, timedelta(seconds=-1))
        assert await decode_access_token(token) is None

    async def test_garbage_token(self):
        assert await decode_access_token("not.a.jwt") is None
        assert await get_user_id_from_token("not.a.jwt") is None

    async def test_wrong_type_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": str(uuid.uuid4()), "type": "refresh"},
            settings.secret_key,
            algorithm=settings.algorithm,
        )
        assert await decode_access_token(token) is None

    async def test_bad_subject(self):
        token = create_access_token({"sub": "not-a-uuid"})
        assert await get_user_id_from_token(token) is None

    async def test_blacklist_without_redis_is_noop(self):
        token = create_access_token({"sub": str(uuid.uuid4())})
        assert await blacklist_token(token) is False
        assert await decode_access_token(token) is not None

    async def test_blacklisted_token_rejected(self, fake_redis):
        token = create_access_token({"sub": str(uuid.uuid4())})
        assert await blacklist_token(token) is True

        (key,) = fake_redis.storage
        assert key.startswith("blacklist:")
        assert 0 < fake_redis.storage[key][1] <= get_settings().access_token_expire_minutes * 60
        assert await decode_access_token(token) is None


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("correct horse")
        assert hashed != "correct horse"
        assert verify_password("correct horse", hashed)
        assert not verify_password("wrong", hashed)
        assert needs_update(hashed) is False

    def test_long_passwords_are_not_truncated(self):
        base = "x" * 80
        hashed = hash_password(base + "a")
        assert not verify_password(base + "b", hashed)

    def test_malformed_hash_never_matches(self):
        assert verify_password("anything", "not-a-hash") is False
        assert needs_update("not-a-hash") is False
