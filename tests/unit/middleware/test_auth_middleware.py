"""Unit tests for middleware auth (tenantnotes/middleware/auth.py)."""

import uuid
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from tenantnotes.middleware import auth as auth_module
from tenantnotes.middleware.auth import JWTBearer, get_current_user_id


def build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/token")
    async def token(raw=Depends(JWTBearer())):
        return {"token": raw}

    @app.get("/me")
    async def me(user_id=Depends(get_current_user_id)):
        return {"user_id": str(user_id)}

    return app


def _make_bearer(token: Optional[str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token is not None else {}


def _fake_decoder(result):
    async def _decode(token):
        return result

    return _decode


def test_jwtbearer_returns_raw_token():
    client = TestClient(build_app())
    resp = client.get("/token", headers=_make_bearer("abc.def.ghi"))
    assert resp.status_code == 200
    assert resp.json() == {"token": "abc.def.ghi"}


def test_jwtbearer_rejects_missing_header():
    client = TestClient(build_app())
    resp = client.get("/token")
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_jwtbearer_rejects_wrong_scheme():
    client = TestClient(build_app())
    resp = client.get("/token", headers={"Authorization": "Basic abc"})
    assert resp.status_code == 401


def test_get_current_user_id_valid(monkeypatch):
    uid = uuid.uuid4()
    monkeypatch.setattr(auth_module, "get_user_id_from_token", _fake_decoder(uid))

    client = TestClient(build_app())
    resp = client.get("/me", headers=_make_bearer("valid"))
    assert resp.status_code == 200
    assert resp.json() == {"user_id": str(uid)}


def test_get_current_user_id_invalid(monkeypatch):
    monkeypatch.setattr(auth_module, "get_user_id_from_token", _fake_decoder(None))

    client = TestClient(build_app())
    resp = client.get("/me", headers=_make_bearer("invalid"))
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Invalid token or expired token"}
