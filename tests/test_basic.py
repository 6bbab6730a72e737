"""Smoke tests: the app imports and its plain endpoints answer."""

from tenantnotes import __version__
from tenantnotes.main import app


def test_app_metadata():
    assert app.title == "TenantNotes API"
    assert __version__ == "1.0.0"


def test_routes_registered():
    paths = {getattr(route, "path", None) for route in app.routes}
    for path in (
        "/api/notes/",
        "/api/notes/{note_id}",
        "/api/tenants/{slug}",
        "/api/tenants/{slug}/upgrade",
        "/api/tenants/{slug}/users",
        "/api/auth/login",
        "/api/auth/signup",
        "/api/health/",
        "/health",
    ):
        assert path in paths


async def test_root_and_liveness(async_client):
    assert (await async_client.get("/")).status_code == 200
    resp = await async_client.get("/health")
    assert resp.json() == {"status": "ok"}
