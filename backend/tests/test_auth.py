"""Bearer token handling and role mapping."""

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.core import auth


@pytest.fixture
def verified(monkeypatch):
    """Firebase verification stub: returns `verified['claims']`, logs calls in `verified['calls']`."""
    state = {"claims": {}, "calls": []}

    def fake_verify(id_token, app=None, check_revoked=False):
        state["calls"].append((id_token, check_revoked))
        if id_token == "bad":
            raise ValueError("malformed")
        return state["claims"]

    monkeypatch.setattr(auth, "init_firebase", lambda: None)
    monkeypatch.setattr(auth.fb_auth, "verify_id_token", fake_verify)
    return state


def _bearer(token):
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestRoles:
    def test_anonymous_is_guest(self):
        principal = auth.principal_from_claims({"uid": "u1", "firebase": {"sign_in_provider": "anonymous"}})
        assert principal.role == "guest"

    def test_admin_claim(self):
        principal = auth.principal_from_claims({"uid": "u1", "admin": True, "email": "a@example.com"})
        assert principal.role == "admin"
        assert principal.email == "a@example.com"

    def test_anonymous_wins_over_admin_claim(self):
        principal = auth.principal_from_claims(
            {"uid": "u1", "admin": True, "firebase": {"sign_in_provider": "anonymous"}}
        )
        assert principal.role == "guest"

    def test_plain_user(self):
        principal = auth.principal_from_claims({"user_id": "u2", "admin": "yes", "name": "Ana"})
        assert principal.uid == "u2"
        assert principal.role == "user"
        assert principal.display_name == "Ana"

    def test_missing_uid(self):
        with pytest.raises(HTTPException) as exc:
            auth.principal_from_claims({"email": "x@example.com"})
        assert exc.value.status_code == 401


class TestGetPrincipal:
    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        with pytest.raises(HTTPException) as exc:
            await auth.get_principal(None)
        assert exc.value.status_code == 401
        assert exc.value.headers == {"WWW-Authenticate": "Bearer"}

    @pytest.mark.asyncio
    async def test_verifies_with_revocation_check(self, verified):
        verified["claims"].update(uid="u1", admin=True)

        principal = await auth.get_principal(_bearer("tok"))

        assert principal.uid == "u1"
        assert principal.role == "admin"
        assert verified["calls"] == [("tok", True)]

    @pytest.mark.asyncio
    async def test_invalid_token(self, verified):
        with pytest.raises(HTTPException) as exc:
            await auth.get_principal(_bearer("bad"))
        assert exc.value.status_code == 401


class TestBearerHeader:
    def test_non_bearer_scheme_is_unauthorized(self, client):
        response = client.get("/admin/products", headers={"Authorization": "Basic dXNlcjpwYXNz"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_admin_token_reaches_admin_routes(self, client, verified):
        verified["claims"].update(uid="admin-9", admin=True)

        response = client.get("/admin/products", headers={"Authorization": "Bearer tok"})

        assert response.status_code == 200
        assert response.json()["result"] == []

    def test_user_token_is_forbidden_on_admin_routes(self, client, verified):
        verified["claims"].update(uid="user-9")

        response = client.get("/admin/products", headers={"Authorization": "Bearer tok"})

        assert response.status_code == 403
