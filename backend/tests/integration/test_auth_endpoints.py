"""
Integration tests for session handling

Tokens arrive as a Bearer header or the session cookie; the local user
mirror follows the claims of the latest valid session.
"""
from datetime import timedelta

from plastics_catalog.core.config import settings
from plastics_catalog.core.security import create_session_token
from plastics_catalog.models import User


class TestCurrentUser:
    """GET /api/v1/auth/user"""

    def test_bearer_token(self, client, auth_headers):
        response = client.get("/api/v1/auth/user", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "user-123"
        assert data["email"] == "engineer@example.com"
        assert data["firstName"] == "Dana"

    def test_session_cookie(self, client):
        client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token("cookie-user"))

        response = client.get("/api/v1/auth/user")

        assert response.status_code == 200
        assert response.json()["id"] == "cookie-user"

    def test_claims_refresh_mirror(self, client):
        first = create_session_token("user-9", email="old@example.com")
        second = create_session_token("user-9", email="new@example.com", first_name="Kim")

        client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {first}"})
        response = client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {second}"})

        assert response.json()["email"] == "new@example.com"
        assert response.json()["firstName"] == "Kim"

    def test_email_taken_over_by_new_account(self, client, db_session):
        old = create_session_token("user-old", email="shared@example.com")
        new = create_session_token("user-new", email="shared@example.com")

        client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {old}"})
        response = client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {new}"})

        assert response.status_code == 200
        assert response.json()["email"] == "shared@example.com"
        stale = db_session.query(User).filter(User.id == "user-old").one()
        assert stale.email is None

    def test_email_changed_to_one_held_elsewhere(self, client):
        holder = create_session_token("user-a", email="lab@example.com")
        before = create_session_token("user-b", email="b@example.com")
        after = create_session_token("user-b", email="lab@example.com")

        client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {holder}"})
        client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {before}"})
        response = client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {after}"})

        assert response.status_code == 200
        assert response.json()["email"] == "lab@example.com"
        again = client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {holder}"})
        assert again.status_code == 200

    def test_no_session(self, client):
        response = client.get("/api/v1/auth/user")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_expired_token(self, client):
        token = create_session_token("user-1", expires_delta=timedelta(seconds=-1))

        response = client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/v1/auth/user", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401


class TestPublicEndpoints:

    def test_reads_do_not_need_a_session(self, client):
        assert client.get("/api/v1/materials").status_code == 200
        assert client.get("/api/v1/vendors").status_code == 200

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
