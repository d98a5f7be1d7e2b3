"""
Unit tests for session token utilities

Token creation, validation and identity resolution
"""
from datetime import datetime, timedelta, timezone

import jwt

from plastics_catalog.core.config import settings


class TestCreateSessionToken:
    """Test session token generation"""

    def test_token_is_a_jwt(self):
        from plastics_catalog.core.security import create_session_token

        token = create_session_token("user-1")

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_token_carries_identity_claims(self):
        from plastics_catalog.core.security import create_session_token

        token = create_session_token("user-1", email="a@example.com", first_name="Ana")
        payload = jwt.decode(token, settings.AUTH_SECRET_KEY, algorithms=[settings.AUTH_ALGORITHM])

        assert payload["sub"] == "user-1"
        assert payload["email"] == "a@example.com"
        assert payload["first_name"] == "Ana"
        assert "exp" in payload
        assert "jti" in payload

    def test_token_default_expiry(self):
        from plastics_catalog.core.security import create_session_token

        before = datetime.now(timezone.utc)
        token = create_session_token("user-1")
        payload = jwt.decode(token, settings.AUTH_SECRET_KEY, algorithms=[settings.AUTH_ALGORITHM])

        expires = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        expected = before + timedelta(minutes=settings.SESSION_TOKEN_EXPIRE_MINUTES)
        assert abs((expires - expected).total_seconds()) < 5

    def test_tokens_are_unique(self):
        from plastics_catalog.core.security import create_session_token

        assert create_session_token("user-1") != create_session_token("user-1")


class TestDecodeSessionToken:
    """Test session token validation"""

    def test_valid_token(self):
        from plastics_catalog.core.security import create_session_token, decode_session_token

        payload = decode_session_token(create_session_token("user-1"))

        assert payload is not None
        assert payload["sub"] == "user-1"

    def test_expired_token(self):
        from plastics_catalog.core.security import create_session_token, decode_session_token

        token = create_session_token("user-1", expires_delta=timedelta(seconds=-1))

        assert decode_session_token(token) is None

    def test_tampered_token(self):
        from plastics_catalog.core.security import create_session_token, decode_session_token

        token = create_session_token("user-1")
        tampered = token[:-4] + ("aaaa" if not token.endswith("aaaa") else "bbbb")

        assert decode_session_token(tampered) is None

    def test_wrong_key(self):
        from plastics_catalog.core.security import decode_session_token

        token = jwt.encode(
            {"sub": "user-1", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            "some-other-key",
            algorithm="HS256",
        )

        assert decode_session_token(token) is None

    def test_missing_subject(self):
        from plastics_catalog.core.security import decode_session_token

        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            settings.AUTH_SECRET_KEY,
            algorithm=settings.AUTH_ALGORITHM,
        )

        assert decode_session_token(token) is None

    def test_garbage(self):
        from plastics_catalog.core.security import decode_session_token

        assert decode_session_token("not-a-token") is None


class TestIdentityFromToken:

    def test_identity_fields(self):
        from plastics_catalog.core.security import create_session_token, identity_from_token

        token = create_session_token(
            "user-1",
            email="a@example.com",
            first_name="Ana",
            last_name="Silva",
            profile_image_url="https://img.example.com/a.png",
        )
        identity = identity_from_token(token)

        assert identity.user_id == "user-1"
        assert identity.email == "a@example.com"
        assert identity.first_name == "Ana"
        assert identity.last_name == "Silva"
        assert identity.profile_image_url == "https://img.example.com/a.png"

    def test_invalid_token_gives_none(self):
        from plastics_catalog.core.security import identity_from_token

        assert identity_from_token("not-a-token") is None
