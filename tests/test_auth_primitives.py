"""
Tests for password hashing and token signing.
"""

import time

import pytest
from jose import jwt

from auth.jwt import InvalidTokenError, create_token, verify_token
from auth.password import hash_password, verify_password
from config.settings import Settings


class TestPasswordHashing:
    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password("s3cret", rounds=4)
        assert hashed != "s3cret"
        assert hashed.startswith("$2")
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_salt_differs_per_hash(self):
        assert hash_password("same", rounds=4) != hash_password("same", rounds=4)

    def test_default_work_factor_is_ten(self):
        assert hash_password("pw").split("$")[2] == "10"

    def test_malformed_hash_does_not_raise(self):
        assert verify_password("pw", "not-a-bcrypt-hash") is False


class TestTokens:
    def setup_method(self):
        self.settings = Settings(jwt_secret="unit-secret")

    def test_round_trip(self):
        token = create_token("user-123", self.settings)
        assert verify_token(token, self.settings) == "user-123"

    def test_standard_jwt_payload(self):
        token = create_token("user-123", self.settings)
        claims = jwt.decode(token, "unit-secret", algorithms=["HS256"])
        assert claims["id"] == "user-123"
        assert "exp" in claims

    def test_expires_after_one_hour(self):
        token = create_token("user-123", self.settings)
        claims = jwt.get_unverified_claims(token)
        remaining = claims["exp"] - time.time()
        assert 3590 < remaining <= 3600

    def test_wrong_secret_rejected(self):
        token = create_token("user-123", self.settings)
        with pytest.raises(InvalidTokenError):
            verify_token(token, Settings(jwt_secret="other-secret"))

    def test_expired_token_rejected(self):
        expired = Settings(jwt_secret="unit-secret", jwt_expiry_seconds=-10)
        token = create_token("user-123", expired)
        with pytest.raises(InvalidTokenError):
            verify_token(token, self.settings)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            verify_token("not.a.token", self.settings)
