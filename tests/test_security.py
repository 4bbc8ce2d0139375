from datetime import datetime, timedelta, timezone

from jose import jwt

from villa_api.config import settings
from villa_api.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from villa_api.models.user import UserRole


class TestPasswordHashing:
    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = get_password_hash("secret")
        assert hashed != "secret"
        assert verify_password("secret", hashed)

    def test_wrong_password_does_not_verify(self):
        assert not verify_password("wrong", get_password_hash("secret"))

    def test_same_password_hashes_differently(self):
        assert get_password_hash("secret") != get_password_hash("secret")

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("secret", "not-a-bcrypt-hash") is False


class TestAccessToken:
    def test_default_expiry_is_seven_days(self):
        token = create_access_token({"sub": "alice", "role": "customer"})
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])

        expected = datetime.now(timezone.utc) + timedelta(days=7)
        assert abs(claims["exp"] - expected.timestamp()) < 60
        assert claims["sub"] == "alice"
        assert claims["role"] == "customer"

    def test_decode_returns_identity(self):
        token = create_access_token({"sub": "admin", "role": "admin"})
        token_data = decode_access_token(token)
        assert token_data.username == "admin"
        assert token_data.role == UserRole.admin

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "alice"}, expires_delta=timedelta(seconds=-10))
        assert decode_access_token(token) is None

    def test_token_signed_with_other_secret_is_rejected(self):
        token = jwt.encode({"sub": "alice"}, "another-secret", algorithm="HS256")
        assert decode_access_token(token) is None

    def test_garbage_is_rejected(self):
        assert decode_access_token("not.a.token") is None

    def test_token_without_subject_is_rejected(self):
        assert decode_access_token(create_access_token({"role": "admin"})) is None
