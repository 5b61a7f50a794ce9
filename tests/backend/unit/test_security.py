"""
Unit tests for core.security module.
Tests password hashing and the signed access tokens issued at login.
"""
import datetime as dt

import jwt
import pytest

from storefront.core import security
from storefront.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_is_salted_and_not_plain_text(self):
        """Hashing the same password twice gives two different argon2 hashes."""
        hash1 = hash_password("비밀번호123")
        hash2 = hash_password("비밀번호123")
        assert hash1 != hash2
        assert hash1.startswith("$argon2")
        assert "비밀번호123" not in hash1

    def test_verify_password(self):
        hashed = hash_password("StrongPass!23")
        assert verify_password("StrongPass!23", hashed) is True
        assert verify_password("strongpass!23", hashed) is False
        assert verify_password("", hashed) is False


class TestAccessTokens:
    """Tests for JWT creation and validation."""

    def test_token_carries_user_id_and_role(self):
        payload = decode_access_token(create_access_token("7", "admin"))
        assert payload["sub"] == "7"
        assert payload["role"] == "admin"

    def test_token_expiry_matches_configuration(self):
        payload = decode_access_token(create_access_token("1", "user"))
        now_ts = dt.datetime.now(dt.timezone.utc).timestamp()
        assert payload["exp"] > now_ts
        diff_minutes = (payload["exp"] - payload["iat"]) / 60
        assert abs(diff_minutes - ACCESS_TOKEN_EXPIRE_MINUTES) < 1

    def test_unsigned_legacy_token_is_rejected(self):
        """The old "fake-<id>-<timestamp>" format is not a valid token."""
        with pytest.raises(jwt.InvalidTokenError):
            decode_access_token("fake-1-1700000000000")

    def test_token_signed_with_other_secret_is_rejected(self):
        forged = jwt.encode({"sub": "1", "role": "admin"}, "not-the-secret", algorithm="HS256")
        with pytest.raises(jwt.InvalidSignatureError):
            decode_access_token(forged)

    def test_expired_token_is_rejected(self):
        past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(minutes=5)
        expired = jwt.encode(
            {"sub": "1", "role": "user", "iat": past - dt.timedelta(hours=1), "exp": past},
            security.JWT_SECRET,
            algorithm=security.JWT_ALG,
        )
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(expired)

    def test_different_users_get_different_tokens(self):
        token1 = create_access_token("1", "user")
        token2 = create_access_token("2", "user")
        assert token1 != token2
        assert decode_access_token(token1)["sub"] != decode_access_token(token2)["sub"]


class TestUserIdFromToken:
    """Tests for extracting the numeric user id used by the auth dependency."""

    def test_returns_int_id(self):
        assert security.user_id_from_token(create_access_token("42", "user")) == 42

    @pytest.mark.parametrize("sub", [None, "abc", ""])
    def test_unusable_subject_is_invalid(self, sub):
        claims = {"role": "user"} if sub is None else {"sub": sub, "role": "user"}
        token = jwt.encode(claims, security.JWT_SECRET, algorithm=security.JWT_ALG)
        with pytest.raises(jwt.InvalidTokenError):
            security.user_id_from_token(token)


def test_corrupted_hash_counts_as_wrong_password():
    assert verify_password("anything", "not-a-hash") is False
