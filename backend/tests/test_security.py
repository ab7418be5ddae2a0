"""Tests for password hashing and access tokens."""

from datetime import timedelta

import jwt
import pytest

from campaignhub.core.errors import InvalidToken
from campaignhub.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_round_trip():
    hashed = hash_password("secret1", rounds=4)
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)


def test_only_first_72_bytes_are_significant():
    hashed = hash_password("p" * 80, rounds=4)
    assert verify_password("p" * 80, hashed)
    assert verify_password("p" * 72 + "different", hashed)
    assert not verify_password("p" * 71, hashed)


def test_verify_rejects_non_bcrypt_hash():
    assert not verify_password("secret1", "not-a-hash")
    assert not verify_password("secret1", None)


def test_token_binds_user_and_email():
    token = create_access_token("user-1", "a@x.com", secret="k")
    payload = decode_access_token(token, secret="k")
    assert payload["sub"] == "user-1"
    assert payload["email"] == "a@x.com"
    # seven day window
    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())


def test_token_signed_with_other_key_is_invalid():
    token = create_access_token("user-1", "a@x.com", secret="k1")
    with pytest.raises(InvalidToken):
        decode_access_token(token, secret="k2")


def test_expired_token_is_invalid():
    token = create_access_token("user-1", "a@x.com", secret="k", expires_delta=timedelta(seconds=-1))
    with pytest.raises(InvalidToken):
        decode_access_token(token, secret="k")


def test_token_without_email_is_invalid():
    token = jwt.encode({"sub": "user-1", "exp": 9999999999}, "k", algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_access_token(token, secret="k")


def test_garbage_token_is_invalid():
    with pytest.raises(InvalidToken):
        decode_access_token("not.a.token", secret="k")
