"""
Tests for password hashing and session tokens
"""
import time

import pytest

from office_admin_api.app.core.config import Settings
from office_admin_api.app.core.security import (
    close_session,
    create_access_token,
    decode_access_token,
    hash_password,
    open_session,
    verify_password,
)
from office_admin_api.app.core.store import Store

SECRET = "test-secret-key-minimum-32-chars-long"


@pytest.mark.unit
class TestPasswords:
    """Tests for PBKDF2 password hashes"""

    def test_hash_verifies(self):
        hashed = hash_password("password")
        assert verify_password("password", hashed) is True
        assert verify_password("Password", hashed) is False

    def test_hash_is_salted(self):
        assert hash_password("password") != hash_password("password")

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("password", "not-a-hash") is False
        assert verify_password("password", "zz$zz") is False


@pytest.mark.unit
class TestTokens:
    """Tests for signed tokens"""

    def test_round_trip(self):
        token = create_access_token({"sub": "admin", "sid": "abc"}, SECRET, 60)
        payload = decode_access_token(token, SECRET)
        assert payload["sub"] == "admin"
        assert payload["sid"] == "abc"
        assert payload["exp"] > time.time()

    def test_wrong_secret_rejected(self):
        token = create_access_token({"sub": "admin"}, SECRET, 60)
        assert decode_access_token(token, "another-secret") is None

    def test_expired_token_rejected(self):
        token = create_access_token({"sub": "admin"}, SECRET, -10)
        assert decode_access_token(token, SECRET) is None

    def test_tampered_payload_rejected(self):
        header, _, signature = create_access_token({"sub": "admin"}, SECRET, 60).split(".")
        forged_payload = create_access_token({"sub": "root"}, "other", 60).split(".")[1]
        assert decode_access_token(f"{header}.{forged_payload}.{signature}", SECRET) is None

    @pytest.mark.parametrize("token", ["", "abc", "a.b", "a.b.c.d", "!!!.???.***"])
    def test_garbage_rejected(self, token):
        assert decode_access_token(token, SECRET) is None


@pytest.mark.unit
def test_sessions_open_and_close():
    store = Store()
    user = store.users.insert({"username": "admin", "password": "x", "employee_id": None})
    token = open_session(store, user, Settings(secret_key=SECRET))
    session_id = decode_access_token(token, SECRET)["sid"]
    assert store.sessions == {session_id: user["id"]}
    assert close_session(store, session_id) is True
    assert close_session(store, session_id) is False
