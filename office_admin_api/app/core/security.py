"""
Security helpers for password hashing and session authentication.

Logins are server-side sessions: ``open_session`` records a random
session id in the store and returns a signed token carrying it.  The
token is a lightweight JSON Web Token using HMAC-SHA256 signatures and
base64url encoding, with an expiration timestamp (``exp``).  Browser
clients receive it as an HttpOnly cookie, API clients send it back as
``Authorization: Bearer <token>``.  ``close_session`` forgets the
session id, which invalidates every copy of the token immediately.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random salt.
"""

import base64
import binascii
import hashlib
import hmac
import json
import logging
import os
import secrets
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings, get_settings
from .store import Store, get_store


logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], secret: str, expires_in: int) -> str:
    """Create a signed token with the given payload.

    The payload is extended with an ``exp`` field representing the
    expiration time as a UNIX timestamp.  The token is a string of the
    form ``header.payload.signature``, each part base64url encoded.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "admin", "sid": ...}``).
    secret : str
        Signing key, normally ``Settings.secret_key``.
    expires_in : int
        Lifetime of the token in seconds.

    Returns
    -------
    str
        A signed token.
    """
    to_encode = dict(data)
    to_encode["exp"] = int(time.time()) + expires_in
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a token.

    Returns the payload if the signature matches and ``exp`` lies in the
    future, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(_sign(signing_input, secret), actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


def open_session(store: Store, user: Dict[str, Any], app_settings: Settings) -> str:
    """Start a login session for ``user`` and return its token."""
    session_id = secrets.token_urlsafe(24)
    store.sessions[session_id] = user["id"]
    logger.info("Opened session for user %s", user["username"])
    return create_access_token(
        {"sub": user["username"], "sid": session_id},
        app_settings.secret_key,
        app_settings.access_token_expire_minutes * 60,
    )


def close_session(store: Store, session_id: str) -> bool:
    return store.sessions.pop(session_id, None) is not None


security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Dependency that retrieves the current authenticated user.

    The token is taken from the ``Authorization`` header, falling back to
    the session cookie.  If it is missing, invalid, expired, or its
    session has been closed, an HTTP 401 error is raised.  On success the
    stored user record (without the password hash) is returned together
    with the ``session_id``.
    """
    token = credentials.credentials if credentials is not None else None
    if not token:
        token = request.cookies.get(app_settings.session_cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(token, app_settings.secret_key)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    session_id = payload.get("sid")
    user_id = store.sessions.get(session_id) if session_id else None
    user = store.users.get(user_id) if user_id is not None else None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user.pop("password", None)
    user["session_id"] = session_id
    return user


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A 16-byte random salt is generated for each password.  The result
    holds the salt and the hash in hex separated by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``salt$hash`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
