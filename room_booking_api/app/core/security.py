"""
Security helpers for password hashing and bearer token authentication.

Tokens are compact JSON Web Tokens signed with HMAC‑SHA256 and
base64url encoded.  They carry the user's ``id`` and ``email`` and,
only when ``settings.access_token_expire_minutes`` is positive, an
``exp`` timestamp.  Without it a token stays valid until the secret
key is rotated.

Passwords are hashed with PBKDF2‑HMAC‑SHA256 and a random salt per
password.  The iteration count comes from
``settings.password_hash_iterations``.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader

from .config import settings
from .errors import InvalidToken, MissingToken


logger = logging.getLogger(__name__)


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed token with the given claims.

    Parameters
    ----------
    data : dict
        Claims to embed in the token, e.g. ``{"id": 1, "email": "a@b.c"}``.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.  Zero means no
        ``exp`` claim is written.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = settings.access_token_expire_minutes * 60
    if expires_delta:
        to_encode["exp"] = int(time.time()) + expires_delta
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a token.

    Checks the structure, the HMAC signature and, if present, the
    ``exp`` claim.  Returns the claims on success, otherwise ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
    except ValueError:
        return None
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(expected_sig, actual_sig):
        return None
    try:
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is not None and int(data["exp"]) < int(time.time()):
        return None
    return data


security = APIKeyHeader(name="Authorization", auto_error=False, description="Bearer <token>")


def _extract_token(authorization: Optional[str]) -> str:
    """Return the credentials part of an ``Authorization`` header.

    The scheme word is not checked: ``Basic xyz`` yields ``xyz``, which
    then fails verification.  A header without a second part yields an
    empty string.
    """
    if not authorization:
        return ""
    parts = authorization.strip().split()
    return parts[1] if len(parts) > 1 else ""


def get_current_user(authorization: Optional[str] = Depends(security)) -> Dict[str, Any]:
    """Dependency that returns the claims of the authenticated caller.

    A request without a token fails with ``MissingToken`` (401); a
    token that does not verify fails with ``InvalidToken`` (403).
    """
    token = _extract_token(authorization)
    if not token:
        raise MissingToken()
    payload = decode_access_token(token)
    if not payload or "id" not in payload:
        logger.warning("Rejected invalid bearer token")
        raise InvalidToken()
    return payload


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    is ``iterations$salthex$hashhex`` so that changing the configured
    cost later does not invalidate stored hashes.
    """
    salt = os.urandom(16)
    iterations = settings.password_hash_iterations
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, iterations)
    return f"{iterations}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored hash.

    Accepts ``iterations$salthex$hashhex`` as well as the shorter
    ``salthex$hashhex`` form, which implies the configured cost.
    Malformed stored values never match.
    """
    try:
        parts = hashed_password.split('$')
        if len(parts) == 3:
            iterations = int(parts[0])
            salt_hex, hash_hex = parts[1], parts[2]
        elif len(parts) == 2:
            iterations = settings.password_hash_iterations
            salt_hex, hash_hex = parts
        else:
            return False
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except (AttributeError, ValueError):
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, iterations)
    return hmac.compare_digest(dk, stored_hash)
