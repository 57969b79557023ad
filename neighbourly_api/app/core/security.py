"""
Security helpers for cookie-based JWT authentication.

Tokens are HS256 JSON Web Tokens built from base64url segments and an
HMAC-SHA256 signature.  The claims are whatever the client posted to
``/jwt`` (normally ``{"email": ...}``) extended with an ``exp``
timestamp.  The token travels in an httpOnly cookie named ``token``.

Two dependencies guard routes:

* :func:`get_current_user` rejects requests without a valid token.
* :func:`require_role` additionally looks the caller up in the
  ``users`` collection and checks the stored ``role`` field.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie

from ..schemas.user import ROLE_ADMIN, ROLE_WORKER
from .config import settings
from .db import USERS, get_collection


logger = logging.getLogger(__name__)


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given claims.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"email": "a@b.c"}``).
        Any ``exp`` supplied by the caller is overwritten.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60`` (365 days).

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    to_encode = dict(data)
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Checks the segment count, the HMAC signature (constant-time) and the
    ``exp`` claim.  Returns the claims on success, ``None`` otherwise.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(_sign(signing_input, settings.secret_key), actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except ValueError:
        # binascii, unicode and JSON decoding errors all derive from ValueError
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, (int, float)) or int(exp) < int(time.time()):
        return None
    return data


token_cookie = APIKeyCookie(name=settings.token_cookie_name, auto_error=False)


def get_current_user(token: Optional[str] = Depends(token_cookie)) -> Dict[str, Any]:
    """Dependency that returns the claims of the caller's token cookie.

    Raises HTTP 401 when the cookie is missing or the token does not
    verify.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized access",
        )
    payload = decode_access_token(token)
    if payload is None:
        logger.warning("Rejected invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized access",
        )
    return payload


# ---------------------------------------------------------------------------
# Role-based access control
# ---------------------------------------------------------------------------

def require_role(role: str) -> Callable[..., Dict[str, Any]]:
    """Dependency factory enforcing that the caller's stored role is ``role``.

    The role is read from the ``users`` document matching the token's
    ``email`` claim, not from the token itself, so role changes take
    effect without a new login.  Unknown users and role mismatches are
    answered with HTTP 401.
    """

    def _role_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        email = current_user.get("email")
        user = get_collection(USERS).find_one({"email": email}) if email else None
        if not user or user.get("role") != role:
            logger.warning("User %s denied access requiring role %s", email, role)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized Access",
            )
        return current_user

    return _role_dependency


verify_admin = require_role(ROLE_ADMIN)
verify_worker = require_role(ROLE_WORKER)
