"""Best-effort claim extraction from unverified JWT access tokens."""

from __future__ import annotations

from typing import Any, Dict

import jwt

_EMAIL_CLAIMS = ("email", "preferred_username", "sub")


def decode_unverified_payload(token: str) -> Dict[str, Any]:
    """Decode the payload segment of a token-shaped string.

    The signature is not checked. Raises ``jwt.PyJWTError`` when the value is
    not a decodable JWT.
    """
    return jwt.decode(
        token,
        options={"verify_signature": False, "verify_exp": False, "verify_aud": False},
    )


def extract_email_from_jwt(token: str) -> str:
    """Return the email carried by ``token`` or an empty string."""
    if not token or token.count(".") != 2:
        return ""
    try:
        payload = decode_unverified_payload(token)
    except jwt.PyJWTError:
        return ""

    for claim in _EMAIL_CLAIMS:
        value = payload.get(claim)
        if not isinstance(value, str) or not value:
            continue
        # Only the dedicated claim is trusted without an '@'.
        if claim == "email" or "@" in value:
            return value
    return ""


__all__ = ["decode_unverified_payload", "extract_email_from_jwt"]
