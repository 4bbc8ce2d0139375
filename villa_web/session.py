"""
Session state for the frontend: the API bearer token and one-shot flash messages.

The role shown to templates and used to gate admin pages is read from the
token's claims without verifying the signature; the API verifies it on every
call that matters.
"""

import time
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

SESSION_TOKEN = "JWToken"
FLASH_KEYS = ("success", "error")


def set_token(request: Request, token: str) -> None:
    request.session[SESSION_TOKEN] = token


def get_token(request: Request) -> Optional[str]:
    return request.session.get(SESSION_TOKEN)


def clear(request: Request) -> None:
    request.session.clear()


def get_claims(request: Request) -> Optional[dict]:
    """Claims of the session token, or None when absent, unreadable or expired"""
    token = get_token(request)
    if not token:
        return None
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return None
    exp = claims.get("exp")
    if exp is not None and exp < time.time():
        return None
    return claims


def flash(request: Request, kind: str, message: str) -> None:
    request.session[kind] = message


def pop_flashes(request: Request) -> dict:
    return {kind: request.session.pop(kind) for kind in FLASH_KEYS if kind in request.session}
