from typing import Iterator, Optional

import httpx
from fastapi import Depends, Request

from .config import settings
from .services import AuthService, VillaNumberService, VillaService
from .session import get_claims


class LoginRequired(Exception):
    """No usable session token; the user is sent to the login page."""


class AccessDenied(Exception):
    """Logged in, but without the role the page needs."""


def get_api_client() -> Iterator[httpx.Client]:
    with httpx.Client(base_url=settings.villa_api_url, timeout=settings.api_timeout) as client:
        yield client


def get_villa_service(client: httpx.Client = Depends(get_api_client)) -> VillaService:
    return VillaService(client)


def get_villa_number_service(client: httpx.Client = Depends(get_api_client)) -> VillaNumberService:
    return VillaNumberService(client)


def get_auth_service(client: httpx.Client = Depends(get_api_client)) -> AuthService:
    return AuthService(client)


def current_claims(request: Request) -> Optional[dict]:
    return get_claims(request)


def require_login(claims: Optional[dict] = Depends(current_claims)) -> dict:
    if not claims:
        raise LoginRequired()
    return claims


def require_admin(claims: dict = Depends(require_login)) -> dict:
    if claims.get("role") != "admin":
        raise AccessDenied()
    return claims
