from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from .session import get_claims, pop_flashes

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

GENERIC_ERROR = "Error encountered."


def render(request: Request, name: str, context: Optional[dict] = None, status_code: int = 200):
    """Render a page with the session user and any pending flash messages"""
    claims = get_claims(request) or {}
    page_context = {
        "current_user": claims.get("sub"),
        "current_role": claims.get("role"),
        "flashes": pop_flashes(request),
    }
    page_context.update(context or {})
    return templates.TemplateResponse(request, name, page_context, status_code=status_code)


def validation_messages(exc: ValidationError) -> list:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{field}: {error.get('msg')}" if field else error.get("msg"))
    return messages


def clean_form(data: dict) -> dict:
    """Drop blank form fields so model defaults and 'field required' errors apply"""
    return {key: value for key, value in data.items() if value not in (None, "")}
