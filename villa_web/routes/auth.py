from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from ..dependencies import get_auth_service
from ..logging_config import get_logger
from ..models import LoginRequestDTO, LoginResponseDTO, RegistrationRequestDTO, UserRole
from ..services import AuthService
from ..session import clear, flash, set_token
from ..templating import GENERIC_ERROR, clean_form, render, validation_messages

router = APIRouter(prefix="/auth", tags=["auth"])

logger = get_logger(__name__)

ROLE_CHOICES = [role.value for role in UserRole]


@router.get("/login")
def login_page(request: Request):
    return render(request, "auth/login.html", {"model": {}})


@router.post("/login")
def login(
    request: Request,
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    auth_service: AuthService = Depends(get_auth_service),
):
    form = clean_form({"username": username, "password": password})
    try:
        model = LoginRequestDTO.model_validate(form)
    except ValidationError as exc:
        return render(request, "auth/login.html", {"model": form, "errors": validation_messages(exc)}, 400)

    response = auth_service.login(model)
    if response.is_success:
        login_response = LoginResponseDTO.model_validate(response.result)
        if login_response.token:
            set_token(request, login_response.token)
            flash(request, "success", f"Welcome, {login_response.user.name or login_response.user.username}")
            return RedirectResponse(url="/", status_code=303)

    logger.info("Login failed")
    errors = response.error_messages or [GENERIC_ERROR]
    return render(request, "auth/login.html", {"model": {"username": username}, "errors": errors}, 400)


@router.get("/register")
def register_page(request: Request):
    return render(request, "auth/register.html", {"model": {}, "roles": ROLE_CHOICES})


@router.post("/register")
def register(
    request: Request,
    username: Optional[str] = Form(None),
    name: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    auth_service: AuthService = Depends(get_auth_service),
):
    form = clean_form({"username": username, "name": name, "password": password, "role": role})
    context = {"model": {"username": username, "name": name, "role": role}, "roles": ROLE_CHOICES}
    try:
        model = RegistrationRequestDTO.model_validate(form)
    except ValidationError as exc:
        context["errors"] = validation_messages(exc)
        return render(request, "auth/register.html", context, 400)

    response = auth_service.register(model)
    if response.is_success:
        flash(request, "success", "Registration successful, please log in")
        return RedirectResponse(url="/auth/login", status_code=303)

    context["errors"] = response.error_messages or [GENERIC_ERROR]
    return render(request, "auth/register.html", context, 400)


@router.get("/logout")
def logout(request: Request):
    clear(request)
    return RedirectResponse(url="/", status_code=303)


@router.get("/access-denied")
def access_denied(request: Request):
    return render(request, "auth/access_denied.html", status_code=403)
