from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from ..dependencies import get_villa_number_service, get_villa_service, require_admin
from ..models import VillaDTO, VillaNumberCreateDTO, VillaNumberDTO, VillaNumberUpdateDTO
from ..services import VillaNumberService, VillaService
from ..session import flash, get_token
from ..templating import GENERIC_ERROR, clean_form, render, validation_messages

router = APIRouter(prefix="/villa-number", tags=["villa-number"])


def _villa_number_form(
    villa_id: Optional[str] = Form(None),
    special_details: Optional[str] = Form(None),
) -> dict:
    return clean_form({"villa_id": villa_id, "special_details": special_details})


def _new_villa_number_form(
    villa_no: Optional[str] = Form(None),
    form: dict = Depends(_villa_number_form),
) -> dict:
    """Create form; on update the unit number comes from the path"""
    return clean_form({"villa_no": villa_no, **form})


def _villa_choices(villa_service: VillaService, token: Optional[str]) -> List[dict]:
    """(value, text) pairs for the villa dropdown"""
    response = villa_service.get_all(token)
    if not response.is_success:
        return []
    return [
        {"value": villa.id, "text": villa.name}
        for villa in (VillaDTO.model_validate(v) for v in response.result or [])
    ]


def _fail(request: Request, template: str, model, messages, villa_service: VillaService):
    context = {
        "model": model,
        "errors": messages or [GENERIC_ERROR],
        "villa_list": _villa_choices(villa_service, get_token(request)),
    }
    return render(request, template, context, status_code=400)


@router.get("/")
def index_villa_number(
    request: Request,
    villa_number_service: VillaNumberService = Depends(get_villa_number_service),
):
    villa_numbers = []
    response = villa_number_service.get_all(get_token(request))
    if response.is_success:
        villa_numbers = [VillaNumberDTO.model_validate(vn) for vn in response.result or []]
    return render(request, "villa_number/index.html", {"villa_numbers": villa_numbers})


@router.get("/create")
def create_villa_number_page(
    request: Request,
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
):
    context = {"model": {}, "villa_list": _villa_choices(villa_service, get_token(request))}
    return render(request, "villa_number/create.html", context)


@router.post("/create")
def create_villa_number(
    request: Request,
    form: dict = Depends(_new_villa_number_form),
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
    villa_number_service: VillaNumberService = Depends(get_villa_number_service),
):
    try:
        model = VillaNumberCreateDTO.model_validate(form)
    except ValidationError as exc:
        return _fail(request, "villa_number/create.html", form, validation_messages(exc), villa_service)

    response = villa_number_service.create(model, get_token(request))
    if response.is_success:
        flash(request, "success", "Villa number created successfully")
        return RedirectResponse(url="/villa-number/", status_code=303)
    return _fail(request, "villa_number/create.html", form, response.error_messages, villa_service)


@router.get("/update/{villa_no}")
def update_villa_number_page(
    villa_no: int,
    request: Request,
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
    villa_number_service: VillaNumberService = Depends(get_villa_number_service),
):
    token = get_token(request)
    response = villa_number_service.get(villa_no, token)
    if not response.is_success:
        return render(request, "not_found.html", status_code=404)

    villa_number = VillaNumberDTO.model_validate(response.result)
    model = VillaNumberUpdateDTO.model_validate(villa_number.model_dump(exclude={"villa"}))
    context = {"model": model.model_dump(), "villa_list": _villa_choices(villa_service, token)}
    return render(request, "villa_number/update.html", context)


@router.post("/update/{villa_no}")
def update_villa_number(
    villa_no: int,
    request: Request,
    form: dict = Depends(_villa_number_form),
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
    villa_number_service: VillaNumberService = Depends(get_villa_number_service),
):
    form["villa_no"] = villa_no
    try:
        model = VillaNumberUpdateDTO.model_validate(form)
    except ValidationError as exc:
        return _fail(request, "villa_number/update.html", form, validation_messages(exc), villa_service)

    response = villa_number_service.update(model, get_token(request))
    if response.is_success:
        flash(request, "success", "Villa number updated successfully")
        return RedirectResponse(url="/villa-number/", status_code=303)
    return _fail(request, "villa_number/update.html", form, response.error_messages, villa_service)


@router.get("/delete/{villa_no}")
def delete_villa_number_page(
    villa_no: int,
    request: Request,
    claims: dict = Depends(require_admin),
    villa_number_service: VillaNumberService = Depends(get_villa_number_service),
):
    response = villa_number_service.get(villa_no, get_token(request))
    if not response.is_success:
        return render(request, "not_found.html", status_code=404)
    return render(request, "villa_number/delete.html", {
        "villa_number": VillaNumberDTO.model_validate(response.result),
    })


@router.post("/delete/{villa_no}")
def delete_villa_number(
    villa_no: int,
    request: Request,
    claims: dict = Depends(require_admin),
    villa_number_service: VillaNumberService = Depends(get_villa_number_service),
):
    response = villa_number_service.delete(villa_no, get_token(request))
    if response.is_success:
        flash(request, "success", "Villa number deleted successfully")
        return RedirectResponse(url="/villa-number/", status_code=303)

    flash(request, "error", response.first_error or GENERIC_ERROR)
    return RedirectResponse(url=f"/villa-number/delete/{villa_no}", status_code=303)
