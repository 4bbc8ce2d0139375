from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from ..dependencies import get_villa_service, require_admin
from ..models import VillaCreateDTO, VillaDTO, VillaUpdateDTO
from ..services import VillaService
from ..session import flash, get_token
from ..templating import GENERIC_ERROR, clean_form, render, validation_messages

router = APIRouter(prefix="/villa", tags=["villa"])


def _villa_form(
    name: Optional[str] = Form(None),
    details: Optional[str] = Form(None),
    rate: Optional[str] = Form(None),
    sqft: Optional[str] = Form(None),
    capacity: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None),
    amenity: Optional[str] = Form(None),
) -> dict:
    return clean_form({
        "name": name, "details": details, "rate": rate, "sqft": sqft,
        "capacity": capacity, "image_url": image_url, "amenity": amenity,
    })


def _fail(request: Request, template: str, model, messages) -> object:
    return render(request, template, {"model": model, "errors": messages or [GENERIC_ERROR]}, status_code=400)


@router.get("/")
def index_villa(request: Request, villa_service: VillaService = Depends(get_villa_service)):
    villas = []
    response = villa_service.get_all(get_token(request))
    if response.is_success:
        villas = [VillaDTO.model_validate(v) for v in response.result or []]
    return render(request, "villa/index.html", {"villas": villas})


@router.get("/create")
def create_villa_page(request: Request, claims: dict = Depends(require_admin)):
    return render(request, "villa/create.html", {"model": {}})


@router.post("/create")
def create_villa(
    request: Request,
    form: dict = Depends(_villa_form),
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
):
    try:
        model = VillaCreateDTO.model_validate(form)
    except ValidationError as exc:
        return _fail(request, "villa/create.html", form, validation_messages(exc))

    response = villa_service.create(model, get_token(request))
    if response.is_success:
        flash(request, "success", "Villa created successfully")
        return RedirectResponse(url="/villa/", status_code=303)
    return _fail(request, "villa/create.html", form, response.error_messages)


@router.get("/update/{villa_id}")
def update_villa_page(
    villa_id: int,
    request: Request,
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
):
    response = villa_service.get(villa_id, get_token(request))
    if not response.is_success:
        return render(request, "not_found.html", status_code=404)
    villa = VillaDTO.model_validate(response.result)
    model = VillaUpdateDTO.model_validate(villa.model_dump())
    return render(request, "villa/update.html", {"model": model.model_dump()})


@router.post("/update/{villa_id}")
def update_villa(
    villa_id: int,
    request: Request,
    form: dict = Depends(_villa_form),
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
):
    form["id"] = villa_id
    try:
        model = VillaUpdateDTO.model_validate(form)
    except ValidationError as exc:
        return _fail(request, "villa/update.html", form, validation_messages(exc))

    response = villa_service.update(model, get_token(request))
    if response.is_success:
        flash(request, "success", "Villa updated successfully")
        return RedirectResponse(url="/villa/", status_code=303)
    return _fail(request, "villa/update.html", form, response.error_messages)


@router.get("/delete/{villa_id}")
def delete_villa_page(
    villa_id: int,
    request: Request,
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
):
    response = villa_service.get(villa_id, get_token(request))
    if not response.is_success:
        return render(request, "not_found.html", status_code=404)
    return render(request, "villa/delete.html", {"villa": VillaDTO.model_validate(response.result)})


@router.post("/delete/{villa_id}")
def delete_villa(
    villa_id: int,
    request: Request,
    claims: dict = Depends(require_admin),
    villa_service: VillaService = Depends(get_villa_service),
):
    response = villa_service.delete(villa_id, get_token(request))
    if response.is_success:
        flash(request, "success", "Villa deleted successfully")
        return RedirectResponse(url="/villa/", status_code=303)

    flash(request, "error", response.first_error or GENERIC_ERROR)
    return RedirectResponse(url=f"/villa/delete/{villa_id}", status_code=303)
