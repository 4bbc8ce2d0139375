from fastapi import APIRouter, Depends, Request

from ..dependencies import get_villa_service
from ..models import VillaDTO
from ..services import VillaService
from ..session import get_token
from ..templating import render

router = APIRouter(tags=["home"])


@router.get("/")
def index(request: Request, villa_service: VillaService = Depends(get_villa_service)):
    villas = []
    response = villa_service.get_all(get_token(request))
    if response.is_success:
        villas = [VillaDTO.model_validate(v) for v in response.result or []]
    return render(request, "home.html", {"villas": villas})
