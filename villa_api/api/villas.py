from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Optional

from ..core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from ..core.logging_config import get_logger
from ..core.permissions import require_admin
from ..database import get_db
from ..models.user import LocalUser
from ..models.villa import Villa
from ..repository.villa_repository import VillaRepository
from ..schemas.api_response import APIResponse, success
from ..schemas.villa import VillaCreateDTO, VillaDTO, VillaPatchDTO, VillaUpdateDTO

router = APIRouter(prefix="/api/v1/villas", tags=["villas"])

logger = get_logger(__name__)


def _dump(villa: Villa) -> dict:
    return VillaDTO.model_validate(villa).model_dump(mode="json")


def _get_or_404(repo: VillaRepository, villa_id: int) -> Villa:
    if villa_id <= 0:
        raise ValidationFailedError("Villa id must be greater than zero")
    villa = repo.get(Villa.id == villa_id)
    if not villa:
        raise NotFoundError("Villa not found")
    return villa


def _ensure_name_free(repo: VillaRepository, name: str, villa_id: Optional[int] = None) -> None:
    existing = repo.get_by_name(name)
    if existing and existing.id != villa_id:
        raise ConflictError("Villa already Exists!")


@router.get("", response_model=APIResponse)
def get_villas(
    capacity: Optional[int] = None,
    search: Optional[str] = None,
    page_size: int = Query(0, ge=0, le=100),
    page_number: int = Query(1, ge=1),
    db: Session = Depends(get_db),
):
    """Get all villas, optionally filtered and paged"""
    villas = VillaRepository(db).search(
        capacity=capacity, search=search, page_size=page_size, page_number=page_number
    )
    return success([_dump(v) for v in villas])


@router.get("/{villa_id}", response_model=APIResponse)
def get_villa(villa_id: int, db: Session = Depends(get_db)):
    """Get a specific villa"""
    return success(_dump(_get_or_404(VillaRepository(db), villa_id)))


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_villa(
    villa: VillaCreateDTO,
    db: Session = Depends(get_db),
    current_user: LocalUser = Depends(require_admin),
):
    """Create a new villa"""
    repo = VillaRepository(db)
    _ensure_name_free(repo, villa.name)

    try:
        db_villa = repo.create(Villa(**villa.model_dump()))
    except IntegrityError as exc:
        raise ConflictError("Villa already Exists!") from exc
    logger.info(f"Villa {db_villa.id} ({db_villa.name}) created by {current_user.username}")
    return success(_dump(db_villa), status_code=status.HTTP_201_CREATED)


@router.put("/{villa_id}", response_model=APIResponse)
def update_villa(
    villa_id: int,
    villa_update: VillaUpdateDTO,
    db: Session = Depends(get_db),
    current_user: LocalUser = Depends(require_admin),
):
    """Replace an existing villa"""
    if villa_update.id != villa_id:
        raise ValidationFailedError("Villa id in path and body do not match")

    repo = VillaRepository(db)
    db_villa = _get_or_404(repo, villa_id)
    _ensure_name_free(repo, villa_update.name, villa_id)

    for field, value in villa_update.model_dump(exclude={"id"}).items():
        setattr(db_villa, field, value)
    try:
        db_villa = repo.update(db_villa)
    except IntegrityError as exc:
        raise ConflictError("Villa already Exists!") from exc
    logger.info(f"Villa {villa_id} updated by {current_user.username}")
    return success(_dump(db_villa))


@router.patch("/{villa_id}", response_model=APIResponse)
def patch_villa(
    villa_id: int,
    villa_patch: VillaPatchDTO,
    db: Session = Depends(get_db),
    current_user: LocalUser = Depends(require_admin),
):
    """Update only the fields present in the request body"""
    repo = VillaRepository(db)
    db_villa = _get_or_404(repo, villa_id)

    changes = villa_patch.model_dump(exclude_unset=True)
    if changes.get("name") is not None:
        _ensure_name_free(repo, changes["name"], villa_id)

    for field, value in changes.items():
        setattr(db_villa, field, value)
    try:
        db_villa = repo.update(db_villa)
    except IntegrityError as exc:
        raise ConflictError("Villa already Exists!") from exc
    return success(_dump(db_villa))


@router.delete("/{villa_id}", response_model=APIResponse)
def delete_villa(
    villa_id: int,
    db: Session = Depends(get_db),
    current_user: LocalUser = Depends(require_admin),
):
    """Delete a villa (its villa number goes with it)"""
    repo = VillaRepository(db)
    db_villa = _get_or_404(repo, villa_id)
    repo.remove(db_villa)
    logger.info(f"Villa {villa_id} deleted by {current_user.username}")
    return success(status_code=status.HTTP_204_NO_CONTENT)
