from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from ..core.logging_config import get_logger
from ..core.permissions import require_admin
from ..database import get_db
from ..models.user import LocalUser
from ..models.villa import Villa, VillaNumber
from ..repository.villa_repository import VillaNumberRepository, VillaRepository
from ..schemas.api_response import APIResponse, success
from ..schemas.villa import VillaNumberCreateDTO, VillaNumberDTO, VillaNumberUpdateDTO

router = APIRouter(prefix="/api/v1/villa-numbers", tags=["villa-numbers"])

logger = get_logger(__name__)


def _dump(villa_number: VillaNumber) -> dict:
    return VillaNumberDTO.model_validate(villa_number).model_dump(mode="json")


def _owning_villa(db: Session, villa_id: int) -> Villa:
    villa = VillaRepository(db).get(Villa.id == villa_id)
    if villa is None:
        raise ValidationFailedError("Villa ID is Invalid!")
    return villa


def _get_or_404(repo: VillaNumberRepository, villa_no: int) -> VillaNumber:
    if villa_no <= 0:
        raise ValidationFailedError("Villa number must be greater than zero")
    villa_number = repo.get_by_villa_no(villa_no)
    if not villa_number:
        raise NotFoundError("Villa number not found")
    return villa_number


@router.get("", response_model=APIResponse)
def get_villa_numbers(db: Session = Depends(get_db)):
    """Get all villa numbers with their villas"""
    return success([_dump(vn) for vn in VillaNumberRepository(db).list_with_villa()])


@router.get("/{villa_no}", response_model=APIResponse)
def get_villa_number(villa_no: int, db: Session = Depends(get_db)):
    """Get a villa number by its unit number"""
    return success(_dump(_get_or_404(VillaNumberRepository(db), villa_no)))


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_villa_number(
    villa_number: VillaNumberCreateDTO,
    db: Session = Depends(get_db),
    current_user: LocalUser = Depends(require_admin),
):
    """Create a villa number for a villa that does not have one yet"""
    repo = VillaNumberRepository(db)
    if repo.exists(VillaNumber.villa_no == villa_number.villa_no):
        raise ConflictError("Villa Number already Exists!")

    villa = _owning_villa(db, villa_number.villa_id)
    if villa.villa_number is not None:
        raise ConflictError(f"Villa {villa.id} already has villa number {villa.villa_number.villa_no}")

    try:
        db_villa_number = repo.create(VillaNumber(**villa_number.model_dump()))
    except IntegrityError as exc:
        raise ConflictError("Villa number conflicts with an existing record") from exc

    logger.info(f"Villa number {db_villa_number.villa_no} created for villa {villa.id}")
    return success(_dump(db_villa_number), status_code=status.HTTP_201_CREATED)


@router.put("/{villa_no}", response_model=APIResponse)
def update_villa_number(
    villa_no: int,
    villa_number_update: VillaNumberUpdateDTO,
    db: Session = Depends(get_db),
    current_user: LocalUser = Depends(require_admin),
):
    """Update the details or owning villa of a villa number"""
    if villa_number_update.villa_no != villa_no:
        raise ValidationFailedError("Villa number in path and body do not match")

    repo = VillaNumberRepository(db)
    db_villa_number = _get_or_404(repo, villa_no)

    if villa_number_update.villa_id != db_villa_number.villa_id:
        villa = _owning_villa(db, villa_number_update.villa_id)
        if villa.villa_number is not None:
            raise ConflictError(f"Villa {villa.id} already has villa number {villa.villa_number.villa_no}")
        db_villa_number.villa = villa

    db_villa_number.special_details = villa_number_update.special_details
    try:
        db_villa_number = repo.update(db_villa_number)
    except IntegrityError as exc:
        raise ConflictError("Villa number conflicts with an existing record") from exc
    return success(_dump(db_villa_number))


@router.delete("/{villa_no}", response_model=APIResponse)
def delete_villa_number(
    villa_no: int,
    db: Session = Depends(get_db),
    current_user: LocalUser = Depends(require_admin),
):
    """Delete a villa number"""
    repo = VillaNumberRepository(db)
    repo.remove(_get_or_404(repo, villa_no))
    logger.info(f"Villa number {villa_no} deleted by {current_user.username}")
    return success(status_code=status.HTTP_204_NO_CONTENT)
