from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.exceptions import ValidationFailedError
from ..core.permissions import get_current_user
from ..database import get_db
from ..models.user import LocalUser
from ..repository.user_repository import UserRepository
from ..schemas.api_response import APIResponse, success
from ..schemas.user import LoginRequestDTO, RegistrationRequestDTO, UserDTO

router = APIRouter(prefix="/api/v1/users", tags=["authentication"])


@router.post("/login", response_model=APIResponse)
def login(login_request: LoginRequestDTO, db: Session = Depends(get_db)):
    """Validate credentials and issue a bearer token"""
    login_response = UserRepository(db).login(login_request)
    if login_response.user is None or not login_response.token:
        raise ValidationFailedError("Username or password is incorrect")
    return success(login_response.model_dump(mode="json"))


@router.post("/register", response_model=APIResponse)
def register(registration_request: RegistrationRequestDTO, db: Session = Depends(get_db)):
    """Register a new user"""
    user = UserRepository(db).register(registration_request)
    return success(user.model_dump(mode="json"))


@router.get("/me", response_model=APIResponse)
def get_current_user_info(current_user: LocalUser = Depends(get_current_user)):
    """Get current user information"""
    return success(UserDTO.model_validate(current_user).model_dump(mode="json"))
