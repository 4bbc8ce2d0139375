"""
Credential validation and token issuance.

Usernames are compared case-insensitively for both the uniqueness check and
login, so "Alice" and "alice" name the same account.
"""

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import ConflictError, RegistrationError
from ..core.logging_config import get_logger
from ..core.security import ROLE_CLAIM, create_access_token, get_password_hash, verify_password
from ..models.user import LocalUser
from ..schemas.user import LoginRequestDTO, LoginResponseDTO, RegistrationRequestDTO, UserDTO
from .base import Repository

logger = get_logger(__name__)


class UserRepository(Repository[LocalUser]):
    def __init__(self, db: Session) -> None:
        super().__init__(db, LocalUser)

    def _find(self, username: str):
        return self.get(func.lower(LocalUser.username) == username.lower())

    def is_unique_user(self, username: str) -> bool:
        return self._find(username) is None

    def login(self, login_request: LoginRequestDTO) -> LoginResponseDTO:
        """Return a token and profile, or an empty token and no user on any mismatch"""
        user = self._find(login_request.username)
        if user is None or not verify_password(login_request.password, user.password_hash):
            logger.info("Login rejected")
            return LoginResponseDTO(token="", user=None)

        token = create_access_token(data={"sub": user.username, ROLE_CLAIM: user.role.value})
        logger.info(f"Issued access token for {user.username} ({user.role.value})")
        return LoginResponseDTO(token=token, user=UserDTO.model_validate(user))

    def register(self, registration_request: RegistrationRequestDTO) -> UserDTO:
        if not self.is_unique_user(registration_request.username):
            raise ConflictError("Username already exists")

        user = LocalUser(
            username=registration_request.username,
            name=registration_request.name,
            password_hash=get_password_hash(registration_request.password),
            role=registration_request.role,
        )
        try:
            self.create(user)
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same name
            raise ConflictError("Username already exists") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Registration failed for {registration_request.username}: {exc}")
            raise RegistrationError("Error while registering") from exc

        logger.info(f"Registered {user.username} as {user.role.value}")
        return UserDTO.model_validate(user)
