import os
import sys

from villa_api.core.exceptions import ConflictError
from villa_api.core.logging_config import get_logger, setup_logging
from villa_api.database import SessionLocal
from villa_api.models.user import UserRole
from villa_api.repository.user_repository import UserRepository
from villa_api.schemas.user import RegistrationRequestDTO

logger = get_logger(__name__)


def create_initial_admin() -> bool:
    """Create the first admin account from ADMIN_USERNAME / ADMIN_PASSWORD"""
    username = os.getenv("ADMIN_USERNAME", "admin")
    password = os.getenv("ADMIN_PASSWORD")
    if not password:
        logger.error("ADMIN_PASSWORD not found in environment variables")
        return False

    db = SessionLocal()
    try:
        repo = UserRepository(db)
        if not repo.is_unique_user(username):
            logger.info(f"User {username} already exists")
            return True
        repo.register(RegistrationRequestDTO(
            username=username,
            name=os.getenv("ADMIN_NAME", "Administrator"),
            password=password,
            role=UserRole.admin,
        ))
        logger.info(f"Created admin user: {username}")
        return True
    except ConflictError:
        logger.info(f"User {username} already exists")
        return True
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging()
    success = create_initial_admin()
    sys.exit(0 if success else 1)
