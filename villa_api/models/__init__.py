from ..database import Base
from .user import LocalUser, UserRole
from .villa import Villa, VillaNumber

__all__ = [
    "Base",
    "LocalUser",
    "UserRole",
    "Villa",
    "VillaNumber",
]
