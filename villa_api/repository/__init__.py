from .base import Repository
from .user_repository import UserRepository
from .villa_repository import VillaNumberRepository, VillaRepository

__all__ = ["Repository", "UserRepository", "VillaNumberRepository", "VillaRepository"]
