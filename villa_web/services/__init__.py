from .auth_service import AuthService
from .base_service import APIRequest, APIType, BaseService
from .villa_number_service import VillaNumberService
from .villa_service import VillaService

__all__ = ["APIRequest", "APIType", "AuthService", "BaseService", "VillaNumberService", "VillaService"]
