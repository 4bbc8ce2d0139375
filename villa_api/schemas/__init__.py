from .api_response import APIResponse
from .user import LoginRequestDTO, LoginResponseDTO, RegistrationRequestDTO, TokenData, UserDTO
from .villa import (
    VillaCreateDTO, VillaDTO, VillaPatchDTO, VillaUpdateDTO,
    VillaNumberCreateDTO, VillaNumberDTO, VillaNumberUpdateDTO,
)

__all__ = [
    "APIResponse",
    "LoginRequestDTO", "LoginResponseDTO", "RegistrationRequestDTO", "TokenData", "UserDTO",
    "VillaCreateDTO", "VillaDTO", "VillaPatchDTO", "VillaUpdateDTO",
    "VillaNumberCreateDTO", "VillaNumberDTO", "VillaNumberUpdateDTO",
]
