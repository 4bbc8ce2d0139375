"""
Data shapes exchanged with the Villa API, as the frontend sees them.

These mirror the API's JSON rather than importing its schemas, so the web
process only depends on the wire format.
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    status_code: int = 200
    is_success: bool = True
    error_messages: List[str] = Field(default_factory=list)
    result: Any = None

    @property
    def first_error(self) -> Optional[str]:
        return self.error_messages[0] if self.error_messages else None


class VillaCreateDTO(BaseModel):
    name: str = Field(..., min_length=1, max_length=30)
    details: Optional[str] = None
    rate: float = Field(0, ge=0)
    sqft: int = Field(0, ge=0)
    capacity: int = Field(0, ge=0)
    image_url: Optional[str] = None
    amenity: Optional[str] = None


class VillaUpdateDTO(VillaCreateDTO):
    id: int


class VillaDTO(VillaUpdateDTO):
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None


class VillaNumberCreateDTO(BaseModel):
    villa_no: int = Field(..., gt=0)
    villa_id: int = Field(..., gt=0)
    special_details: Optional[str] = None


class VillaNumberUpdateDTO(VillaNumberCreateDTO):
    pass


class VillaNumberDTO(VillaNumberCreateDTO):
    villa: Optional[VillaDTO] = None


class UserRole(str, Enum):
    admin = "admin"
    customer = "customer"


class LoginRequestDTO(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegistrationRequestDTO(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.customer


class UserDTO(BaseModel):
    id: int
    username: str
    name: Optional[str] = None
    role: UserRole


class LoginResponseDTO(BaseModel):
    user: Optional[UserDTO] = None
    token: str = ""
