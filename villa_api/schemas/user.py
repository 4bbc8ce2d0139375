from pydantic import BaseModel, Field
from typing import Optional
from ..models.user import UserRole


class LoginRequestDTO(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
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

    class Config:
        from_attributes = True


class LoginResponseDTO(BaseModel):
    user: Optional[UserDTO] = None
    token: str = ""


class TokenData(BaseModel):
    username: str
    role: Optional[UserRole] = None
