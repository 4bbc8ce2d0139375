from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


# Villa schemas
class VillaBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=30)
    details: Optional[str] = None
    rate: float = Field(0, ge=0)
    sqft: int = Field(0, ge=0)
    capacity: int = Field(0, ge=0)
    image_url: Optional[str] = None
    amenity: Optional[str] = None


class VillaCreateDTO(VillaBase):
    pass


class VillaUpdateDTO(VillaBase):
    id: int


class VillaPatchDTO(BaseModel):
    """Partial update; only the fields sent are applied"""
    name: Optional[str] = Field(None, min_length=1, max_length=30)
    details: Optional[str] = None
    rate: Optional[float] = Field(None, ge=0)
    sqft: Optional[int] = Field(None, ge=0)
    capacity: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = None
    amenity: Optional[str] = None

    @field_validator("name", "rate", "sqft", "capacity")
    @classmethod
    def not_null(cls, value):
        # Columns are NOT NULL; omit the field to leave it unchanged
        if value is None:
            raise ValueError("may not be null")
        return value


class VillaDTO(VillaBase):
    id: int
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None

    class Config:
        from_attributes = True


# Villa number schemas
class VillaNumberBase(BaseModel):
    villa_no: int = Field(..., gt=0)
    villa_id: int = Field(..., gt=0)
    special_details: Optional[str] = None


class VillaNumberCreateDTO(VillaNumberBase):
    pass


class VillaNumberUpdateDTO(VillaNumberBase):
    pass


class VillaNumberDTO(VillaNumberBase):
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
    villa: Optional[VillaDTO] = None

    class Config:
        from_attributes = True
