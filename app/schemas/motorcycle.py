from pydantic import BaseModel, HttpUrl, field_validator
from decimal import Decimal
from typing import Optional
from app.models.motorcycle import MotorcycleStatus


def _required_text(v: str, label: str) -> str:
    v = v.strip()
    if not v: raise ValueError(f"{label} cannot be empty")
    if len(v) > 255: raise ValueError(f"{label} may not be greater than 255 characters")
    return v


# ─── Requests ─────────────────────────────────────────────────────────────────
class MotorcycleCreateRequest(BaseModel):
    name:        str
    brand:       str
    type:        str
    pricePerDay: Decimal
    imageUrl:    Optional[HttpUrl] = None
    status:      MotorcycleStatus = MotorcycleStatus.AVAILABLE
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return _required_text(v, "Name")

    @field_validator("brand")
    @classmethod
    def check_brand(cls, v):
        return _required_text(v, "Brand")

    @field_validator("type")
    @classmethod
    def check_type(cls, v):
        return _required_text(v, "Type")

    @field_validator("pricePerDay")
    @classmethod
    def check_price(cls, v):
        if v < 0: raise ValueError("Price per day cannot be negative")
        return v


class MotorcycleUpdateRequest(BaseModel):
    name:        Optional[str]              = None
    brand:       Optional[str]              = None
    type:        Optional[str]              = None
    pricePerDay: Optional[Decimal]          = None
    imageUrl:    Optional[HttpUrl]          = None
    status:      Optional[MotorcycleStatus] = None
    description: Optional[str]              = None

    @field_validator("name", "brand", "type")
    @classmethod
    def check_text(cls, v, info):
        if v is None: return v
        return _required_text(v, info.field_name.capitalize())

    @field_validator("pricePerDay")
    @classmethod
    def check_price(cls, v):
        if v is not None and v < 0: raise ValueError("Price per day cannot be negative")
        return v
