from pydantic import BaseModel, field_validator, model_validator
from datetime import date
from typing import Any


class BookingCreateRequest(BaseModel):
    motorcycleId:    int
    customerName:    str
    customerPhone:   str
    customerAddress: str
    startDate:       date
    endDate:         date

    @field_validator("customerName")
    @classmethod
    def check_name(cls, v):
        v = v.strip()
        if not v: raise ValueError("Customer name is required")
        if len(v) > 255: raise ValueError("Customer name may not be greater than 255 characters")
        return v

    @field_validator("customerPhone")
    @classmethod
    def check_phone(cls, v):
        v = v.strip()
        if not v: raise ValueError("Customer phone is required")
        if len(v) > 20: raise ValueError("Customer phone may not be greater than 20 characters")
        return v

    @field_validator("customerAddress")
    @classmethod
    def check_address(cls, v):
        v = v.strip()
        if not v: raise ValueError("Customer address is required")
        if len(v) > 1000: raise ValueError("Customer address may not be greater than 1000 characters")
        return v

    @model_validator(mode="after")
    def check_dates(self) -> "BookingCreateRequest":
        if self.endDate < self.startDate:
            raise ValueError("endDate must be on or after startDate")
        return self


class BookingStatusRequest(BaseModel):
    # Any JSON value: anything but the exact status literals is INVALID_STATUS
    status: Any
