from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime, date

def _check_year(value: Optional[int]) -> Optional[int]:
    if value is not None and value > date.today().year + 1:
        raise ValueError(f"year must not be later than {date.today().year + 1}")
    return value

class VehicleBase(BaseModel):
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: int = Field(..., ge=1900)
    color: str
    license_plate: str = Field(..., min_length=1, description="License plate is required")
    chassis_number: Optional[str] = None
    engine_number: Optional[str] = None
    owner_name: str = Field(..., min_length=1, description="Owner name is required")
    owner_phone: Optional[str] = None
    insurance_expiry: Optional[date] = None
    emission_expiry: Optional[date] = None
    rc_expiry: Optional[date] = None
    last_service_date: Optional[date] = None

    @field_validator("year")
    @classmethod
    def check_year(cls, value):
        return _check_year(value)

class VehicleCreate(VehicleBase):
    user_id: int

class VehicleUpdate(BaseModel):
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = Field(None, ge=1900)
    color: Optional[str] = None
    license_plate: Optional[str] = None
    chassis_number: Optional[str] = None
    engine_number: Optional[str] = None
    owner_name: Optional[str] = None
    owner_phone: Optional[str] = None
    insurance_expiry: Optional[date] = None
    emission_expiry: Optional[date] = None
    rc_expiry: Optional[date] = None
    last_service_date: Optional[date] = None

    @field_validator("year")
    @classmethod
    def check_year(cls, value):
        return _check_year(value)

class VehicleResponse(VehicleBase):
    vehicle_id: int
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class VehiclePaginationResponse(BaseModel):
    total: int
    items: List[VehicleResponse]
