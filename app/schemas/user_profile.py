from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class UserProfileBase(BaseModel):
    name: str = Field(..., min_length=1, description="Name is required")
    age: int = Field(..., ge=1, le=120)
    address: str = Field(..., min_length=1)
    blood_group: str = Field(..., min_length=1, max_length=5)
    state: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    pin_code: str = Field(..., pattern=r"^\d{6}$", description="6 digit PIN code")
    alternate_phone: Optional[str] = None

class UserProfileCreate(UserProfileBase):
    pass

class UserProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    age: Optional[int] = Field(None, ge=1, le=120)
    address: Optional[str] = Field(None, min_length=1)
    blood_group: Optional[str] = Field(None, min_length=1, max_length=5)
    state: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    pin_code: Optional[str] = Field(None, pattern=r"^\d{6}$")
    alternate_phone: Optional[str] = None

class UserProfileResponse(UserProfileBase):
    profile_id: int
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
