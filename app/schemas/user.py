from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class UserBase(BaseModel):
    username: str = Field(..., min_length=1)
    email: Optional[str] = None
    mobile: Optional[str] = None

class UserCreate(UserBase):
    pass

class UserResponse(UserBase):
    user_id: int
    is_verified: bool
    created_at: datetime

    class Config:
        from_attributes = True
