from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class EmergencyContactBase(BaseModel):
    emergency_name: Optional[str] = None
    emergency_phone: Optional[str] = None
    insurance_name: Optional[str] = None
    insurance_phone: Optional[str] = None
    roadside_phone: Optional[str] = None
    service_centre_name: Optional[str] = None
    service_centre_phone: Optional[str] = None
    spare_parts_name: Optional[str] = None
    spare_parts_phone: Optional[str] = None

class EmergencyContactCreate(EmergencyContactBase):
    pass

class EmergencyContactUpdate(EmergencyContactBase):
    pass

class EmergencyContactResponse(EmergencyContactBase):
    contact_id: int
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
