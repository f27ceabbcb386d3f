from pydantic import BaseModel
from typing import Optional
from datetime import datetime, date

class NotificationCreate(BaseModel):
    vehicle_id: int
    type: str
    title: str
    message: str
    message_key: str
    due_date: date
    is_read: bool = False

class NotificationResponse(BaseModel):
    notification_id: int
    vehicle_id: int
    type: str
    title: str
    message: str
    due_date: date
    is_read: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
