from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, date

from app.models.document_expiry import DocumentTypeEnum

class DocumentExpiryCreate(BaseModel):
    vehicle_id: int
    user_id: int
    document_type: DocumentTypeEnum
    expiry_date: date
    amount: Optional[float] = None
    issue_date: Optional[date] = None
    reminder_sent: bool = False
    is_active: bool = True

class DocumentUploadRequest(BaseModel):
    """
    Metadata sent after a document upload. ``document_type`` is free text:
    types without expiry tracking are accepted and ignored.
    """
    user_id: int
    document_type: str = Field(..., min_length=1)
    expiry_date: Optional[str] = Field(None, description="ISO date, YYYY-MM-DD")
    amount: Optional[float] = None

class DocumentExpiryResponse(BaseModel):
    document_expiry_id: int
    vehicle_id: int
    user_id: int
    document_type: DocumentTypeEnum
    expiry_date: date
    amount: Optional[float] = None
    issue_date: Optional[date] = None
    reminder_sent: bool
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
