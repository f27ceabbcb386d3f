from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.schemas.document_expiry import DocumentExpiryResponse

class DocumentCreate(BaseModel):
    vehicle_id: int
    type: str = "other"
    file_name: str = Field(..., min_length=1)
    file_path: str = Field(..., min_length=1)
    file_size: int = Field(..., ge=0)
    mime_type: str = Field(..., min_length=1)

class DocumentUploadMetadata(BaseModel):
    """
    Sent once the file itself has been stored. ``expiry_date`` and ``amount``
    are forwarded to expiry tracking when present.
    """
    user_id: int
    type: str = Field("other", min_length=1)
    file_name: str = Field(..., min_length=1)
    file_path: str = Field(..., min_length=1)
    file_size: int = Field(..., ge=0)
    mime_type: str = Field(..., min_length=1)
    expiry_date: Optional[str] = Field(None, description="ISO date, YYYY-MM-DD")
    amount: Optional[float] = None

class DocumentResponse(BaseModel):
    document_id: int
    vehicle_id: int
    type: str
    file_name: str
    file_path: str
    file_size: int
    mime_type: str
    uploaded_at: datetime

    class Config:
        from_attributes = True

class DocumentUploadResponse(BaseModel):
    document: DocumentResponse
    document_expiry: Optional[DocumentExpiryResponse] = None
