from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.document import Document
from app.models.vehicle import Vehicle
from app.schemas.document import DocumentCreate
from app.crud.base import CRUDBase
from app.utils.response_utils import ResponseWrapper
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDDocument(CRUDBase[Document, DocumentCreate, DocumentCreate]):

    def get_by_vehicle(self, db: Session, *, vehicle_id: int) -> List[Document]:
        """Documents of a vehicle, most recent upload first"""
        return (
            db.query(Document)
            .filter(Document.vehicle_id == vehicle_id)
            .order_by(Document.uploaded_at.desc(), Document.document_id.desc())
            .all()
        )

    def get_for_user(self, db: Session, *, document_id: int, user_id: int) -> Optional[Document]:
        return (
            db.query(Document)
            .join(Vehicle, Vehicle.vehicle_id == Document.vehicle_id)
            .filter(Document.document_id == document_id, Vehicle.user_id == user_id)
            .first()
        )

    def get_or_404(self, db: Session, *, document_id: int, user_id: int) -> Document:
        db_obj = self.get_for_user(db, document_id=document_id, user_id=user_id)
        if not db_obj:
            logger.warning(f"[DocumentLookup] Document {document_id} not found for user_id={user_id}")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=ResponseWrapper.error(f"Document {document_id} not found", "DOCUMENT_NOT_FOUND"),
            )
        return db_obj


document_crud = CRUDDocument(Document)
