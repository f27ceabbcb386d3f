from typing import List
from sqlalchemy.orm import Session

from app.models.document_expiry import DocumentExpiry, DocumentTypeEnum
from app.schemas.document_expiry import DocumentExpiryCreate
from app.crud.base import CRUDBase


class CRUDDocumentExpiry(CRUDBase[DocumentExpiry, DocumentExpiryCreate, DocumentExpiryCreate]):

    def get_by_vehicle(self, db: Session, *, vehicle_id: int, active_only: bool = True) -> List[DocumentExpiry]:
        query = db.query(DocumentExpiry).filter(DocumentExpiry.vehicle_id == vehicle_id)
        if active_only:
            query = query.filter(DocumentExpiry.is_active.is_(True))
        return query.order_by(DocumentExpiry.created_at.desc(), DocumentExpiry.document_expiry_id.desc()).all()

    def deactivate_active(self, db: Session, *, vehicle_id: int, document_type: DocumentTypeEnum) -> int:
        """Mark earlier records of this type inactive (renewal)"""
        active = (
            db.query(DocumentExpiry)
            .filter(
                DocumentExpiry.vehicle_id == vehicle_id,
                DocumentExpiry.document_type == document_type,
                DocumentExpiry.is_active.is_(True),
            )
            .all()
        )
        for record in active:
            record.is_active = False
        db.flush()
        return len(active)


document_expiry_crud = CRUDDocumentExpiry(DocumentExpiry)
