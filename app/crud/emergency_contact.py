from typing import Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.emergency_contact import EmergencyContact
from app.schemas.emergency_contact import EmergencyContactCreate, EmergencyContactUpdate
from app.crud.base import CRUDBase
from app.utils.response_utils import ResponseWrapper


class CRUDEmergencyContact(CRUDBase[EmergencyContact, EmergencyContactCreate, EmergencyContactUpdate]):

    def get_by_user(self, db: Session, *, user_id: int) -> Optional[EmergencyContact]:
        return db.query(EmergencyContact).filter(EmergencyContact.user_id == user_id).first()

    def get_or_404(self, db: Session, *, user_id: int) -> EmergencyContact:
        db_obj = self.get_by_user(db, user_id=user_id)
        if not db_obj:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=ResponseWrapper.error(
                    f"Emergency contacts for user {user_id} not found", "EMERGENCY_CONTACT_NOT_FOUND"
                ),
            )
        return db_obj

    def create_for_user(self, db: Session, *, user_id: int, obj_in: EmergencyContactCreate) -> EmergencyContact:
        db_obj = EmergencyContact(user_id=user_id, **obj_in.model_dump())
        db.add(db_obj)
        db.flush()
        return db_obj


emergency_contact_crud = CRUDEmergencyContact(EmergencyContact)
