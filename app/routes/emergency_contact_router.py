from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database.session import get_db
from app.crud.user import user_crud
from app.crud.emergency_contact import emergency_contact_crud
from app.schemas.emergency_contact import (
    EmergencyContactCreate,
    EmergencyContactUpdate,
    EmergencyContactResponse,
)
from app.utils.response_utils import ResponseWrapper, handle_db_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/emergency-contacts", tags=["emergency-contacts"])


@router.get("/{user_id}", response_model=dict, status_code=status.HTTP_200_OK)
def read_emergency_contacts(user_id: int, db: Session = Depends(get_db)):
    """Saved contacts, or null data when the user has not saved any yet."""
    try:
        db_obj = emergency_contact_crud.get_by_user(db, user_id=user_id)
    except SQLAlchemyError as e:
        logger.exception(f"[EmergencyContactRead] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)

    if db_obj is None:
        return ResponseWrapper.success(data=None, message="No emergency contacts saved")
    return ResponseWrapper.success(
        data=EmergencyContactResponse.model_validate(db_obj, from_attributes=True),
        message="Emergency contacts fetched successfully",
    )


@router.post("/{user_id}", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_emergency_contacts(user_id: int, contact_in: EmergencyContactCreate, db: Session = Depends(get_db)):
    try:
        user_crud.get_or_404(db, user_id=user_id)
        if emergency_contact_crud.get_by_user(db, user_id=user_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=ResponseWrapper.error(
                    f"Emergency contacts for user {user_id} already exist", "EMERGENCY_CONTACT_EXISTS"
                ),
            )

        db_obj = emergency_contact_crud.create_for_user(db, user_id=user_id, obj_in=contact_in)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"[EmergencyContactCreate] Saved contacts for user_id={user_id}")
        return ResponseWrapper.created(
            data=EmergencyContactResponse.model_validate(db_obj, from_attributes=True),
            message="Emergency contacts saved successfully",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[EmergencyContactCreate] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise


@router.put("/{user_id}", response_model=dict, status_code=status.HTTP_200_OK)
def update_emergency_contacts(user_id: int, contact_in: EmergencyContactUpdate, db: Session = Depends(get_db)):
    try:
        db_obj = emergency_contact_crud.get_or_404(db, user_id=user_id)
        db_obj = emergency_contact_crud.update(db, db_obj=db_obj, obj_in=contact_in)
        db.commit()
        db.refresh(db_obj)
        return ResponseWrapper.updated(
            data=EmergencyContactResponse.model_validate(db_obj, from_attributes=True),
            message="Emergency contacts updated successfully",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[EmergencyContactUpdate] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
