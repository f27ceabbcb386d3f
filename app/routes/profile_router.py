from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database.session import get_db
from app.crud.user import user_crud
from app.crud.user_profile import user_profile_crud
from app.schemas.user_profile import UserProfileCreate, UserProfileUpdate, UserProfileResponse
from app.utils.response_utils import ResponseWrapper, handle_db_error, handle_http_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/{user_id}", response_model=dict, status_code=status.HTTP_200_OK)
def read_profile(user_id: int, db: Session = Depends(get_db)):
    try:
        db_obj = user_profile_crud.get_or_404(db, user_id=user_id)
        return ResponseWrapper.success(
            data=UserProfileResponse.model_validate(db_obj, from_attributes=True),
            message="Profile fetched successfully",
        )
    except SQLAlchemyError as e:
        logger.exception(f"[ProfileRead] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)


@router.post("/{user_id}", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_profile(user_id: int, profile_in: UserProfileCreate, db: Session = Depends(get_db)):
    try:
        user_crud.get_or_404(db, user_id=user_id)
        if user_profile_crud.get_by_user(db, user_id=user_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=ResponseWrapper.error(f"Profile for user {user_id} already exists", "PROFILE_EXISTS"),
            )

        db_obj = user_profile_crud.create_for_user(db, user_id=user_id, obj_in=profile_in)
        db.commit()
        db.refresh(db_obj)
        return ResponseWrapper.created(
            data=UserProfileResponse.model_validate(db_obj, from_attributes=True),
            message="Profile created successfully",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[ProfileCreate] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"[ProfileCreate] Unexpected error for user_id={user_id}: {e}")
        raise handle_http_error(e)


@router.put("/{user_id}", response_model=dict, status_code=status.HTTP_200_OK)
def update_profile(user_id: int, profile_in: UserProfileUpdate, db: Session = Depends(get_db)):
    try:
        db_obj = user_profile_crud.get_or_404(db, user_id=user_id)
        db_obj = user_profile_crud.update(db, db_obj=db_obj, obj_in=profile_in)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"[ProfileUpdate] user_id={user_id} fields={sorted(profile_in.model_dump(exclude_unset=True))}")
        return ResponseWrapper.updated(
            data=UserProfileResponse.model_validate(db_obj, from_attributes=True),
            message="Profile updated successfully",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[ProfileUpdate] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
