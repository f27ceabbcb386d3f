from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database.session import get_db
from app.crud.user import user_crud
from app.schemas.user import UserCreate, UserResponse
from app.utils.response_utils import ResponseWrapper, handle_db_error, handle_http_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Register a user record. Identity verification happens elsewhere."""
    try:
        if user_crud.get_by_username(db, username=user_in.username):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=ResponseWrapper.error("Username already registered", "USER_EXISTS"),
            )

        db_obj = user_crud.create(db, obj_in=user_in)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"[UserCreate] User created | user_id={db_obj.user_id}")
        return ResponseWrapper.created(
            data=UserResponse.model_validate(db_obj, from_attributes=True),
            message="User created successfully",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[UserCreate] DB error: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"[UserCreate] Unexpected error: {e}")
        raise handle_http_error(e)


@router.get("/{user_id}", response_model=dict, status_code=status.HTTP_200_OK)
def read_user(user_id: int, db: Session = Depends(get_db)):
    db_obj = user_crud.get_or_404(db, user_id=user_id)
    return ResponseWrapper.success(
        data=UserResponse.model_validate(db_obj, from_attributes=True),
        message="User fetched successfully",
    )
