from typing import Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.user_profile import UserProfile
from app.schemas.user_profile import UserProfileCreate, UserProfileUpdate
from app.crud.base import CRUDBase
from app.utils.response_utils import ResponseWrapper
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDUserProfile(CRUDBase[UserProfile, UserProfileCreate, UserProfileUpdate]):

    def get_by_user(self, db: Session, *, user_id: int) -> Optional[UserProfile]:
        return db.query(UserProfile).filter(UserProfile.user_id == user_id).first()

    def get_or_404(self, db: Session, *, user_id: int) -> UserProfile:
        db_obj = self.get_by_user(db, user_id=user_id)
        if not db_obj:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=ResponseWrapper.error(f"Profile for user {user_id} not found", "PROFILE_NOT_FOUND"),
            )
        return db_obj

    def create_for_user(self, db: Session, *, user_id: int, obj_in: UserProfileCreate) -> UserProfile:
        db_obj = UserProfile(user_id=user_id, **obj_in.model_dump())
        db.add(db_obj)
        db.flush()
        logger.info(f"[ProfileCreate] Profile created | user_id={user_id}, profile_id={db_obj.profile_id}")
        return db_obj


user_profile_crud = CRUDUserProfile(UserProfile)
