from typing import Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.user import User
from app.schemas.user import UserCreate
from app.crud.base import CRUDBase
from app.utils.response_utils import ResponseWrapper


class CRUDUser(CRUDBase[User, UserCreate, UserCreate]):

    def get_by_username(self, db: Session, *, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

    def get_or_404(self, db: Session, *, user_id: int) -> User:
        db_obj = self.get(db, user_id)
        if not db_obj:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=ResponseWrapper.error(
                    message=f"User {user_id} not found",
                    error_code="USER_NOT_FOUND",
                ),
            )
        return db_obj


user_crud = CRUDUser(User)
