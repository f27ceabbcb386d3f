from typing import List, Optional
from sqlalchemy.orm import Session, Query
from sqlalchemy.exc import IntegrityError

from app.models.notification import Notification
from app.models.vehicle import Vehicle
from app.schemas.notification import NotificationCreate
from app.crud.base import CRUDBase
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDNotification(CRUDBase[Notification, NotificationCreate, NotificationCreate]):

    def get_by_vehicle(self, db: Session, *, vehicle_id: int) -> List[Notification]:
        return (
            db.query(Notification)
            .filter(Notification.vehicle_id == vehicle_id)
            .order_by(Notification.created_at.desc(), Notification.notification_id.desc())
            .all()
        )

    def query_by_user(self, db: Session, *, user_id: int, unread_only: bool = False) -> Query:
        """Notifications for every vehicle the user owns, newest first"""
        query = (
            db.query(Notification)
            .join(Vehicle, Vehicle.vehicle_id == Notification.vehicle_id)
            .filter(Vehicle.user_id == user_id)
        )
        if unread_only:
            query = query.filter(Notification.is_read.is_(False))
        return query.order_by(Notification.created_at.desc(), Notification.notification_id.desc())

    def get_for_user(self, db: Session, *, notification_id: int, user_id: int) -> Optional[Notification]:
        return (
            db.query(Notification)
            .join(Vehicle, Vehicle.vehicle_id == Notification.vehicle_id)
            .filter(Notification.notification_id == notification_id, Vehicle.user_id == user_id)
            .first()
        )

    def count_unread(self, db: Session, *, user_id: int) -> int:
        return self.query_by_user(db, user_id=user_id, unread_only=True).count()

    def create_if_absent(self, db: Session, *, obj_in: NotificationCreate) -> Optional[Notification]:
        """
        Insert and commit a notification.

        Returns None when (vehicle_id, type, message_key) already exists.
        The session is rolled back in that case, so callers must not hold
        uncommitted work in it.
        """
        db_obj = Notification(**obj_in.model_dump())
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info(
                f"[NotificationCreate] Duplicate skipped | vehicle_id={obj_in.vehicle_id}, "
                f"type={obj_in.type}, key={obj_in.message_key}"
            )
            return None
        db.refresh(db_obj)
        return db_obj

    def mark_read(self, db: Session, *, db_obj: Notification) -> Notification:
        db_obj.is_read = True
        db.flush()
        return db_obj

    def mark_all_read(self, db: Session, *, user_id: int) -> int:
        unread = self.query_by_user(db, user_id=user_id, unread_only=True).all()
        for notification in unread:
            notification.is_read = True
        db.flush()
        return len(unread)


notification_crud = CRUDNotification(Notification)
