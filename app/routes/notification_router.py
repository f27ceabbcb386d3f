from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database.session import get_db
from app.crud.notification import notification_crud
from app.schemas.notification import NotificationResponse
from app.services.document_expiry_service import DocumentExpiryService, get_document_expiry_service
from app.utils.pagination import paginate_query
from app.utils.response_utils import ResponseWrapper, handle_db_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=dict, status_code=status.HTTP_200_OK)
def read_notifications(
    user_id: int = Query(...),
    unread_only: bool = Query(False),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
):
    try:
        query = notification_crud.query_by_user(db, user_id=user_id, unread_only=unread_only)
        total, items = paginate_query(query, skip, limit)
        return ResponseWrapper.success(
            data={"total": total, "items": [NotificationResponse.model_validate(n, from_attributes=True) for n in items]},
            message="Notifications fetched successfully",
        )
    except SQLAlchemyError as e:
        logger.exception(f"[NotificationList] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)


@router.get("/unread-count", response_model=dict, status_code=status.HTTP_200_OK)
def read_unread_count(user_id: int = Query(...), db: Session = Depends(get_db)):
    try:
        count = notification_crud.count_unread(db, user_id=user_id)
        return ResponseWrapper.success(data={"unread": count}, message="Unread count fetched successfully")
    except SQLAlchemyError as e:
        logger.exception(f"[NotificationCount] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)


@router.post("/generate", response_model=dict, status_code=status.HTTP_200_OK)
def generate_notifications(
    user_id: int = Query(...),
    expiry_service: DocumentExpiryService = Depends(get_document_expiry_service),
):
    """Run the document expiry sweep for a user (called by the client after sign-in)."""
    created = expiry_service.run_expiry_check_process(user_id)
    return ResponseWrapper.success(
        data={
            "created": len(created),
            "items": [NotificationResponse.model_validate(n, from_attributes=True) for n in created],
        },
        message="Notifications generated successfully",
    )


@router.put("/read-all", response_model=dict, status_code=status.HTTP_200_OK)
def mark_all_notifications_read(user_id: int = Query(...), db: Session = Depends(get_db)):
    try:
        updated = notification_crud.mark_all_read(db, user_id=user_id)
        db.commit()
        logger.info(f"[NotificationReadAll] user_id={user_id} marked={updated}")
        return ResponseWrapper.updated(data={"updated": updated}, message="Notifications marked as read")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[NotificationReadAll] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)


@router.put("/{notification_id}/read", response_model=dict, status_code=status.HTTP_200_OK)
def mark_notification_read(notification_id: int, user_id: int = Query(...), db: Session = Depends(get_db)):
    try:
        db_obj = notification_crud.get_for_user(db, notification_id=notification_id, user_id=user_id)
        if not db_obj:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=ResponseWrapper.error(f"Notification {notification_id} not found", "NOTIFICATION_NOT_FOUND"),
            )
        notification_crud.mark_read(db, db_obj=db_obj)
        db.commit()
        db.refresh(db_obj)
        return ResponseWrapper.updated(
            data=NotificationResponse.model_validate(db_obj, from_attributes=True),
            message="Notification marked as read",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[NotificationRead] DB error for notification_id={notification_id}: {e}")
        raise handle_db_error(e)
