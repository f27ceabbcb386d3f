from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database.session import get_db
from app.crud.vehicle import vehicle_crud
from app.crud.document_expiry import document_expiry_crud
from app.schemas.document_expiry import DocumentUploadRequest, DocumentExpiryResponse
from app.services.document_expiry_service import DocumentExpiryService, get_document_expiry_service
from app.utils.response_utils import ResponseWrapper, handle_db_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/vehicles/{vehicle_id}/document-expiries", tags=["document-expiries"])


@router.post("/", response_model=dict, status_code=status.HTTP_200_OK)
def track_document_expiry(
    vehicle_id: int,
    upload_in: DocumentUploadRequest,
    db: Session = Depends(get_db),
    expiry_service: DocumentExpiryService = Depends(get_document_expiry_service),
):
    """
    Record the expiry of an uploaded document and check it immediately.

    Untracked document types, or uploads without an expiry date, are
    accepted and ignored.
    """
    try:
        vehicle_crud.get_or_404(db, vehicle_id=vehicle_id, user_id=upload_in.user_id)
    except SQLAlchemyError as e:
        logger.exception(f"[DocumentExpiry] DB error for vehicle_id={vehicle_id}: {e}")
        raise handle_db_error(e)

    record = expiry_service.process_document_upload(
        vehicle_id,
        upload_in.user_id,
        upload_in.document_type,
        upload_in.expiry_date,
        upload_in.amount,
    )
    if record is None:
        return ResponseWrapper.success(data=None, message="Document type not tracked for expiry")

    return ResponseWrapper.success(
        data=DocumentExpiryResponse.model_validate(record, from_attributes=True),
        message="Document expiry tracked successfully",
    )


@router.get("/", response_model=dict, status_code=status.HTTP_200_OK)
def read_document_expiries(
    vehicle_id: int,
    user_id: int = Query(...),
    active_only: bool = Query(True),
    db: Session = Depends(get_db),
):
    try:
        vehicle_crud.get_or_404(db, vehicle_id=vehicle_id, user_id=user_id)
        records = document_expiry_crud.get_by_vehicle(db, vehicle_id=vehicle_id, active_only=active_only)
        return ResponseWrapper.success(
            data=[DocumentExpiryResponse.model_validate(r, from_attributes=True) for r in records],
            message="Document expiries fetched successfully",
        )
    except SQLAlchemyError as e:
        logger.exception(f"[DocumentExpiryList] DB error for vehicle_id={vehicle_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        raise
