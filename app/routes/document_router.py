from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database.session import get_db
from app.crud.document import document_crud
from app.crud.vehicle import vehicle_crud
from app.schemas.document import (
    DocumentCreate,
    DocumentUploadMetadata,
    DocumentResponse,
    DocumentUploadResponse,
)
from app.schemas.document_expiry import DocumentExpiryResponse
from app.services.document_expiry_service import DocumentExpiryService, get_document_expiry_service
from app.utils.response_utils import ResponseWrapper, handle_db_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["documents"])


@router.get("/vehicles/{vehicle_id}/documents", response_model=dict, status_code=status.HTTP_200_OK)
def read_vehicle_documents(vehicle_id: int, user_id: int = Query(...), db: Session = Depends(get_db)):
    try:
        vehicle_crud.get_or_404(db, vehicle_id=vehicle_id, user_id=user_id)
        documents = document_crud.get_by_vehicle(db, vehicle_id=vehicle_id)
        return ResponseWrapper.success(
            data=[DocumentResponse.model_validate(d, from_attributes=True) for d in documents],
            message="Documents fetched successfully",
        )
    except SQLAlchemyError as e:
        logger.exception(f"[DocumentList] DB error for vehicle_id={vehicle_id}: {e}")
        raise handle_db_error(e)


@router.post("/vehicles/{vehicle_id}/documents", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_vehicle_document(
    vehicle_id: int,
    document_in: DocumentUploadMetadata,
    db: Session = Depends(get_db),
    expiry_service: DocumentExpiryService = Depends(get_document_expiry_service),
):
    """
    Record an uploaded file. When the metadata carries an expiry date the
    document is also handed to expiry tracking.
    """
    try:
        vehicle_crud.get_or_404(db, vehicle_id=vehicle_id, user_id=document_in.user_id)
        db_obj = document_crud.create(
            db,
            obj_in=DocumentCreate(
                vehicle_id=vehicle_id,
                **document_in.model_dump(include={"type", "file_name", "file_path", "file_size", "mime_type"}),
            ),
        )
        db.commit()
        db.refresh(db_obj)
        logger.info(f"[DocumentCreate] document_id={db_obj.document_id} type={db_obj.type} vehicle_id={vehicle_id}")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[DocumentCreate] DB error for vehicle_id={vehicle_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise

    expiry = None
    if document_in.expiry_date:
        expiry = expiry_service.process_document_upload(
            vehicle_id, document_in.user_id, document_in.type, document_in.expiry_date, document_in.amount
        )

    payload = DocumentUploadResponse(
        document=DocumentResponse.model_validate(db_obj, from_attributes=True),
        document_expiry=DocumentExpiryResponse.model_validate(expiry, from_attributes=True) if expiry else None,
    )
    return ResponseWrapper.created(data=payload, message="Document uploaded successfully")


@router.delete("/documents/{document_id}", response_model=dict, status_code=status.HTTP_200_OK)
def delete_document(document_id: int, user_id: int = Query(...), db: Session = Depends(get_db)):
    """Remove the metadata row; deleting the stored file is the storage layer's job."""
    try:
        db_obj = document_crud.get_or_404(db, document_id=document_id, user_id=user_id)
        db.delete(db_obj)
        db.commit()
        logger.info(f"[DocumentDelete] document_id={document_id} deleted by user_id={user_id}")
        return ResponseWrapper.deleted(message="Document deleted successfully")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[DocumentDelete] DB error for document_id={document_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
