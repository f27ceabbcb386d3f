from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database.session import get_db
from app.crud.user import user_crud
from app.crud.vehicle import vehicle_crud
from app.schemas.vehicle import VehicleCreate, VehicleUpdate, VehicleResponse
from app.utils.pagination import paginate_query
from app.utils.response_utils import ResponseWrapper, handle_db_error, handle_http_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.post("/", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_vehicle(vehicle_in: VehicleCreate, db: Session = Depends(get_db)):
    """
    Register a vehicle for a user.

    Expiry dates are optional and may already be in the past; the expiry
    sweep reports those as expired.
    """
    try:
        user_crud.get_or_404(db, user_id=vehicle_in.user_id)

        db_obj = vehicle_crud.create_for_user(db, obj_in=vehicle_in)
        db.commit()
        db.refresh(db_obj)

        return ResponseWrapper.created(
            data={"vehicle": VehicleResponse.model_validate(db_obj, from_attributes=True)},
            message="Vehicle created successfully",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[VehicleCreate] DB error while creating vehicle: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"[VehicleCreate] Unexpected error creating vehicle: {e}")
        raise handle_http_error(e)


@router.get("/", response_model=dict, status_code=status.HTTP_200_OK)
def read_vehicles(
    user_id: int = Query(...),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    try:
        total, items = paginate_query(vehicle_crud.query_by_user(db, user_id=user_id), skip, limit)
        vehicle_list = [VehicleResponse.model_validate(vehicle, from_attributes=True) for vehicle in items]

        logger.info(f"[VehicleList] user_id={user_id} returned={len(vehicle_list)} total={total}")
        return ResponseWrapper.success(
            data={"total": total, "items": vehicle_list},
            message="Vehicle list fetched successfully",
        )
    except SQLAlchemyError as e:
        logger.exception(f"[VehicleList] DB error: {e}")
        raise handle_db_error(e)
    except Exception as e:
        logger.exception(f"[VehicleList] Unexpected error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ResponseWrapper.error("Unexpected error fetching vehicles", "VEHICLE_FETCH_FAILED"),
        )


@router.get("/{vehicle_id}", response_model=dict, status_code=status.HTTP_200_OK)
def read_vehicle(vehicle_id: int, user_id: int = Query(...), db: Session = Depends(get_db)):
    try:
        db_vehicle = vehicle_crud.get_or_404(db, vehicle_id=vehicle_id, user_id=user_id)
        return ResponseWrapper.success(
            data=VehicleResponse.model_validate(db_vehicle, from_attributes=True),
            message="Vehicle details fetched successfully",
        )
    except SQLAlchemyError as e:
        logger.exception(f"[VehicleRead] DB error for vehicle_id={vehicle_id}: {e}")
        raise handle_db_error(e)
    except HTTPException as e:
        raise handle_http_error(e)
    except Exception as e:
        logger.exception(f"[VehicleRead] Unexpected error for vehicle_id={vehicle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ResponseWrapper.error("Unexpected error fetching vehicle details", "VEHICLE_READ_FAILED"),
        )


@router.put("/{vehicle_id}", response_model=dict, status_code=status.HTTP_200_OK)
def update_vehicle(
    vehicle_id: int,
    vehicle_in: VehicleUpdate,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    try:
        db_vehicle = vehicle_crud.get_or_404(db, vehicle_id=vehicle_id, user_id=user_id)
        db_vehicle = vehicle_crud.update_for_user(db, db_obj=db_vehicle, obj_in=vehicle_in)
        db.commit()
        db.refresh(db_vehicle)

        logger.info(f"[VehicleUpdate] vehicle_id={vehicle_id} updated by user_id={user_id}")
        return ResponseWrapper.updated(
            data=VehicleResponse.model_validate(db_vehicle, from_attributes=True),
            message="Vehicle updated successfully",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[VehicleUpdate] DB error for vehicle_id={vehicle_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"[VehicleUpdate] Unexpected error for vehicle_id={vehicle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ResponseWrapper.error("Unexpected error updating vehicle", "VEHICLE_UPDATE_FAILED"),
        )


@router.delete("/{vehicle_id}", response_model=dict, status_code=status.HTTP_200_OK)
def delete_vehicle(vehicle_id: int, user_id: int = Query(...), db: Session = Depends(get_db)):
    """Delete a vehicle together with its notifications and tracked documents."""
    try:
        db_vehicle = vehicle_crud.get_or_404(db, vehicle_id=vehicle_id, user_id=user_id)
        db.delete(db_vehicle)
        db.commit()

        logger.info(f"[VehicleDelete] vehicle_id={vehicle_id} deleted by user_id={user_id}")
        return ResponseWrapper.deleted(message="Vehicle deleted successfully")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[VehicleDelete] DB error for vehicle_id={vehicle_id}: {e}")
        raise handle_db_error(e)
    except HTTPException:
        db.rollback()
        raise
