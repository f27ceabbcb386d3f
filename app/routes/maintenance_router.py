from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError

from app.schemas.maintenance import AvailableMaintenance
from app.services.maintenance_service import (
    MaintenanceService,
    get_maintenance_service,
    to_schedule_response,
)
from app.utils.response_utils import ResponseWrapper, handle_db_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("/schedule", response_model=dict, status_code=status.HTTP_200_OK)
def read_maintenance_schedule(
    make: str = Query(..., min_length=1),
    model: str = Query(..., min_length=1),
    year: int = Query(..., ge=1900),
    driving_condition: str = Query("normal", pattern="^(normal|severe)$"),
    maintenance_service: MaintenanceService = Depends(get_maintenance_service),
):
    try:
        row = maintenance_service.get_maintenance_schedule(make, model, year, driving_condition)
    except SQLAlchemyError as e:
        maintenance_service.db.rollback()
        logger.exception(f"[MaintenanceSchedule] DB error for {make} {model} {year}: {e}")
        raise handle_db_error(e)

    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ResponseWrapper.error(f"No maintenance schedule for {make} {model}", "SCHEDULE_NOT_FOUND"),
        )
    return ResponseWrapper.success(data=to_schedule_response(row), message="Maintenance schedule fetched successfully")


@router.get("/available", response_model=dict, status_code=status.HTTP_200_OK)
def read_available_maintenance(maintenance_service: MaintenanceService = Depends(get_maintenance_service)):
    available = [AvailableMaintenance(**entry) for entry in maintenance_service.get_available_maintenance()]
    return ResponseWrapper.success(data=available, message="Available schedules fetched successfully")
