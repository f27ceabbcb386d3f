from datetime import timedelta

from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.database.session import get_db
from app.crud.vehicle import vehicle_crud
from app.schemas.stats import VehicleStatsResponse
from app.utils.clock import get_clock
from app.utils.response_utils import ResponseWrapper, handle_db_error
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/stats", tags=["stats"])

EXPIRY_FIELDS = ("insurance_expiry", "emission_expiry", "rc_expiry")


@router.get("/", response_model=dict, status_code=status.HTTP_200_OK)
def read_vehicle_stats(
    user_id: int = Query(...),
    db: Session = Depends(get_db),
    clock=Depends(get_clock),
):
    """
    Dashboard counters. A vehicle is counted once: as expired if any tracked
    date has passed, otherwise as expiring soon if one falls in the window.
    """
    try:
        vehicles = vehicle_crud.get_by_user(db, user_id=user_id)
    except SQLAlchemyError as e:
        logger.exception(f"[VehicleStats] DB error for user_id={user_id}: {e}")
        raise handle_db_error(e)

    today = clock.today()
    window_end = today + timedelta(days=settings.EXPIRY_SOON_WINDOW_DAYS)

    expired = expiring_soon = 0
    for vehicle in vehicles:
        dates = [getattr(vehicle, field) for field in EXPIRY_FIELDS if getattr(vehicle, field)]
        if any(d < today for d in dates):
            expired += 1
        elif any(today <= d <= window_end for d in dates):
            expiring_soon += 1

    stats = VehicleStatsResponse(total_vehicles=len(vehicles), expiring_soon=expiring_soon, expired=expired)
    return ResponseWrapper.success(data=stats, message="Vehicle stats fetched successfully")
