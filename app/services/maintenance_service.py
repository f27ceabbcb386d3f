"""
Maintenance schedule lookup with a database cache.

A lookup serves the cached row while it is younger than
MAINTENANCE_CACHE_DAYS, otherwise rebuilds it from the bundled
manufacturer tables and stores it again.
"""
from datetime import timedelta
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.crud.maintenance_schedule import maintenance_schedule_crud
from app.database.session import get_db
from app.models.maintenance_schedule import MaintenanceSchedule
from app.schemas.maintenance import MaintenanceScheduleResponse
from app.services.maintenance_schedules import MAINTENANCE_SCHEDULES
from app.utils.clock import SystemClock, get_clock

logger = get_logger(__name__)

MAINTENANCE_CACHE_DAYS = 30
DRIVING_CONDITIONS = ("normal", "severe")


def find_schedule(make: str, model: str) -> Optional[Tuple[str, str, Dict[str, Any]]]:
    """Case-insensitive lookup; returns (make, model, schedule) in their catalogue spelling."""
    wanted_make = make.strip().lower()
    wanted_model = model.strip().upper()
    for known_make, models in MAINTENANCE_SCHEDULES.items():
        if known_make.lower() == wanted_make and wanted_model in models:
            return known_make, wanted_model, models[wanted_model]
    return None


def to_schedule_response(row: MaintenanceSchedule) -> MaintenanceScheduleResponse:
    return MaintenanceScheduleResponse(
        schedule_id=row.schedule_id,
        make=row.make,
        model=row.model,
        year=row.year,
        driving_condition=row.driving_condition,
        schedule=row.schedule_data["schedule"],
        general_services=row.schedule_data["general_services"],
        source=row.source,
        last_updated=row.last_updated,
    )


class MaintenanceService:

    def __init__(self, db: Session, clock=None):
        self.db = db
        self.clock = clock or SystemClock()

    def get_maintenance_schedule(
        self, make: str, model: str, year: int, driving_condition: str = "normal"
    ) -> Optional[MaintenanceSchedule]:
        """
        Schedule for the vehicle, or None when the make/model is not in the
        catalogue. Raises ValueError for an unknown driving condition.
        """
        if driving_condition not in DRIVING_CONDITIONS:
            raise ValueError(f"driving_condition must be one of {DRIVING_CONDITIONS}, got {driving_condition!r}")

        resolved = find_schedule(make, model)
        if resolved is None:
            logger.info(f"[Maintenance] No schedule for make={make!r} model={model!r}")
            return None

        known_make, known_model, schedule = resolved
        now = self.clock.now()
        cached = maintenance_schedule_crud.get_cached(
            self.db, make=known_make, model=known_model, year=year, driving_condition=driving_condition
        )
        if cached and cached.last_updated > now - timedelta(days=MAINTENANCE_CACHE_DAYS):
            return cached

        schedule_data = {
            "schedule": schedule[driving_condition],
            "general_services": schedule["general_services"],
            "driving_condition": driving_condition,
            "last_updated": now.isoformat(),
        }

        if cached:
            cached.schedule_data = schedule_data
            cached.source = "manual"
            cached.last_updated = now
            self.db.commit()
            self.db.refresh(cached)
            logger.info(f"[Maintenance] Refreshed stale schedule {cached.schedule_id} for {known_make} {known_model}")
            return cached

        row = MaintenanceSchedule(
            make=known_make,
            model=known_model,
            year=year,
            driving_condition=driving_condition,
            schedule_data=schedule_data,
            source="manual",
            last_updated=now,
        )
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            # another request cached the same vehicle first
            self.db.rollback()
            return maintenance_schedule_crud.get_cached(
                self.db, make=known_make, model=known_model, year=year, driving_condition=driving_condition
            )
        self.db.refresh(row)
        logger.info(f"[Maintenance] Cached schedule for {known_make} {known_model} {year} ({driving_condition})")
        return row

    def get_available_maintenance(self) -> List[Dict[str, Any]]:
        return [{"make": make, "models": list(models)} for make, models in MAINTENANCE_SCHEDULES.items()]


def get_maintenance_service(db: Session = Depends(get_db), clock=Depends(get_clock)) -> MaintenanceService:
    return MaintenanceService(db, clock=clock)
