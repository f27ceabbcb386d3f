from typing import Optional
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.models.maintenance_schedule import MaintenanceSchedule
from app.crud.base import CRUDBase


class CRUDMaintenanceSchedule(CRUDBase[MaintenanceSchedule, BaseModel, BaseModel]):

    def get_cached(
        self, db: Session, *, make: str, model: str, year: int, driving_condition: str
    ) -> Optional[MaintenanceSchedule]:
        return (
            db.query(MaintenanceSchedule)
            .filter(
                MaintenanceSchedule.make == make,
                MaintenanceSchedule.model == model,
                MaintenanceSchedule.year == year,
                MaintenanceSchedule.driving_condition == driving_condition,
            )
            .first()
        )


maintenance_schedule_crud = CRUDMaintenanceSchedule(MaintenanceSchedule)
