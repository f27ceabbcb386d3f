from typing import Optional, List, Dict, Any, Union
from sqlalchemy.orm import Session, Query
from fastapi import HTTPException, status

from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleCreate, VehicleUpdate
from app.utils.response_utils import ResponseWrapper
from app.crud.base import CRUDBase
from app.core.logging_config import get_logger

logger = get_logger(__name__)

class CRUDVehicle(CRUDBase[Vehicle, VehicleCreate, VehicleUpdate]):

    def get_by_id_and_user(
        self, db: Session, *, vehicle_id: int, user_id: Optional[int] = None
    ) -> Optional[Vehicle]:
        """Fetch vehicle by ID (and owner if provided)"""
        query = db.query(Vehicle).filter(Vehicle.vehicle_id == vehicle_id)
        if user_id is not None:
            query = query.filter(Vehicle.user_id == user_id)
        return query.first()

    def get_or_404(self, db: Session, *, vehicle_id: int, user_id: int) -> Vehicle:
        db_obj = self.get_by_id_and_user(db, vehicle_id=vehicle_id, user_id=user_id)
        if not db_obj:
            logger.warning(f"[VehicleLookup] Vehicle ID {vehicle_id} not found for user_id={user_id}")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=ResponseWrapper.error(f"Vehicle {vehicle_id} not found", "VEHICLE_NOT_FOUND"),
            )
        return db_obj

    def query_by_user(self, db: Session, *, user_id: int) -> Query:
        """Vehicles owned by a user, newest first"""
        return (
            db.query(Vehicle)
            .filter(Vehicle.user_id == user_id)
            .order_by(Vehicle.created_at.desc(), Vehicle.vehicle_id.desc())
        )

    def get_by_user(self, db: Session, *, user_id: int) -> List[Vehicle]:
        return self.query_by_user(db, user_id=user_id).all()

    def create_for_user(self, db: Session, *, obj_in: VehicleCreate) -> Vehicle:
        """Create a vehicle with normalized plate"""
        logger.info(
            f"[VehicleCreate] Initiating vehicle creation | user_id={obj_in.user_id}, plate={obj_in.license_plate}"
        )
        data = obj_in.model_dump()
        data["license_plate"] = data["license_plate"].strip().upper()
        db_obj = Vehicle(**data)
        db.add(db_obj)
        db.flush()
        logger.info(
            f"[VehicleCreate] Vehicle created successfully | vehicle_id={db_obj.vehicle_id}, user_id={obj_in.user_id}"
        )
        return db_obj

    def update_for_user(
        self, db: Session, *, db_obj: Vehicle, obj_in: Union[VehicleUpdate, Dict[str, Any]]
    ) -> Vehicle:
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)

        # Ownership moves are not supported through updates
        update_data.pop("user_id", None)
        if update_data.get("license_plate"):
            update_data["license_plate"] = update_data["license_plate"].strip().upper()

        return self.update(db, db_obj=db_obj, obj_in=update_data)


vehicle_crud = CRUDVehicle(Vehicle)
