from sqlalchemy import Column, Integer, String, DateTime, JSON, UniqueConstraint, func
from app.database.session import Base


class MaintenanceSchedule(Base):
    """
    Cached service schedule for a make/model/year and driving condition.

    ``schedule_data`` holds ``{"schedule": [...], "general_services": {...},
    "driving_condition": ..., "last_updated": ...}``. Rows older than the
    cache window are rebuilt on the next lookup.
    """
    __tablename__ = "maintenance_schedules"
    __table_args__ = (
        UniqueConstraint("make", "model", "year", "driving_condition", name="uq_maintenance_schedule_vehicle"),
        {"extend_existing": True},
    )

    schedule_id = Column(Integer, primary_key=True, index=True)
    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    driving_condition = Column(String(10), nullable=False, default="normal")  # normal | severe

    schedule_data = Column(JSON, nullable=False)
    source = Column(String(20), nullable=False, default="manual")
    last_updated = Column(DateTime, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
