from sqlalchemy import (
    Column, Integer, String, Boolean, Date, DateTime, Text, ForeignKey, UniqueConstraint, func
)
from sqlalchemy.orm import relationship
from app.database.session import Base


class Notification(Base):
    """
    User-facing alert attached to a vehicle.

    ``message_key`` identifies what the notification was generated for
    (e.g. ``upcoming:2026-03-31:30`` or ``expired:2026-02-24``) so that the
    same reminder can only be stored once per vehicle and type.
    """
    __tablename__ = "notifications"
    __table_args__ = (
        UniqueConstraint("vehicle_id", "type", "message_key", name="uq_notification_vehicle_type_key"),
        {"extend_existing": True},
    )

    notification_id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False, index=True)

    type = Column(String(50), nullable=False)  # document type, e.g. 'emission', 'rc_book'
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    message_key = Column(String(100), nullable=False)
    due_date = Column(Date, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)

    # Relationships
    vehicle = relationship("app.models.vehicle.Vehicle", back_populates="notifications")
