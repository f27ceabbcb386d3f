"""
Document expiry tracking.

One row per uploaded compliance document whose validity has to be watched.
A renewal deactivates the earlier rows for the same vehicle and type.
"""
from sqlalchemy import (
    Column, Integer, Boolean, Date, DateTime, Numeric, ForeignKey, Index, Enum as SQLEnum
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from enum import Enum as PyEnum
from app.database.session import Base


class DocumentTypeEnum(str, PyEnum):
    """Document types that carry an expiry date"""
    ROAD_TAX = "road_tax"
    FITNESS_CERTIFICATE = "fitness_certificate"
    TRAVEL_PERMITS = "travel_permits"
    EMISSION = "emission"
    RC_BOOK = "rc_book"
    INSURANCE = "insurance"


class DocumentExpiry(Base):
    __tablename__ = "document_expiries"
    __table_args__ = (
        Index("ix_document_expiries_vehicle_type", "vehicle_id", "document_type", "is_active"),
        {"extend_existing": True},
    )

    document_expiry_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)

    # Stored as the lowercase value, matching notifications.type
    document_type = Column(
        SQLEnum(DocumentTypeEnum, native_enum=False, length=30, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    expiry_date = Column(Date, nullable=False)
    amount = Column(Numeric(10, 2), nullable=True)  # Fee paid, when the upload carries one
    issue_date = Column(Date, nullable=True)

    reminder_sent = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    vehicle = relationship("app.models.vehicle.Vehicle", back_populates="document_expiries")
