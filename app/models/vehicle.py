from sqlalchemy import (
    Column, Integer, String, DateTime, Date, ForeignKey, func
)
from sqlalchemy.orm import relationship
from app.database.session import Base


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = {"extend_existing": True}

    vehicle_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)

    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(50), nullable=False)
    license_plate = Column(String(20), unique=True, nullable=False)
    chassis_number = Column(String(50))
    engine_number = Column(String(50))

    owner_name = Column(String(150), nullable=False)
    owner_phone = Column(String(20))

    # Compliance documents tracked directly on the vehicle
    insurance_expiry = Column(Date, nullable=True)
    emission_expiry = Column(Date, nullable=True)
    rc_expiry = Column(Date, nullable=True)
    last_service_date = Column(Date, nullable=True)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    user = relationship("app.models.user.User", back_populates="vehicles")
    notifications = relationship(
        "app.models.notification.Notification", back_populates="vehicle", cascade="all, delete-orphan"
    )
    document_expiries = relationship(
        "app.models.document_expiry.DocumentExpiry", back_populates="vehicle", cascade="all, delete-orphan"
    )
    documents = relationship(
        "app.models.document.Document", back_populates="vehicle", cascade="all, delete-orphan"
    )
