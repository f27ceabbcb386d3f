from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from sqlalchemy.orm import relationship
from app.database.session import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"extend_existing": True}

    user_id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), unique=True, nullable=False)
    email = Column(String(255))
    mobile = Column(String(20))
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)

    # Relationships
    vehicles = relationship(
        "app.models.vehicle.Vehicle", back_populates="user", cascade="all, delete-orphan"
    )
    profile = relationship(
        "app.models.user_profile.UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    emergency_contact = relationship(
        "app.models.emergency_contact.EmergencyContact",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
