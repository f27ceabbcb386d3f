from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.database.session import Base


class EmergencyContact(Base):
    """
    Phone book for breakdowns and accidents. Every entry is optional; a user
    keeps a single row and edits it in place.
    """
    __tablename__ = "emergency_contacts"
    __table_args__ = {"extend_existing": True}

    contact_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, unique=True)

    emergency_name = Column(String(150))
    emergency_phone = Column(String(20))
    insurance_name = Column(String(150))
    insurance_phone = Column(String(20))
    roadside_phone = Column(String(20))
    service_centre_name = Column(String(150))
    service_centre_phone = Column(String(20))
    spare_parts_name = Column(String(150))
    spare_parts_phone = Column(String(20))

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    user = relationship("app.models.user.User", back_populates="emergency_contact")
