from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.database.session import Base


class Document(Base):
    """
    Metadata of a file uploaded for a vehicle. The bytes live in object
    storage; ``file_path`` is the storage key.
    """
    __tablename__ = "documents"
    __table_args__ = {"extend_existing": True}

    document_id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False, index=True)

    type = Column(String(50), nullable=False, default="other")  # rc, insurance, emission, license, other, ...
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String(100), nullable=False)

    uploaded_at = Column(DateTime, default=func.now(), nullable=False)

    # Relationships
    vehicle = relationship("app.models.vehicle.Vehicle", back_populates="documents")
