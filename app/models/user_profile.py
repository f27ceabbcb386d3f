from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.database.session import Base


class UserProfile(Base):
    """Personal details shown on the profile screen; at most one per user."""
    __tablename__ = "user_profiles"
    __table_args__ = {"extend_existing": True}

    profile_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, unique=True)

    name = Column(String(150), nullable=False)
    age = Column(Integer, nullable=False)
    address = Column(Text, nullable=False)
    blood_group = Column(String(5), nullable=False)
    state = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    pin_code = Column(String(6), nullable=False)
    alternate_phone = Column(String(20))

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    user = relationship("app.models.user.User", back_populates="profile")
