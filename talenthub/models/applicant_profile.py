from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from talenthub.database import Base


class ApplicantProfile(Base):
    __tablename__ = "applicant_profiles"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), unique=True, nullable=False)
    bio = Column(Text)
    skills = Column(JSONB)  # list[str]
    experience_years = Column(Integer)
    education = Column(String)
    portfolio_url = Column(String)
    availability = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("Profile", back_populates="applicant_profile")
