from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from talenthub.database import Base

ROLE_RECRUITER = "recruiter"
ROLE_APPLICANT = "applicant"


class Profile(Base):
    """Platform user. Identity itself is issued by the external auth provider."""

    __tablename__ = "profiles"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String)
    role = Column(String, nullable=False)  # recruiter | applicant
    phone = Column(String)
    location = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    applicant_profile = relationship("ApplicantProfile", back_populates="user", uselist=False)
    jobs = relationship("Job", back_populates="recruiter")
    applications = relationship("Application", back_populates="applicant")
