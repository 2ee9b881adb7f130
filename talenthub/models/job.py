from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from talenthub.database import Base

JOB_STATUSES = ("active", "closed", "draft")
EXPERIENCE_LEVELS = ("entry", "mid", "senior", "executive")
JOB_TYPES = ("full-time", "part-time", "contract", "remote")


class Job(Base):
    """Posted job. skills_required and experience_level are frozen after creation."""

    __tablename__ = "jobs"

    id = Column(String, primary_key=True, index=True)
    recruiter_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String)
    job_type = Column(String)
    skills_required = Column(JSONB)  # list[str]
    experience_level = Column(String)
    status = Column(String, default="active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    recruiter = relationship("Profile", back_populates="jobs")
    applications = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
