from sqlalchemy import Column, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from talenthub.database import Base

APPLICATION_STATUSES = ("pending", "reviewed", "shortlisted", "rejected", "hired")


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (UniqueConstraint("job_id", "applicant_id", name="uq_applications_job_applicant"),)

    id = Column(String, primary_key=True, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    applicant_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String, default="pending")
    cover_letter = Column(Text)
    applied_at = Column(DateTime(timezone=True), server_default=func.now())

    job = relationship("Job", back_populates="applications")
    applicant = relationship("Profile", back_populates="applications")
    assessments = relationship(
        "Assessment",
        back_populates="application",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
