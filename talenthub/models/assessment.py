from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from talenthub.database import Base

STATUS_SENT = "sent"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"
STATUS_EXPIRED = "expired"
OPEN_STATUSES = (STATUS_SENT, STATUS_IN_PROGRESS)


class Assessment(Base):
    """
    Quiz sent to an applicant for one application.
    questions keeps the payload shape it was created with (flat list or
    {work_ethics, technical} buckets). expires_at is set once at creation.
    """

    __tablename__ = "assessments"

    id = Column(String, primary_key=True, index=True)
    application_id = Column(String, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    applicant_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    questions = Column(JSONB, nullable=False)
    status = Column(String, nullable=False, default=STATUS_SENT)
    assessment_url = Column(String, nullable=False)
    score = Column(Integer)
    responses = Column(JSONB)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    application = relationship("Application", back_populates="assessments")
