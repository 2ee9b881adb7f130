from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from talenthub.database import Base


class MatchScore(Base):
    """Persisted job/applicant compatibility. One row per (job, applicant); rescoring overwrites it."""

    __tablename__ = "ai_match_scores"
    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="uq_match_scores_job_applicant"),
        CheckConstraint("match_score >= 0 AND match_score <= 100", name="ck_match_scores_range"),
    )

    id = Column(String, primary_key=True, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    applicant_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    match_score = Column(Integer, nullable=False)
    criteria = Column(JSONB)
    analysis = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
