import logging

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from talenthub.models.job import Job
from talenthub.models.match_score import MatchScore
from talenthub.core.security import generate_id

logger = logging.getLogger(__name__)


def upsert(
    db: Session,
    job_id: str,
    applicant_id: str,
    match_score: int,
    analysis: str | None,
    criteria: dict | None,
) -> MatchScore | None:
    """
    Insert or overwrite the score for (job_id, applicant_id) using
    ON CONFLICT (job_id, applicant_id) DO UPDATE. Last writer wins.
    """
    stmt = pg_insert(MatchScore).values(
        id=generate_id(),
        job_id=job_id,
        applicant_id=applicant_id,
        match_score=match_score,
        analysis=analysis,
        criteria=criteria,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[MatchScore.job_id, MatchScore.applicant_id],
        set_={
            "match_score": stmt.excluded.match_score,
            "analysis": stmt.excluded.analysis,
            "criteria": stmt.excluded.criteria,
            "updated_at": func.now(),
        },
    )
    db.execute(stmt)
    db.commit()
    logger.debug("Match score upserted job=%s applicant=%s score=%d", job_id, applicant_id, match_score)
    return get_for_pair(db, job_id, applicant_id)


def get_for_pair(db: Session, job_id: str, applicant_id: str) -> MatchScore | None:
    return (
        db.query(MatchScore)
        .filter(MatchScore.job_id == job_id, MatchScore.applicant_id == applicant_id)
        .first()
    )


def get_for_applicant(db: Session, applicant_id: str, recruiter_id: str | None = None) -> list[MatchScore]:
    """Scores for one applicant; with recruiter_id, only rows for that recruiter's jobs."""
    q = db.query(MatchScore).filter(MatchScore.applicant_id == applicant_id)
    if recruiter_id is not None:
        q = q.join(Job, MatchScore.job_id == Job.id).filter(Job.recruiter_id == recruiter_id)
    return q.order_by(MatchScore.match_score.desc()).all()


def get_for_job(db: Session, job_id: str) -> list[MatchScore]:
    return (
        db.query(MatchScore)
        .filter(MatchScore.job_id == job_id)
        .order_by(MatchScore.match_score.desc())
        .all()
    )
