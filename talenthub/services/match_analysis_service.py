import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from talenthub.core.errors import NotFoundError, UnauthorizedError, UpstreamFailureError
from talenthub.repos import applicant_profile_repo, job_repo, match_score_repo
from talenthub.services.match_scorer import (
    ApplicantProfile,
    JobRequirements,
    MatchScoreResult,
    compute_match,
    summarize_scores,
)
from talenthub.services.question_bank import SUGGESTED_ASSESSMENT_QUESTIONS

logger = logging.getLogger(__name__)

GENERAL_IMPROVEMENTS = ["Communication", "Technical skills", "Industry knowledge"]
MAX_IMPROVEMENTS = 5


def _load_job(db: Session, job_id: str, recruiter_id: str | None):
    job = job_repo.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")
    if recruiter_id is not None and job.recruiter_id != recruiter_id:
        raise UnauthorizedError("You can only analyze candidates for your own jobs")
    return job


def _score(db: Session, job, applicant_id: str) -> MatchScoreResult:
    profile = applicant_profile_repo.get_by_user(db, applicant_id)
    return compute_match(JobRequirements.from_job(job), ApplicantProfile.from_record(profile))


def skill_improvements(result: MatchScoreResult) -> list[str]:
    return result.missing_skills[:MAX_IMPROVEMENTS] or list(GENERAL_IMPROVEMENTS)


def run_match_analysis(
    db: Session,
    job_id: str,
    applicant_id: str,
    recruiter_id: str | None = None,
) -> dict[str, Any]:
    """
    Score the applicant's latest profile against the job and persist it,
    overwriting any earlier score for the pair.
    """
    job = _load_job(db, job_id, recruiter_id)
    result = _score(db, job, applicant_id)
    try:
        match_score_repo.upsert(
            db,
            job_id=job.id,
            applicant_id=applicant_id,
            match_score=result.score,
            analysis=result.analysis,
            criteria=result.criteria,
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save match score job=%s applicant=%s: %s", job_id, applicant_id, e)
        raise UpstreamFailureError("Failed to save match score") from e

    logger.info("Match analysis job=%s applicant=%s score=%d", job_id, applicant_id, result.score)
    return {
        "match_score": result.score,
        "analysis": result.analysis,
        "criteria": result.criteria,
        "skill_improvements": skill_improvements(result),
        "assessment_questions": SUGGESTED_ASSESSMENT_QUESTIONS,
    }


def estimate_match(db: Session, job_id: str, applicant_id: str) -> MatchScoreResult:
    """Interactive estimate for an applicant browsing jobs. Not persisted."""
    job = _load_job(db, job_id, None)
    return _score(db, job, applicant_id)


def candidate_match_summary(db: Session, applicant_id: str, recruiter_id: str) -> dict[str, Any]:
    rows = match_score_repo.get_for_applicant(db, applicant_id, recruiter_id=recruiter_id)
    summary = summarize_scores(r.match_score for r in rows)
    summary["applicant_id"] = applicant_id
    return summary


def job_match_ranking(db: Session, job_id: str, recruiter_id: str) -> list:
    """Persisted scores for one of the recruiter's jobs, best first."""
    job = _load_job(db, job_id, recruiter_id)
    return match_score_repo.get_for_job(db, job.id)
