"""
Assessment lifecycle: sent -> in_progress -> completed, with expiry
evaluated lazily from expires_at at read and write time.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from talenthub.config import settings
from talenthub.core.errors import (
    AssessmentExpiredError,
    InvalidStateError,
    NotFoundError,
    UnauthorizedError,
    UpstreamFailureError,
)
from talenthub.core.security import generate_id
from talenthub.models.assessment import (
    Assessment,
    STATUS_COMPLETED,
    STATUS_EXPIRED,
    STATUS_IN_PROGRESS,
)
from talenthub.repos import application_repo, assessment_repo, job_repo
from talenthub.services.question_bank import DEFAULT_ASSESSMENT_QUESTIONS, normalize_questions, question_key

logger = logging.getLogger(__name__)


def _utcnow(now: datetime | None = None) -> datetime:
    return now or datetime.now(timezone.utc)


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def is_expired(assessment: Assessment, now: datetime | None = None) -> bool:
    if assessment.status == STATUS_COMPLETED:
        return False
    if assessment.status == STATUS_EXPIRED:
        return True
    return _utcnow(now) > _aware(assessment.expires_at)


def effective_status(assessment: Assessment, now: datetime | None = None) -> str:
    """Status as callers should see it: a past-deadline open assessment reads as expired."""
    if is_expired(assessment, now):
        return STATUS_EXPIRED
    return assessment.status


def time_remaining_seconds(assessment: Assessment, now: datetime | None = None) -> int:
    if effective_status(assessment, now) in (STATUS_COMPLETED, STATUS_EXPIRED):
        return 0
    delta = _aware(assessment.expires_at) - _utcnow(now)
    return max(0, int(delta.total_seconds()))


def completion_score(questions: Any, responses: dict[str, Any] | None) -> int:
    """Percentage of presented questions that received a non-blank answer."""
    presented = normalize_questions(questions)
    if not presented:
        return 0
    responses = responses or {}
    answered = 0
    for i in range(len(presented)):
        answer = responses.get(question_key(i))
        if isinstance(answer, str) and answer.strip():
            answered += 1
    return round(answered * 100 / len(presented))


def build_assessment_url(assessment_id: str) -> str:
    return f"{settings.public_app_url.rstrip('/')}/assessment/{assessment_id}"


def generate_assessment(
    db: Session,
    application_id: str,
    questions: Any = None,
    recruiter_id: str | None = None,
    now: datetime | None = None,
) -> Assessment:
    """
    Issue a new assessment for an application. When questions is omitted the
    default two-per-category template is used; otherwise it is stored as given.
    """
    now = _utcnow(now)
    application = application_repo.get_by_id(db, application_id)
    if not application:
        raise NotFoundError("Application not found")

    job = application.job or job_repo.get_by_id(db, application.job_id)
    if recruiter_id is not None and (not job or job.recruiter_id != recruiter_id):
        logger.info("Assessment generation refused: recruiter=%s application=%s", recruiter_id, application_id)
        raise UnauthorizedError("You can only send assessments for your own jobs")

    open_ones = assessment_repo.get_open_for_application(db, application_id, now)
    if open_ones:
        logger.warning(
            "Application %s already has %d open assessment(s); issuing another",
            application_id,
            len(open_ones),
        )

    assessment_id = generate_id()
    payload = questions if questions is not None else DEFAULT_ASSESSMENT_QUESTIONS
    try:
        assessment = assessment_repo.create(
            db,
            assessment_id=assessment_id,
            application_id=application_id,
            job_id=application.job_id,
            applicant_id=application.applicant_id,
            questions=payload,
            assessment_url=build_assessment_url(assessment_id),
            expires_at=now + timedelta(days=settings.assessment_validity_days),
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to create assessment for application=%s: %s", application_id, e)
        raise UpstreamFailureError("Failed to create assessment") from e

    logger.info("Assessment %s created for application=%s", assessment.id, application_id)
    return assessment


def get_assessment_for_applicant(db: Session, assessment_id: str, caller_id: str) -> Assessment:
    assessment = assessment_repo.get_by_id(db, assessment_id)
    if not assessment:
        raise NotFoundError("Assessment not found")
    if assessment.applicant_id != caller_id:
        raise UnauthorizedError("This assessment belongs to another applicant")
    return assessment


def get_assessment_for_recruiter(db: Session, assessment_id: str, recruiter_id: str) -> Assessment:
    assessment = assessment_repo.get_by_id(db, assessment_id)
    if not assessment:
        raise NotFoundError("Assessment not found")
    job = job_repo.get_by_id(db, assessment.job_id)
    if not job or job.recruiter_id != recruiter_id:
        raise UnauthorizedError("This assessment belongs to another recruiter's job")
    return assessment


def list_assessments_for_application(db: Session, application_id: str, recruiter_id: str) -> list[Assessment]:
    application = application_repo.get_by_id(db, application_id)
    if not application:
        raise NotFoundError("Application not found")
    if not application.job or application.job.recruiter_id != recruiter_id:
        raise UnauthorizedError("This application belongs to another recruiter's job")
    return assessment_repo.get_for_application(db, application_id)


def _ensure_open(assessment: Assessment, now: datetime) -> None:
    if assessment.status == STATUS_COMPLETED:
        raise InvalidStateError("Assessment already completed")
    if is_expired(assessment, now):
        raise AssessmentExpiredError()


def start_assessment(
    db: Session,
    assessment_id: str,
    caller_id: str,
    now: datetime | None = None,
) -> Assessment:
    """Mark a sent assessment as in progress. Already in progress is a no-op."""
    now = _utcnow(now)
    assessment = get_assessment_for_applicant(db, assessment_id, caller_id)
    _ensure_open(assessment, now)
    if assessment.status == STATUS_IN_PROGRESS:
        return assessment
    try:
        assessment_repo.mark_in_progress(db, assessment_id, caller_id, now)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to start assessment=%s: %s", assessment_id, e)
        raise UpstreamFailureError("Failed to start assessment") from e
    return assessment_repo.get_by_id(db, assessment_id)


def submit_responses(
    db: Session,
    assessment_id: str,
    caller_id: str,
    responses: dict[str, Any],
    now: datetime | None = None,
) -> Assessment:
    """
    Record the applicant's answers and completion score, closing the
    assessment. The write itself is conditional on the assessment still
    being open, so of two racing submissions only one is accepted.
    """
    now = _utcnow(now)
    assessment = get_assessment_for_applicant(db, assessment_id, caller_id)
    _ensure_open(assessment, now)

    score = completion_score(assessment.questions, responses)
    try:
        updated = assessment_repo.complete_if_open(db, assessment_id, caller_id, responses, score, now)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to store responses for assessment=%s: %s", assessment_id, e)
        raise UpstreamFailureError("Failed to submit assessment") from e

    if not updated:
        current = assessment_repo.get_by_id(db, assessment_id)
        logger.info("Submission for assessment=%s lost the conditional update", assessment_id)
        if current is not None and is_expired(current, now):
            raise AssessmentExpiredError()
        raise InvalidStateError("Assessment already completed")

    logger.info("Assessment %s completed by applicant=%s score=%d", assessment_id, caller_id, score)
    return assessment_repo.get_by_id(db, assessment_id)
