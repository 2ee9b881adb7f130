from datetime import datetime

from sqlalchemy.orm import Session

from talenthub.models.assessment import Assessment, OPEN_STATUSES, STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_SENT


def create(
    db: Session,
    assessment_id: str,
    application_id: str,
    job_id: str,
    applicant_id: str,
    questions,
    assessment_url: str,
    expires_at: datetime,
) -> Assessment:
    assessment = Assessment(
        id=assessment_id,
        application_id=application_id,
        job_id=job_id,
        applicant_id=applicant_id,
        questions=questions,
        assessment_url=assessment_url,
        status=STATUS_SENT,
        expires_at=expires_at,
    )
    db.add(assessment)
    db.commit()
    db.refresh(assessment)
    return assessment


def get_by_id(db: Session, assessment_id: str) -> Assessment | None:
    return db.query(Assessment).filter(Assessment.id == assessment_id).first()


def get_for_application(db: Session, application_id: str) -> list[Assessment]:
    return (
        db.query(Assessment)
        .filter(Assessment.application_id == application_id)
        .order_by(Assessment.created_at.desc())
        .all()
    )


def get_open_for_application(db: Session, application_id: str, now: datetime) -> list[Assessment]:
    """Assessments still awaiting submission (not completed, not past expiry)."""
    return (
        db.query(Assessment)
        .filter(
            Assessment.application_id == application_id,
            Assessment.status.in_(OPEN_STATUSES),
            Assessment.expires_at >= now,
        )
        .all()
    )


def mark_in_progress(db: Session, assessment_id: str, applicant_id: str, now: datetime) -> int:
    """Atomically move sent -> in_progress. Returns affected row count."""
    count = (
        db.query(Assessment)
        .filter(
            Assessment.id == assessment_id,
            Assessment.applicant_id == applicant_id,
            Assessment.status == STATUS_SENT,
            Assessment.expires_at >= now,
        )
        .update({Assessment.status: STATUS_IN_PROGRESS, Assessment.updated_at: now}, synchronize_session=False)
    )
    db.commit()
    return count


def complete_if_open(
    db: Session,
    assessment_id: str,
    applicant_id: str,
    responses: dict,
    score: int,
    now: datetime,
) -> int:
    """
    Store responses and score in one conditional UPDATE guarded by owner,
    open status and deadline. Returns affected row count: 0 means another
    submission won or the assessment is no longer open.
    """
    count = (
        db.query(Assessment)
        .filter(
            Assessment.id == assessment_id,
            Assessment.applicant_id == applicant_id,
            Assessment.status.in_(OPEN_STATUSES),
            Assessment.expires_at >= now,
        )
        .update(
            {
                Assessment.responses: responses,
                Assessment.score: score,
                Assessment.status: STATUS_COMPLETED,
                Assessment.updated_at: now,
            },
            synchronize_session=False,
        )
    )
    db.commit()
    return count
