from sqlalchemy.orm import Session, joinedload

from talenthub.models.application import Application
from talenthub.models.job import Job
from talenthub.core.security import generate_id


def create(db: Session, job_id: str, applicant_id: str, cover_letter: str | None = None) -> Application:
    application = Application(
        id=generate_id(),
        job_id=job_id,
        applicant_id=applicant_id,
        cover_letter=cover_letter,
        status="pending",
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: str) -> Application | None:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.id == application_id)
        .first()
    )


def get_existing(db: Session, job_id: str, applicant_id: str) -> Application | None:
    return (
        db.query(Application)
        .filter(Application.job_id == job_id, Application.applicant_id == applicant_id)
        .first()
    )


def get_for_applicant(db: Session, applicant_id: str) -> list[Application]:
    return (
        db.query(Application)
        .filter(Application.applicant_id == applicant_id)
        .order_by(Application.applied_at.desc())
        .all()
    )


def get_for_recruiter(db: Session, recruiter_id: str, job_id: str | None = None) -> list[Application]:
    """Applications to jobs owned by recruiter_id, optionally narrowed to one job."""
    q = (
        db.query(Application)
        .join(Job, Application.job_id == Job.id)
        .filter(Job.recruiter_id == recruiter_id)
    )
    if job_id is not None:
        q = q.filter(Application.job_id == job_id)
    return q.order_by(Application.applied_at.desc()).all()


def update_status(db: Session, application_id: str, recruiter_id: str, status: str) -> Application | None:
    application = get_by_id(db, application_id)
    if not application or not application.job or application.job.recruiter_id != recruiter_id:
        return None
    application.status = status
    db.commit()
    db.refresh(application)
    return application
