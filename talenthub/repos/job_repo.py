from sqlalchemy.orm import Session

from talenthub.models.job import Job
from talenthub.core.security import generate_id


def create(
    db: Session,
    recruiter_id: str,
    title: str,
    description: str,
    *,
    location: str | None = None,
    job_type: str | None = None,
    skills_required: list[str] | None = None,
    experience_level: str | None = None,
    status: str = "active",
) -> Job:
    job = Job(
        id=generate_id(),
        recruiter_id=recruiter_id,
        title=title,
        description=description,
        location=location,
        job_type=job_type,
        skills_required=skills_required or [],
        experience_level=experience_level,
        status=status,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def get_by_id(db: Session, job_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id).first()


def get_active(db: Session, limit: int = 100, offset: int = 0) -> list[Job]:
    return (
        db.query(Job)
        .filter(Job.status == "active")
        .order_by(Job.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def get_for_recruiter(db: Session, recruiter_id: str) -> list[Job]:
    return (
        db.query(Job)
        .filter(Job.recruiter_id == recruiter_id)
        .order_by(Job.created_at.desc())
        .all()
    )


def update_status(db: Session, job_id: str, recruiter_id: str, status: str) -> Job | None:
    job = (
        db.query(Job)
        .filter(Job.id == job_id, Job.recruiter_id == recruiter_id)
        .first()
    )
    if not job:
        return None
    job.status = status
    db.commit()
    db.refresh(job)
    return job
