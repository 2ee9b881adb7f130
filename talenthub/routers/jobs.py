import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from talenthub.database import get_db
from talenthub.dependencies import get_current_applicant, get_current_recruiter, get_current_user
from talenthub.models.profile import Profile
from talenthub.repos.application_repo import create as create_application, get_existing as get_existing_application
from talenthub.repos.job_repo import (
    create as create_job,
    get_active,
    get_by_id,
    get_for_recruiter,
    update_status,
)
from talenthub.schemas.application import ApplicationResponse, ApplyRequest
from talenthub.schemas.job import JobCreate, JobResponse, JobStatusUpdate, MatchEstimate, MatchScoreResponse
from talenthub.services.match_analysis_service import estimate_match, job_match_ranking

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


def _job_to_response(j) -> JobResponse:
    return JobResponse(
        id=j.id,
        recruiter_id=j.recruiter_id,
        title=j.title or "Untitled",
        description=j.description or "",
        location=j.location,
        job_type=j.job_type,
        skills_required=list(j.skills_required or []),
        experience_level=j.experience_level,
        status=j.status,
        created_at=j.created_at,
    )


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def post_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    """Publish a job. Required skills and experience level cannot be edited afterwards."""
    job = create_job(
        db,
        recruiter_id=user.id,
        title=body.title,
        description=body.description,
        location=body.location,
        job_type=body.job_type,
        skills_required=body.skills_required,
        experience_level=body.experience_level,
        status=body.status,
    )
    logger.info("Job created: id=%s recruiter=%s", job.id, user.id)
    return _job_to_response(job)


@router.get("", response_model=list[JobResponse])
def list_active_jobs(
    limit: int = 100,
    offset: int = 0,
    db: Session = Depends(get_db),
    _user: Profile = Depends(get_current_user),
):
    return [_job_to_response(j) for j in get_active(db, limit=limit, offset=offset)]


@router.get("/mine", response_model=list[JobResponse])
def list_my_jobs(
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    return [_job_to_response(j) for j in get_for_recruiter(db, user.id)]


@router.patch("/{job_id}/status", response_model=JobResponse)
def change_job_status(
    job_id: str,
    body: JobStatusUpdate,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    job = update_status(db, job_id, user.id, body.status)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    logger.info("Job status updated: job=%s status=%s", job_id, body.status)
    return _job_to_response(job)


@router.get("/{job_id}/match-estimate", response_model=MatchEstimate)
def match_estimate(
    job_id: str,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_applicant),
):
    """Compatibility estimate for the current applicant's latest profile. Not stored."""
    result = estimate_match(db, job_id, user.id)
    return MatchEstimate(
        job_id=job_id,
        match_score=result.score,
        label=result.label,
        analysis=result.analysis,
        criteria=result.criteria,
        matched_skills=result.matched_skills,
        missing_skills=result.missing_skills,
    )


@router.get("/{job_id}/match-scores", response_model=list[MatchScoreResponse])
def job_match_scores(
    job_id: str,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    """Candidates already analyzed for this job, ranked by match score."""
    return [MatchScoreResponse.model_validate(s) for s in job_match_ranking(db, job_id, user.id)]


@router.post("/{job_id}/apply", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def apply_to_job(
    job_id: str,
    body: ApplyRequest,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_applicant),
):
    job = get_by_id(db, job_id)
    if not job or job.status != "active":
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    if get_existing_application(db, job_id, user.id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You have already applied to this job")
    try:
        application = create_application(db, job_id, user.id, body.cover_letter)
    except IntegrityError as e:
        db.rollback()
        logger.info("Duplicate application rejected: job=%s applicant=%s", job_id, user.id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You have already applied to this job") from e
    logger.info("Application created: id=%s job=%s applicant=%s", application.id, job_id, user.id)
    return ApplicationResponse.model_validate(application)
