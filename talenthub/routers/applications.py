import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from talenthub.database import get_db
from talenthub.dependencies import get_current_recruiter, get_current_user
from talenthub.models.profile import Profile, ROLE_RECRUITER
from talenthub.repos.application_repo import get_for_applicant, get_for_recruiter, update_status
from talenthub.routers.assessments import to_result
from talenthub.schemas.application import ApplicationResponse, ApplicationStatusUpdate
from talenthub.schemas.assessment import AssessmentResult
from talenthub.services.assessment_service import list_assessments_for_application

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationResponse])
def list_applications(
    job_id: str | None = None,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_user),
):
    """
    Recruiters see applications to their own jobs (optionally one job);
    applicants see their own applications.
    """
    if user.role == ROLE_RECRUITER:
        rows = get_for_recruiter(db, user.id, job_id=job_id)
    else:
        rows = get_for_applicant(db, user.id)
    return [ApplicationResponse.model_validate(a) for a in rows]


@router.patch("/{application_id}/status", response_model=ApplicationResponse)
def change_application_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    application = update_status(db, application_id, user.id, body.status)
    if not application:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    logger.info("Application status updated: id=%s status=%s", application_id, body.status)
    return ApplicationResponse.model_validate(application)


@router.get("/{application_id}/assessments", response_model=list[AssessmentResult])
def list_application_assessments(
    application_id: str,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    """Assessment results for one application, newest first."""
    return [to_result(a) for a in list_assessments_for_application(db, application_id, user.id)]
