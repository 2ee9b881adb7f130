"""
JSON function endpoints. Each returns {"success": true, ...} on success; domain
failures are rendered as {"success": false, "error": ...} by the app-level
TalentHubError handler.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talenthub.database import get_db
from talenthub.dependencies import get_current_recruiter, get_sender
from talenthub.models.profile import Profile
from talenthub.schemas.functions import (
    ContactCandidateRequest,
    GenerateAssessmentRequest,
    MatchAnalysisRequest,
)
from talenthub.services.assessment_service import generate_assessment
from talenthub.services.match_analysis_service import run_match_analysis
from talenthub.services.notifications import NotificationSender, contact_candidate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/functions", tags=["functions"])


@router.post("/ai-analysis")
def ai_analysis(
    body: MatchAnalysisRequest,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    """Score an applicant against a job and persist the result."""
    logger.info(
        "Match analysis requested by recruiter=%s application=%s job=%s applicant=%s",
        user.id, body.application_id, body.job_id, body.applicant_id,
    )
    result = run_match_analysis(db, body.job_id, body.applicant_id, recruiter_id=user.id)
    return {"success": True, **result}


@router.post("/generate-assessment")
def generate_assessment_fn(
    body: GenerateAssessmentRequest,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    """Issue an assessment for an application; uses the default question set when none is given."""
    assessment = generate_assessment(db, body.application_id, body.questions, recruiter_id=user.id)
    return {
        "success": True,
        "assessmentId": assessment.id,
        "assessmentUrl": assessment.assessment_url,
        "expiresAt": assessment.expires_at.isoformat(),
        "message": "Assessment created successfully",
    }


@router.post("/contact-candidate")
def contact_candidate_fn(
    body: ContactCandidateRequest,
    user: Profile = Depends(get_current_recruiter),
    sender: NotificationSender = Depends(get_sender),
):
    """Send a recruiter's message to a candidate by e-mail."""
    logger.info("Contact email requested by recruiter=%s to=%s", user.id, body.candidate_email)
    contact_candidate(
        sender,
        candidate_email=body.candidate_email,
        candidate_name=body.candidate_name,
        recruiter_name=body.recruiter_name,
        job_title=body.job_title,
        message=body.message,
    )
    return {"success": True, "emailSent": True}
