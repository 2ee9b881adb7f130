import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talenthub.database import get_db
from talenthub.dependencies import get_current_applicant, get_current_recruiter
from talenthub.models.profile import Profile
from talenthub.schemas.assessment import AssessmentResult, AssessmentView, SubmitResponsesRequest
from talenthub.services.assessment_service import (
    effective_status,
    get_assessment_for_applicant,
    get_assessment_for_recruiter,
    start_assessment,
    submit_responses,
    time_remaining_seconds,
)
from talenthub.services.question_bank import normalize_questions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/assessments", tags=["assessments"])


def _to_view(a) -> AssessmentView:
    questions = normalize_questions(a.questions)
    return AssessmentView(
        id=a.id,
        application_id=a.application_id,
        job_id=a.job_id,
        status=effective_status(a),
        questions=questions,
        total_questions=len(questions),
        expires_at=a.expires_at,
        time_remaining_seconds=time_remaining_seconds(a),
        score=a.score,
    )


def to_result(a) -> AssessmentResult:
    return AssessmentResult(
        id=a.id,
        application_id=a.application_id,
        job_id=a.job_id,
        applicant_id=a.applicant_id,
        status=effective_status(a),
        questions=a.questions,
        total_questions=len(normalize_questions(a.questions)),
        response_count=len(a.responses or {}),
        responses=a.responses,
        score=a.score,
        assessment_url=a.assessment_url,
        expires_at=a.expires_at,
        created_at=a.created_at,
    )


@router.get("/{assessment_id}", response_model=AssessmentView)
def get_assessment(
    assessment_id: str,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_applicant),
):
    """Applicant view of an assessment with questions in presentation order."""
    return _to_view(get_assessment_for_applicant(db, assessment_id, user.id))


@router.post("/{assessment_id}/start", response_model=AssessmentView)
def start(
    assessment_id: str,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_applicant),
):
    return _to_view(start_assessment(db, assessment_id, user.id))


@router.post("/{assessment_id}/submit")
def submit(
    assessment_id: str,
    body: SubmitResponsesRequest,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_applicant),
):
    """Submit answers; the assessment is closed and scored by completion rate."""
    assessment = submit_responses(db, assessment_id, user.id, body.responses)
    return {"success": True, "assessmentId": assessment.id, "score": assessment.score, "status": assessment.status}


@router.get("/{assessment_id}/results", response_model=AssessmentResult)
def get_results(
    assessment_id: str,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    return to_result(get_assessment_for_recruiter(db, assessment_id, user.id))
