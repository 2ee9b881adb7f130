from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talenthub.database import get_db
from talenthub.dependencies import get_current_recruiter
from talenthub.models.profile import Profile
from talenthub.schemas.job import CandidateMatchSummary
from talenthub.services.match_analysis_service import candidate_match_summary

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("/{applicant_id}/match-summary", response_model=CandidateMatchSummary)
def match_summary(
    applicant_id: str,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_recruiter),
):
    """Mean and best persisted match score of an applicant across this recruiter's jobs."""
    return CandidateMatchSummary(**candidate_match_summary(db, applicant_id, user.id))
