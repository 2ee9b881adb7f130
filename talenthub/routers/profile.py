import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from talenthub.database import get_db
from talenthub.dependencies import get_current_applicant
from talenthub.models.profile import Profile
from talenthub.repos.applicant_profile_repo import get_by_user, upsert
from talenthub.schemas.profile import ApplicantProfileResponse, ApplicantProfileUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/profile", tags=["profile"])


def _to_response(p) -> ApplicantProfileResponse:
    return ApplicantProfileResponse(
        user_id=p.user_id,
        bio=p.bio,
        skills=list(p.skills or []),
        experience_years=p.experience_years,
        education=p.education,
        portfolio_url=p.portfolio_url,
        availability=p.availability,
    )


@router.get("/applicant", response_model=ApplicantProfileResponse)
def get_applicant_profile(
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_applicant),
):
    profile = get_by_user(db, user.id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Applicant profile not found")
    return _to_response(profile)


@router.put("/applicant", response_model=ApplicantProfileResponse)
def update_applicant_profile(
    body: ApplicantProfileUpdate,
    db: Session = Depends(get_db),
    user: Profile = Depends(get_current_applicant),
):
    """Create or update skills and experience. Later match scores always read the latest values."""
    fields = body.model_dump(exclude_unset=True)
    profile = upsert(db, user.id, **fields)
    logger.info("Applicant profile updated: user=%s fields=%s", user.id, sorted(fields))
    return _to_response(profile)
