from sqlalchemy.orm import Session

from talenthub.models.applicant_profile import ApplicantProfile
from talenthub.core.security import generate_id


def get_by_user(db: Session, user_id: str) -> ApplicantProfile | None:
    return db.query(ApplicantProfile).filter(ApplicantProfile.user_id == user_id).first()


def upsert(db: Session, user_id: str, **fields) -> ApplicantProfile:
    """Create or update the applicant's profile. Only keys passed in fields are touched."""
    profile = get_by_user(db, user_id)
    if not profile:
        profile = ApplicantProfile(id=generate_id(), user_id=user_id)
        db.add(profile)
    for key, value in fields.items():
        setattr(profile, key, value)
    db.commit()
    db.refresh(profile)
    return profile
