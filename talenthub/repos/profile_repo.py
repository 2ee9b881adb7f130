from sqlalchemy.orm import Session

from talenthub.models.profile import Profile


def get_by_id(db: Session, user_id: str) -> Profile | None:
    return db.query(Profile).filter(Profile.id == user_id).first()


def get_by_email(db: Session, email: str) -> Profile | None:
    return db.query(Profile).filter(Profile.email == email).first()
