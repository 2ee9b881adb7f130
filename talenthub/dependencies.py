import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from talenthub.database import get_db
from talenthub.core.errors import UnauthorizedError
from talenthub.core.security import decode_access_token
from talenthub.models.profile import Profile, ROLE_APPLICANT, ROLE_RECRUITER
from talenthub.repos.profile_repo import get_by_id
from talenthub.services.notifications import NotificationSender, get_notification_sender

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Profile:
    if not credentials:
        logger.info("Auth failed: missing bearer credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    user_id = decode_access_token(credentials.credentials)
    if not user_id:
        logger.info("Auth failed: invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    user = get_by_id(db, user_id)
    if not user:
        logger.info("Auth failed: profile from token not found")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def get_current_recruiter(
    user=Depends(get_current_user),
):
    """Require an authenticated user with the recruiter role."""
    if getattr(user, "role", None) != ROLE_RECRUITER:
        logger.info("Role check failed: user=%s is not a recruiter", getattr(user, "id", None))
        raise UnauthorizedError("Recruiter access required")
    return user


def get_current_applicant(
    user=Depends(get_current_user),
):
    """Require an authenticated user with the applicant role."""
    if getattr(user, "role", None) != ROLE_APPLICANT:
        logger.info("Role check failed: user=%s is not an applicant", getattr(user, "id", None))
        raise UnauthorizedError("Applicant access required")
    return user


def get_sender() -> NotificationSender:
    return get_notification_sender()
