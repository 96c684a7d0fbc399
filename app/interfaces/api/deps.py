"""FastAPI dependencies — JWT auth and the caller's business."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.infrastructure.database import get_db
from app.interfaces.deps import get_business_repository
from app.application.services.auth_service import decode_access_token, get_user_by_email
from app.application.services.business_service import require_business
from app.domain.models.business import Business
from app.domain.models.user import User
from app.domain.repositories.business_repository import BusinessRepository

security = HTTPBearer()


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Extract and validate the current user from JWT token."""
    payload = decode_access_token(credentials.credentials)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    email = payload.get("sub")
    if email is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )

    user = get_user_by_email(db, email)
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_current_business(
    user: User = Depends(get_current_user),
    repo: BusinessRepository = Depends(get_business_repository),
) -> Business:
    """The business owned by the caller; 404 until setup is done."""
    return require_business(repo, user)
