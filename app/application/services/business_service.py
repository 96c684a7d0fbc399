"""Business service — setup flow and settings panel."""

from datetime import datetime
from typing import Optional

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.config import get_settings
from app.core.exceptions import AppError, ConflictException, EntityNotFoundException
from app.core.timeutils import as_aware, now as current_time
from app.domain.models.business import Business
from app.domain.models.user import User
from app.domain.repositories.business_repository import BusinessRepository
from app.domain.schemas.business import (
    BusinessCreate,
    BusinessRead,
    BusinessUpdate,
    SettingsForm,
    SettingsNotice,
    SettingsUpdateResult,
)

settings = get_settings()
logger = structlog.get_logger(__name__)


def get_business_for_user(repo: BusinessRepository, user: User) -> Optional[Business]:
    """Get the business owned by the user, or None before setup."""
    return repo.get_by_user_id(user.id)


def require_business(repo: BusinessRepository, user: User) -> Business:
    business = get_business_for_user(repo, user)
    if business is None:
        raise EntityNotFoundException("Business not configured", {"user_id": user.id})
    return business


def setup_business(repo: BusinessRepository, user: User, data: BusinessCreate) -> Business:
    """Create the user's business profile. A user owns at most one."""
    user_id = user.id
    if repo.get_by_user_id(user_id) is not None:
        raise ConflictException("Business already configured", {"user_id": user_id})

    try:
        created_at = current_time()
        business = repo.create(
            {"user_id": user_id, **data.model_dump(), "created_at": created_at, "updated_at": created_at}
        )
    except IntegrityError:
        repo.rollback()
        logger.warning("Concurrent business setup rejected", user_id=user_id)
        raise ConflictException("Business already configured", {"user_id": user_id})
    except SQLAlchemyError:
        repo.rollback()
        logger.exception("Business setup failed", user_id=user_id)
        raise AppError("Could not create business")

    logger.info("Business created", business_id=business.id, user_id=user_id)
    return business


def get_settings_form(business: Business) -> SettingsForm:
    return SettingsForm.model_validate(business)


def update_business_settings(
    repo: BusinessRepository,
    business: Business,
    data: BusinessUpdate,
    at: Optional[datetime] = None,
) -> SettingsUpdateResult:
    """Persist the four editable fields and stamp updated_at.

    The returned notice is visible for SETTINGS_NOTICE_SECONDS from the save.
    """
    saved_at = at or current_time()
    business_id = business.id

    try:
        business = repo.update(business, {**data.model_dump(), "updated_at": saved_at})
    except SQLAlchemyError:
        repo.rollback()
        logger.exception("Business settings update failed", business_id=business_id)
        raise AppError("Could not update business settings")

    logger.info("Business settings updated", business_id=business_id)
    return SettingsUpdateResult(
        business=BusinessRead.model_validate(business),
        notice=SettingsNotice.starting_at(saved_at, settings.SETTINGS_NOTICE_SECONDS),
    )


def current_settings_notice(business: Business, at: Optional[datetime] = None) -> Optional[SettingsNotice]:
    """Rebuild the success notice of the latest settings save while it is still showing."""
    updated_at = as_aware(business.updated_at)
    created_at = as_aware(business.created_at)
    if updated_at is None or (created_at is not None and updated_at <= created_at):
        return None

    notice = SettingsNotice.starting_at(updated_at, settings.SETTINGS_NOTICE_SECONDS)
    moment = at or current_time()
    if notice.is_visible(moment):
        return notice
    return None

