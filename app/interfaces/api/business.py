"""Business API routes — setup and settings."""

from fastapi import APIRouter, Depends, status

from app.interfaces.api.deps import get_current_business, get_current_user
from app.interfaces.deps import get_business_repository
from app.domain.models.business import Business
from app.domain.models.user import User
from app.domain.repositories.business_repository import BusinessRepository
from app.domain.schemas.business import (
    BusinessCreate,
    BusinessRead,
    BusinessUpdate,
    SettingsForm,
    SettingsUpdateResult,
)
from app.application.services.business_service import (
    get_settings_form,
    setup_business,
    update_business_settings,
)

router = APIRouter(prefix="/api/business", tags=["Business"])


@router.get("", response_model=BusinessRead)
def get_business(business: Business = Depends(get_current_business)):
    return BusinessRead.model_validate(business)


@router.post("", response_model=BusinessRead, status_code=status.HTTP_201_CREATED)
def create_business(
    body: BusinessCreate,
    repo: BusinessRepository = Depends(get_business_repository),
    user: User = Depends(get_current_user),
):
    business = setup_business(repo, user, body)
    return BusinessRead.model_validate(business)


@router.get("/settings", response_model=SettingsForm)
def settings_form(business: Business = Depends(get_current_business)):
    return get_settings_form(business)


@router.put("/settings", response_model=SettingsUpdateResult)
def update_settings(
    body: BusinessUpdate,
    repo: BusinessRepository = Depends(get_business_repository),
    business: Business = Depends(get_current_business),
):
    return update_business_settings(repo, business, body)
