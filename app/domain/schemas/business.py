"""Pydantic schemas for Business setup and settings."""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel

from app.domain.schemas.common import NonBlankStr


class BusinessCreate(BaseModel):
    name: NonBlankStr
    industry: NonBlankStr
    description: NonBlankStr
    business_info: NonBlankStr


class BusinessUpdate(BusinessCreate):
    """Settings form — every editable field is submitted on save."""


class BusinessRead(BaseModel):
    id: int
    user_id: int
    name: str
    industry: str
    description: str
    business_info: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SettingsForm(BaseModel):
    name: str
    industry: str
    description: str
    business_info: str

    model_config = {"from_attributes": True}


class SettingsNotice(BaseModel):
    message: str
    shown_at: datetime
    visible_until: datetime

    @classmethod
    def starting_at(cls, shown_at: datetime, seconds: int, message: str = "Settings saved successfully") -> "SettingsNotice":
        return cls(message=message, shown_at=shown_at, visible_until=shown_at + timedelta(seconds=seconds))

    def is_visible(self, at: datetime) -> bool:
        return self.shown_at <= at < self.visible_until


class SettingsUpdateResult(BaseModel):
    business: BusinessRead
    notice: SettingsNotice
