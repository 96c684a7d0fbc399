"""Pydantic schemas for the dashboard shell view."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from app.domain.schemas.automation import AutomationRuleRead
from app.domain.schemas.business import SettingsForm, SettingsNotice
from app.domain.schemas.message import ChatMessageRead
from app.domain.schemas.whatsapp import ConnectionSlots


class DashboardPhase(str, Enum):
    LOADING = "loading"
    READY = "ready"


class DashboardView(str, Enum):
    SETUP = "setup"
    MAIN = "main"


class DashboardTab(str, Enum):
    MESSAGES = "messages"
    AUTOMATION = "automation"
    ANALYTICS = "analytics"
    SETTINGS = "settings"


class DashboardHeader(BaseModel):
    business_id: int
    name: str
    industry: str


class AnalyticsPlaceholder(BaseModel):
    available: bool = False
    title: str = "Analytics coming soon"
    description: str = "Detailed metrics for your conversations and automations will appear here."


class SettingsTab(BaseModel):
    form: SettingsForm
    notice: Optional[SettingsNotice] = None


class DashboardRead(BaseModel):
    view: DashboardView
    tab: Optional[DashboardTab] = None
    header: Optional[DashboardHeader] = None
    connections: Optional[ConnectionSlots] = None
    messages: Optional[list[ChatMessageRead]] = None
    rules: Optional[list[AutomationRuleRead]] = None
    analytics: Optional[AnalyticsPlaceholder] = None
    settings: Optional[SettingsTab] = None
