"""Dashboard service — the shell that picks setup vs. the tabbed main view."""

from datetime import datetime
from typing import Optional

import structlog

from app.application.services.automation_service import list_rules
from app.application.services.business_service import (
    current_settings_notice,
    get_business_for_user,
    get_settings_form,
)
from app.application.services.message_service import list_recent_messages
from app.application.services.whatsapp_service import build_slots, list_connections
from app.core.exceptions import BusinessRuleViolationException
from app.domain.models.business import Business
from app.domain.models.user import User
from app.domain.repositories.automation_repository import AutomationRuleRepository
from app.domain.repositories.business_repository import BusinessRepository
from app.domain.repositories.connection_repository import ConnectionRepository
from app.domain.repositories.message_repository import MessageRepository
from app.domain.schemas.automation import AutomationRuleRead
from app.domain.schemas.dashboard import (
    AnalyticsPlaceholder,
    DashboardHeader,
    DashboardPhase,
    DashboardRead,
    DashboardTab,
    DashboardView,
    SettingsTab,
)
from app.domain.schemas.message import ChatMessageRead

logger = structlog.get_logger(__name__)

DEFAULT_TAB = DashboardTab.MESSAGES


class DashboardShell:
    """Per-session dashboard state: loading -> ready(setup | main).

    The active tab is local to the shell instance and starts on messages.
    """

    def __init__(self, user: User, business_repo: BusinessRepository):
        self.user = user
        self.business_repo = business_repo
        self.phase = DashboardPhase.LOADING
        self.business: Optional[Business] = None
        self.tab = DEFAULT_TAB

    @property
    def view(self) -> Optional[DashboardView]:
        if self.phase is DashboardPhase.LOADING:
            return None
        return DashboardView.MAIN if self.business is not None else DashboardView.SETUP

    def load(self) -> "DashboardShell":
        self.business = get_business_for_user(self.business_repo, self.user)
        self.phase = DashboardPhase.READY
        logger.debug("Dashboard loaded", user_id=self.user.id, view=self.view.value)
        return self

    def complete_setup(self) -> "DashboardShell":
        return self.load()

    def business_updated(self) -> "DashboardShell":
        return self.load()

    def select_tab(self, tab: str) -> DashboardTab:
        if self.view is not DashboardView.MAIN:
            raise BusinessRuleViolationException("Tabs are available once the business is configured")
        try:
            self.tab = DashboardTab(tab)
        except ValueError:
            raise BusinessRuleViolationException(
                f"Unknown dashboard tab: {tab}",
                {"allowed": [t.value for t in DashboardTab]},
            )
        return self.tab


def render_dashboard(
    shell: DashboardShell,
    connection_repo: ConnectionRepository,
    message_repo: MessageRepository,
    rule_repo: AutomationRuleRepository,
    at: Optional[datetime] = None,
) -> DashboardRead:
    """Compose the payload for the shell's current view and tab."""
    if shell.view is None:
        shell.load()

    if shell.view is DashboardView.SETUP:
        return DashboardRead(view=DashboardView.SETUP)

    business = shell.business
    result = DashboardRead(
        view=DashboardView.MAIN,
        tab=shell.tab,
        header=DashboardHeader(business_id=business.id, name=business.name, industry=business.industry),
        connections=build_slots(list_connections(connection_repo, business.id)),
    )

    if shell.tab is DashboardTab.MESSAGES:
        result.messages = [ChatMessageRead.model_validate(m) for m in list_recent_messages(message_repo, business.id)]
    elif shell.tab is DashboardTab.AUTOMATION:
        result.rules = [AutomationRuleRead.model_validate(r) for r in list_rules(rule_repo, business.id)]
    elif shell.tab is DashboardTab.ANALYTICS:
        result.analytics = AnalyticsPlaceholder()
    elif shell.tab is DashboardTab.SETTINGS:
        result.settings = SettingsTab(
            form=get_settings_form(business),
            notice=current_settings_notice(business, at),
        )

    return result
