"""Dashboard API — the shell view composed for the active tab."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.interfaces.api.deps import get_current_user
from app.interfaces.deps import (
    get_automation_rule_repository,
    get_business_repository,
    get_connection_repository,
    get_message_repository,
)
from app.domain.models.user import User
from app.domain.repositories.automation_repository import AutomationRuleRepository
from app.domain.repositories.business_repository import BusinessRepository
from app.domain.repositories.connection_repository import ConnectionRepository
from app.domain.repositories.message_repository import MessageRepository
from app.domain.schemas.dashboard import DashboardRead, DashboardView
from app.application.services.dashboard_service import DashboardShell, render_dashboard

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardRead)
def get_dashboard(
    tab: Optional[str] = None,
    user: User = Depends(get_current_user),
    business_repo: BusinessRepository = Depends(get_business_repository),
    connection_repo: ConnectionRepository = Depends(get_connection_repository),
    message_repo: MessageRepository = Depends(get_message_repository),
    rule_repo: AutomationRuleRepository = Depends(get_automation_rule_repository),
):
    """Setup view until a business exists, then the main view for `tab` (default messages)."""
    shell = DashboardShell(user, business_repo).load()
    if tab and shell.view is DashboardView.MAIN:
        shell.select_tab(tab)
    return render_dashboard(shell, connection_repo, message_repo, rule_repo)
