import pytest

from app.application.services.dashboard_service import DashboardShell, render_dashboard
from app.application.services.business_service import setup_business, update_business_settings
from app.core.exceptions import BusinessRuleViolationException
from app.domain.schemas.business import BusinessCreate, BusinessUpdate
from app.domain.schemas.dashboard import DashboardPhase, DashboardTab, DashboardView


def test_shell_moves_from_loading_to_setup_to_main(business_repo, user):
    shell = DashboardShell(user, business_repo)
    assert shell.phase is DashboardPhase.LOADING
    assert shell.view is None

    shell.load()
    assert shell.phase is DashboardPhase.READY
    assert shell.view is DashboardView.SETUP

    setup_business(
        business_repo,
        user,
        BusinessCreate(name="Shop", industry="Retail", description="Corner shop", business_info="Open daily"),
    )
    shell.complete_setup()
    assert shell.view is DashboardView.MAIN
    assert shell.tab is DashboardTab.MESSAGES


def test_tab_selection_is_local_to_the_shell(business_repo, user, business):
    shell = DashboardShell(user, business_repo).load()
    shell.select_tab("automation")
    assert shell.tab is DashboardTab.AUTOMATION

    assert DashboardShell(user, business_repo).load().tab is DashboardTab.MESSAGES


def test_select_tab_rejects_unknown_tab_and_setup_view(business_repo, user, other_user, business):
    shell = DashboardShell(user, business_repo).load()
    with pytest.raises(BusinessRuleViolationException):
        shell.select_tab("billing")

    no_business = DashboardShell(other_user, business_repo).load()
    with pytest.raises(BusinessRuleViolationException):
        no_business.select_tab("messages")


def test_render_analytics_placeholder(business_repo, connection_repo, message_repo, rule_repo, user, business):
    shell = DashboardShell(user, business_repo).load()
    shell.select_tab("analytics")

    view = render_dashboard(shell, connection_repo, message_repo, rule_repo)

    assert view.analytics.available is False
    assert view.messages is None
    assert view.header.name == business.name


def test_dashboard_api_without_business_shows_setup(client):
    response = client.get("/api/dashboard", params={"tab": "settings"})

    assert response.status_code == 200
    assert response.json()["view"] == "setup"
    assert response.json()["header"] is None


def test_dashboard_api_defaults_to_messages_tab(client, business):
    client.post("/api/messages/test", json={"message": "hello"})

    body = client.get("/api/dashboard").json()

    assert body["view"] == "main"
    assert body["tab"] == "messages"
    assert len(body["messages"]) == 2
    assert body["connections"] == {"normal": None, "business": None}


def test_dashboard_api_settings_tab(client, business):
    body = client.get("/api/dashboard", params={"tab": "settings"}).json()

    assert body["settings"]["form"]["name"] == business.name
    assert body["settings"]["notice"] is None


def test_dashboard_api_rejects_unknown_tab(client, business):
    response = client.get("/api/dashboard", params={"tab": "billing"})

    assert response.status_code == 422
    assert response.json()["error"]["details"]["allowed"] == ["messages", "automation", "analytics", "settings"]


def test_shell_reloads_after_settings_save(business_repo, user, business):
    shell = DashboardShell(user, business_repo).load()
    update_business_settings(
        business_repo,
        business,
        BusinessUpdate(name="New Name", industry="Food", description="d", business_info="i"),
    )

    assert shell.business_updated().business.name == "New Name"
