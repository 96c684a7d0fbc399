"""Automation API routes — CRUD and toggle for rules."""

from fastapi import APIRouter, Depends, status

from app.interfaces.api.deps import get_current_business
from app.interfaces.deps import get_automation_rule_repository
from app.domain.models.business import Business
from app.domain.repositories.automation_repository import AutomationRuleRepository
from app.domain.schemas.automation import AutomationRuleCreate, AutomationRuleRead
from app.application.services.automation_service import create_rule, delete_rule, list_rules, toggle_rule

router = APIRouter(prefix="/api/automation", tags=["Automation"])


@router.get("/rules", response_model=list[AutomationRuleRead])
def get_rules(
    repo: AutomationRuleRepository = Depends(get_automation_rule_repository),
    business: Business = Depends(get_current_business),
):
    return [AutomationRuleRead.model_validate(r) for r in list_rules(repo, business.id)]


@router.post("/rules", response_model=AutomationRuleRead, status_code=status.HTTP_201_CREATED)
def add_rule(
    body: AutomationRuleCreate,
    repo: AutomationRuleRepository = Depends(get_automation_rule_repository),
    business: Business = Depends(get_current_business),
):
    return AutomationRuleRead.model_validate(create_rule(repo, business.id, body))


@router.post("/rules/{rule_id}/toggle", response_model=AutomationRuleRead)
def toggle(
    rule_id: int,
    repo: AutomationRuleRepository = Depends(get_automation_rule_repository),
    business: Business = Depends(get_current_business),
):
    return AutomationRuleRead.model_validate(toggle_rule(repo, business.id, rule_id))


@router.delete("/rules/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_rule(
    rule_id: int,
    repo: AutomationRuleRepository = Depends(get_automation_rule_repository),
    business: Business = Depends(get_current_business),
):
    delete_rule(repo, business.id, rule_id)
