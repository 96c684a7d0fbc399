"""Automation service — CRUD for trigger/action rules.

Rules are stored configuration only; nothing evaluates them against messages.
"""

from typing import List

import structlog

from app.core.exceptions import EntityNotFoundException
from app.domain.models.automation_rule import AutomationRule
from app.domain.repositories.automation_repository import AutomationRuleRepository
from app.domain.schemas.automation import ActionType, AutomationRuleCreate, TriggerType

logger = structlog.get_logger(__name__)


def list_rules(repo: AutomationRuleRepository, business_id: int) -> List[AutomationRule]:
    return repo.list_for_business(business_id)


def _get_rule(repo: AutomationRuleRepository, business_id: int, rule_id: int) -> AutomationRule:
    rule = repo.get_for_business(business_id, rule_id)
    if rule is None:
        raise EntityNotFoundException("Automation rule not found", {"rule_id": rule_id})
    return rule


def create_rule(repo: AutomationRuleRepository, business_id: int, data: AutomationRuleCreate) -> AutomationRule:
    rule = repo.create({
        "business_id": business_id,
        "rule_name": data.rule_name,
        "trigger_type": TriggerType(data.trigger_type).value,
        "trigger_value": data.trigger_value,
        "action_type": ActionType(data.action_type).value,
        "action_config": {},
        "is_active": True,
    })
    logger.info("Automation rule created", business_id=business_id, rule_id=rule.id)
    return rule


def toggle_rule(repo: AutomationRuleRepository, business_id: int, rule_id: int) -> AutomationRule:
    """Flip is_active to the negation of the stored value."""
    rule = _get_rule(repo, business_id, rule_id)
    rule = repo.update(rule, {"is_active": not rule.is_active})
    logger.info("Automation rule toggled", business_id=business_id, rule_id=rule_id, is_active=rule.is_active)
    return rule


def delete_rule(repo: AutomationRuleRepository, business_id: int, rule_id: int) -> None:
    rule = _get_rule(repo, business_id, rule_id)
    repo.delete(rule.id)
    logger.info("Automation rule deleted", business_id=business_id, rule_id=rule_id)
