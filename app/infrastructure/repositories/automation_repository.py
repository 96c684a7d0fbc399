"""
SQLAlchemy Implementation of Automation Rule Repository.
"""

from typing import List, Optional

from app.domain.models.automation_rule import AutomationRule
from app.domain.repositories.automation_repository import AutomationRuleRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyAutomationRuleRepository(SQLAlchemyRepository[AutomationRule], AutomationRuleRepository):
    """Automation rule repository implementation using SQLAlchemy."""

    def list_for_business(self, business_id: int) -> List[AutomationRule]:
        return (
            self.db.query(AutomationRule)
            .filter(AutomationRule.business_id == business_id)
            .order_by(AutomationRule.created_at.desc(), AutomationRule.id.desc())
            .all()
        )

    def get_for_business(self, business_id: int, rule_id: int) -> Optional[AutomationRule]:
        return (
            self.db.query(AutomationRule)
            .filter(
                AutomationRule.id == rule_id,
                AutomationRule.business_id == business_id,
            )
            .first()
        )
