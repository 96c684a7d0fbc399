"""
Automation Rule Repository Interface.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.automation_rule import AutomationRule


class AutomationRuleRepository(BaseRepository[AutomationRule]):
    """Interface for automation rule operations."""

    def list_for_business(self, business_id: int) -> List[AutomationRule]:
        """Get the rules of a business, newest first."""
        ...

    def get_for_business(self, business_id: int, rule_id: int) -> Optional[AutomationRule]:
        """Get a rule by ID, scoped to its owning business."""
        ...
