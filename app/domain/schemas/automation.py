"""Pydantic schemas for automation rules."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from app.domain.schemas.common import NonBlankStr


class TriggerType(str, Enum):
    NEW_MESSAGE = "new_message"
    KEYWORD = "keyword"
    TIME_BASED = "time_based"


class ActionType(str, Enum):
    AI_RESPONSE = "ai_response"
    TEMPLATE = "template"
    FORWARD = "forward"


class AutomationRuleCreate(BaseModel):
    rule_name: NonBlankStr
    trigger_type: TriggerType = TriggerType.NEW_MESSAGE
    trigger_value: str = ""
    action_type: ActionType = ActionType.AI_RESPONSE

    model_config = {"use_enum_values": True}


class AutomationRuleRead(BaseModel):
    id: int
    business_id: int
    rule_name: str
    trigger_type: TriggerType
    trigger_value: str
    action_type: ActionType
    action_config: Dict[str, Any]
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
