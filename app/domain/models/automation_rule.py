"""Automation rule — stored trigger/action configuration."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class AutomationRule(Base):
    __tablename__ = "automation_rules"

    id = Column(Integer, primary_key=True, autoincrement=True)
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False, index=True)
    rule_name = Column(String(200), nullable=False)
    trigger_type = Column(String(50), nullable=False, default="new_message")  # new_message, keyword, time_based
    trigger_value = Column(String(500), nullable=False, default="")
    action_type = Column(String(50), nullable=False, default="ai_response")  # ai_response, template, forward
    action_config = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<AutomationRule {self.rule_name} ({'on' if self.is_active else 'off'})>"
