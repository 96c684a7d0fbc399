"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.infrastructure.database import get_db
from app.domain.models.business import Business
from app.domain.models.whatsapp_connection import WhatsAppConnection
from app.domain.models.chat_message import ChatMessage
from app.domain.models.automation_rule import AutomationRule
from app.domain.repositories.business_repository import BusinessRepository
from app.domain.repositories.connection_repository import ConnectionRepository
from app.domain.repositories.message_repository import MessageRepository
from app.domain.repositories.automation_repository import AutomationRuleRepository
from app.infrastructure.repositories.business_repository import SQLAlchemyBusinessRepository
from app.infrastructure.repositories.connection_repository import SQLAlchemyConnectionRepository
from app.infrastructure.repositories.message_repository import SQLAlchemyMessageRepository
from app.infrastructure.repositories.automation_repository import SQLAlchemyAutomationRuleRepository


def get_business_repository(db: Session = Depends(get_db)) -> BusinessRepository:
    """Get business repository instance."""
    return SQLAlchemyBusinessRepository(db, Business)


def get_connection_repository(db: Session = Depends(get_db)) -> ConnectionRepository:
    """Get WhatsApp connection repository instance."""
    return SQLAlchemyConnectionRepository(db, WhatsAppConnection)


def get_message_repository(db: Session = Depends(get_db)) -> MessageRepository:
    """Get chat message repository instance."""
    return SQLAlchemyMessageRepository(db, ChatMessage)


def get_automation_rule_repository(db: Session = Depends(get_db)) -> AutomationRuleRepository:
    """Get automation rule repository instance."""
    return SQLAlchemyAutomationRuleRepository(db, AutomationRule)
