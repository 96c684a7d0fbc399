"""
SQLAlchemy Implementation of Chat Message Repository.
"""

from typing import List

from app.domain.models.chat_message import ChatMessage
from app.domain.repositories.message_repository import MessageRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyMessageRepository(SQLAlchemyRepository[ChatMessage], MessageRepository):
    """Chat message repository implementation using SQLAlchemy."""

    def list_recent(self, business_id: int, limit: int = 50) -> List[ChatMessage]:
        # id breaks ties between rows inserted within the same timestamp tick
        return (
            self.db.query(ChatMessage)
            .filter(ChatMessage.business_id == business_id)
            .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
            .limit(limit)
            .all()
        )
