"""
Chat Message Repository Interface.
"""

from typing import List

from app.domain.repositories.base import BaseRepository
from app.domain.models.chat_message import ChatMessage


class MessageRepository(BaseRepository[ChatMessage]):
    """Interface for chat message operations."""

    def list_recent(self, business_id: int, limit: int = 50) -> List[ChatMessage]:
        """Get the newest messages of a business, newest first."""
        ...
