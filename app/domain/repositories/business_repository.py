"""
Business Repository Interface.
"""

from typing import Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.business import Business


class BusinessRepository(BaseRepository[Business]):
    """Interface for Business-specific operations."""

    def get_by_user_id(self, user_id: int) -> Optional[Business]:
        """Get the business owned by a user, if any."""
        ...
