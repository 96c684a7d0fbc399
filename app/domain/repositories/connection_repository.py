"""
WhatsApp Connection Repository Interface.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.whatsapp_connection import WhatsAppConnection


class ConnectionRepository(BaseRepository[WhatsAppConnection]):
    """Interface for WhatsApp connection operations."""

    def list_for_business(self, business_id: int) -> List[WhatsAppConnection]:
        """Get every connection configured by a business."""
        ...

    def get_for_business(self, business_id: int, connection_id: int) -> Optional[WhatsAppConnection]:
        """Get a connection by ID, scoped to its owning business."""
        ...
