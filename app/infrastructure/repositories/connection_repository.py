"""
SQLAlchemy Implementation of WhatsApp Connection Repository.
"""

from typing import List, Optional

from app.domain.models.whatsapp_connection import WhatsAppConnection
from app.domain.repositories.connection_repository import ConnectionRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyConnectionRepository(SQLAlchemyRepository[WhatsAppConnection], ConnectionRepository):
    """WhatsApp connection repository implementation using SQLAlchemy."""

    def list_for_business(self, business_id: int) -> List[WhatsAppConnection]:
        return (
            self.db.query(WhatsAppConnection)
            .filter(WhatsAppConnection.business_id == business_id)
            .order_by(WhatsAppConnection.id.asc())
            .all()
        )

    def get_for_business(self, business_id: int, connection_id: int) -> Optional[WhatsAppConnection]:
        return (
            self.db.query(WhatsAppConnection)
            .filter(
                WhatsAppConnection.id == connection_id,
                WhatsAppConnection.business_id == business_id,
            )
            .first()
        )
