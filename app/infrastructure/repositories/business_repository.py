"""
SQLAlchemy Implementation of Business Repository.
"""

from typing import Optional

from app.domain.models.business import Business
from app.domain.repositories.business_repository import BusinessRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyBusinessRepository(SQLAlchemyRepository[Business], BusinessRepository):
    """Business repository implementation using SQLAlchemy."""

    def get_by_user_id(self, user_id: int) -> Optional[Business]:
        return self.db.query(Business).filter(Business.user_id == user_id).first()
