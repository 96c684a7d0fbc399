"""Business domain model — the tenant profile that owns every other record."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class Business(Base):
    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    industry = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    business_info = Column(Text, nullable=False)  # free-form context for AI replies
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Business {self.id} - {self.name}>"
