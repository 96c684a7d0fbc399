"""Chat message — one row of the business message feed."""

from sqlalchemy import Column, Integer, String, Boolean, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False, index=True)
    contact_number = Column(String(20), nullable=False)
    contact_name = Column(String(200), nullable=True)
    message = Column(Text, nullable=False)
    is_from_customer = Column(Boolean, default=True)
    ai_generated = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<ChatMessage {self.id} - {self.contact_number}>"
