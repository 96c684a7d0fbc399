"""Pydantic schemas for the message feed."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.domain.schemas.common import NonBlankStr


class ChatMessageCreate(BaseModel):
    business_id: int
    contact_number: str
    contact_name: Optional[str] = None
    message: str
    is_from_customer: bool = True
    ai_generated: bool = False


class ChatMessageRead(BaseModel):
    id: int
    business_id: int
    contact_number: str
    contact_name: Optional[str] = None
    message: str
    is_from_customer: bool
    ai_generated: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SendTestMessageRequest(BaseModel):
    message: NonBlankStr
