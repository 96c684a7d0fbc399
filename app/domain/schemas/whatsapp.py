"""Pydantic schemas for WhatsApp connections."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from app.domain.schemas.common import NonBlankStr


class ConnectionType(str, Enum):
    NORMAL = "normal"
    BUSINESS = "business"


class ConnectionCreate(BaseModel):
    phone_number: NonBlankStr
    api_key: NonBlankStr
    connection_type: ConnectionType = ConnectionType.NORMAL

    model_config = {"use_enum_values": True}


class ConnectionRead(BaseModel):
    id: int
    business_id: int
    phone_number: str
    api_key: str
    is_active: bool
    connection_type: ConnectionType
    connected_at: Optional[datetime] = None
    last_sync: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("api_key")
    @classmethod
    def mask_api_key(cls, value: str) -> str:
        return "****" + value[-4:] if len(value) > 4 else "****"


class ConnectionSlots(BaseModel):
    """One slot per connection type; None means the panel shows "connect"."""

    normal: Optional[ConnectionRead] = None
    business: Optional[ConnectionRead] = None


class ConnectionPanel(BaseModel):
    slots: ConnectionSlots
    connections: list[ConnectionRead]
