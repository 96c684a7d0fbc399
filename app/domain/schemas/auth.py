"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.domain.schemas.common import NonBlankStr


class UserCreate(BaseModel):
    name: NonBlankStr
    email: NonBlankStr
    password: NonBlankStr


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
