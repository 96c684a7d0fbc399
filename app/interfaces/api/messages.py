"""Messages API routes — feed and simulated test message."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.interfaces.api.deps import get_current_business
from app.interfaces.deps import get_message_repository
from app.domain.models.business import Business
from app.domain.repositories.message_repository import MessageRepository
from app.domain.schemas.message import ChatMessageRead, SendTestMessageRequest
from app.application.services.message_service import list_recent_messages, send_test_message

router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.get("", response_model=list[ChatMessageRead])
def list_messages(
    limit: Optional[int] = Query(None, ge=1),
    repo: MessageRepository = Depends(get_message_repository),
    business: Business = Depends(get_current_business),
):
    return [ChatMessageRead.model_validate(m) for m in list_recent_messages(repo, business.id, limit)]


@router.post("/test", response_model=list[ChatMessageRead], status_code=status.HTTP_201_CREATED)
def send_test(
    body: SendTestMessageRequest,
    repo: MessageRepository = Depends(get_message_repository),
    business: Business = Depends(get_current_business),
):
    """Insert a demo customer message plus the canned AI reply and return the feed."""
    return [ChatMessageRead.model_validate(m) for m in send_test_message(repo, business.id, body.message)]
