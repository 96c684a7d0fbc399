"""Message service — message feed and the simulated AI reply."""

from typing import List, Optional

import structlog

from app.config import get_settings
from app.core.exceptions import BusinessRuleViolationException
from app.domain.models.chat_message import ChatMessage
from app.domain.repositories.message_repository import MessageRepository
from app.domain.schemas.message import ChatMessageCreate

settings = get_settings()
logger = structlog.get_logger(__name__)

AI_REPLY_TEMPLATE = (
    'Thanks for your message: "{message}". As an AI, I can help you with '
    "information about your business. In production, this would connect to "
    "a real AI API such as OpenAI."
)


def render_ai_reply(message: str) -> str:
    """Fixed reply quoting the customer's text verbatim."""
    return AI_REPLY_TEMPLATE.format(message=message)


def list_recent_messages(repo: MessageRepository, business_id: int, limit: Optional[int] = None) -> List[ChatMessage]:
    """Newest messages first, never more than MESSAGES_PAGE_LIMIT."""
    cap = settings.MESSAGES_PAGE_LIMIT
    limit = cap if limit is None else max(0, min(limit, cap))
    return repo.list_recent(business_id, limit)


def send_test_message(repo: MessageRepository, business_id: int, message: str) -> List[ChatMessage]:
    """Insert a demo customer message followed by the canned AI reply, then reload."""
    if not message.strip():
        raise BusinessRuleViolationException("Message must not be empty")

    repo.create(ChatMessageCreate(
        business_id=business_id,
        contact_number=settings.DEMO_CONTACT_NUMBER,
        contact_name=settings.DEMO_CONTACT_NAME,
        message=message,
        is_from_customer=True,
        ai_generated=False,
    ))
    repo.create(ChatMessageCreate(
        business_id=business_id,
        contact_number=settings.DEMO_CONTACT_NUMBER,
        contact_name=settings.AI_CONTACT_NAME,
        message=render_ai_reply(message),
        is_from_customer=False,
        ai_generated=True,
    ))
    logger.info("Test message sent", business_id=business_id)

    return list_recent_messages(repo, business_id)
