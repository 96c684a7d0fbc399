"""Timezone-aware clock helpers."""

from datetime import datetime
from typing import Optional

import pytz

from app.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def now() -> datetime:
    """Current time in the configured timezone."""
    return datetime.now(tz)


def as_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Attach the configured timezone to naive values read back from the database."""
    if value is None or value.tzinfo is not None:
        return value
    return tz.localize(value)
