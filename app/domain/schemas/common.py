"""Shared field types for request schemas."""

from typing import Annotated

from pydantic import AfterValidator


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Required free-text form field: rejected when blank, otherwise kept exactly
# as submitted.
NonBlankStr = Annotated[str, AfterValidator(_require_text)]
