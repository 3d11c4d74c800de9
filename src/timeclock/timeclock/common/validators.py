from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def complete_break(
    break_start: Optional[datetime],
    break_end: Optional[datetime],
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Both break bounds, or neither; a half-open break counts as no break."""
    if break_start is None or break_end is None:
        return None, None
    return break_start, break_end
