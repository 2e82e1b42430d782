from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value) -> str | None:
    """Strip free text coming from the API; blank becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
