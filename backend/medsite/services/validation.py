"""
Medsite Backend — Field Validation Helpers
===========================================

Presence and length checks shared by the resource services. A field counts
as missing when it is None or empty (``""``, ``0``).
"""

from typing import Any, Mapping, Optional

from medsite.exceptions import ValidationError


def require_fields(values: Mapping[str, Any], message: str) -> None:
    """Raises ValidationError(message) if any value in `values` is missing."""
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ValidationError(message=message, context={"fields": missing})


def require_min_length(
    value: Optional[str], minimum: int, field: str, message: str
) -> None:
    """Raises ValidationError(message) if `value` is shorter than `minimum`."""
    if value is None or len(value) < minimum:
        raise ValidationError(message=message, field=field)
