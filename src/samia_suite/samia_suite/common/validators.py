from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} est obligatoire")
    return value.strip()


def require_positive(value: float | None, field_name: str) -> float:
    if value is None:
        raise ValidationError(f"{field_name} doit être supérieur à 0")
    value = parse_amount(value, field_name)
    if value <= 0:
        raise ValidationError(f"{field_name} doit être supérieur à 0")
    return value


def parse_amount(raw: str | float | None, field_name: str) -> float:
    """Parse a form number ("12,5" or "12.5"); empty, garbage, nan and inf are rejected."""
    try:
        if isinstance(raw, (int, float)):
            value = float(raw)
        else:
            value = float((raw or "").replace(",", ".").strip())
    except ValueError:
        raise ValidationError(f"{field_name} invalide") from None
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} invalide")
    return value
