from __future__ import annotations

import uuid


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def short_code(prefix: str, length: int = 6) -> str:
    return f"{prefix}{uuid.uuid4().hex[:length].upper()}"
