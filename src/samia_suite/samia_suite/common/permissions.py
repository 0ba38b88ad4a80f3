from __future__ import annotations

from ..core.enums import Role
from ..core.exceptions import AuthorizationError


def require_role(current_role: Role, *allowed: Role) -> None:
    if current_role not in allowed:
        raise AuthorizationError("Action non autorisée pour ce poste")
