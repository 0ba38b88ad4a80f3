from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Optional

from flask import current_app, flash, g, redirect, render_template, session, url_for

from ..core.enums import Role, Site
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.model import User
from ..users.service import SessionService

logger = logging.getLogger(__name__)

ACTIVE_SITE_KEY = "active_site"

# (endpoint, label, roles allowed; None = everyone)
NAVIGATION: list[tuple[str, str, Optional[tuple[Role, ...]]]] = [
    ("dashboard", "Tableau de bord", None),
    ("stock", "Stock", None),
    ("meals", "Repas", None),
    ("vouchers", "Bons", None),
    ("apartments", "Suites", None),
    ("laundry", "Blanchisserie", None),
    ("staff", "Personnel", None),
    ("cash", "Caisse", (Role.BOSS, Role.GERANT)),
    ("reports", "Rapports", (Role.BOSS, Role.GERANT)),
    ("messages", "Messagerie", None),
    ("settings", "Paramètres", (Role.BOSS,)),
]


def current_user() -> Optional[User]:
    return g.get("current_user")


def current_site() -> Site:
    return SessionService.active_site(g.current_user, session.get(ACTIVE_SITE_KEY))


def nav_for(user: User) -> list[tuple[str, str]]:
    return [(endpoint, label) for endpoint, label, roles in NAVIGATION if roles is None or user.role in roles]


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            flash("Veuillez vous connecter pour continuer.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if user is None:
                return redirect(url_for("login"))
            if user.role not in roles:
                return render_template("403.html", current_user=user), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def run_action(action: Callable[[], Any], success: str) -> bool:
    """Run a form use case and flash the outcome."""
    try:
        action()
        flash(success, "success")
        return True
    except (ValidationError, AuthorizationError) as e:
        flash(str(e), "danger")
    except Exception as e:
        logger.exception("Unexpected error")
        if bool(current_app.config.get("DEBUG", False)):
            flash(f"Erreur système: {e}", "danger")
        else:
            flash("Erreur système", "danger")
    return False


def parse_enum(enum_cls, raw: Optional[str], label: str):
    try:
        return enum_cls(raw)
    except ValueError:
        raise ValidationError(f"{label} invalide") from None
