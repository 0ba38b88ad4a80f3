from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Callable, Optional

from werkzeug.security import check_password_hash

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.permissions import require_role
from ..common.validators import require_non_empty
from ..core.constants import BOSS_IDENTIFIER, SESSION_KEY
from ..core.enums import ActivityAction, Role, Site
from ..core.exceptions import AuthenticationError, RoleMismatchError, ValidationError
from ..storage.base import KeyValueStore
from .model import ActivityLog, DirectoryEntry, User
from .repository import ActivityLogRepository, UserDirectoryRepository

logger = logging.getLogger(__name__)


def _log_entry(user: User, action: ActivityAction, now: datetime) -> ActivityLog:
    return ActivityLog(
        id=new_id(),
        user_name=user.name,
        user_role=user.role.value,
        action=action,
        timestamp=now.isoformat(timespec="seconds"),
        site=user.site.value,
    )


class SessionService:
    """Session token = serialized User, kept in the durable or the tab-scoped store."""

    def __init__(self, durable: KeyValueStore, ephemeral: KeyValueStore, logs: ActivityLogRepository):
        self._durable = durable
        self._ephemeral = ephemeral
        self._logs = logs

    def open(self, user: User, *, persist: bool) -> None:
        store = self._durable if persist else self._ephemeral
        store.set_item(SESSION_KEY, json.dumps(user.to_dict(), ensure_ascii=False))

    def clear(self) -> None:
        self._durable.remove_item(SESSION_KEY)
        self._ephemeral.remove_item(SESSION_KEY)

    def current_user(self) -> Optional[User]:
        try:
            for store in (self._durable, self._ephemeral):
                raw = store.get_item(SESSION_KEY)
                if raw and raw != "undefined":
                    return User.from_dict(json.loads(raw))
            return None
        except (ValueError, KeyError, TypeError):
            logger.warning("Unreadable session token, clearing it")
            self.clear()
            return None

    def logout(self, *, now: Optional[datetime] = None) -> None:
        user = self.current_user()
        if user:
            self._logs.prepend(_log_entry(user, ActivityAction.LOGOUT, now or now_local()))
        self.clear()

    @staticmethod
    def active_site(user: User, requested: Optional[str] = None) -> Site:
        """The Boss browses any operational site (Fnideq by default); others stay on their own."""
        if not user.is_boss:
            return user.site

        operational = Site.operational()
        for site in operational:
            if requested == site.value:
                return site
        return operational[0]


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, directory: UserDirectoryRepository, sessions: SessionService, logs: ActivityLogRepository):
        self._directory = directory
        self._sessions = sessions
        self._logs = logs

    def login(
        self,
        identifier: str,
        password: str,
        claimed_role: Role,
        *,
        persist: bool,
        now: Optional[datetime] = None,
    ) -> User:
        entry = self._directory.load().get((identifier or "").strip())

        try:
            ok = bool(entry) and check_password_hash(entry.password_hash, password or "")
        except ValueError:
            # e.g. a hash written by an unknown method
            ok = False

        if not ok:
            logger.info("Login refused for %r", identifier)
            raise AuthenticationError("Identifiant ou mot de passe incorrect")

        if entry.user.role != claimed_role:
            raise RoleMismatchError("Le poste sélectionné ne correspond pas à ce profil")

        self._sessions.open(entry.user, persist=persist)
        self._logs.prepend(_log_entry(entry.user, ActivityAction.LOGIN, now or now_local()))
        logger.info("Login %s (%s, %s)", entry.user.email, entry.user.role.value, entry.user.site.value)
        return entry.user


class UserService:
    """Use case: manage accounts (Boss settings screen)."""

    def __init__(
        self,
        directory: UserDirectoryRepository,
        logs: ActivityLogRepository,
        *,
        hash_password: Callable[[str], str],
    ):
        self._directory = directory
        self._logs = logs
        self._hash_password = hash_password

    def list_entries(self, *, current_role: Role) -> list[User]:
        require_role(current_role, Role.BOSS)
        return [e.user for e in self._directory.load().values()]

    def list_logs(self, *, current_role: Role) -> list[ActivityLog]:
        require_role(current_role, Role.BOSS)
        return list(self._logs.list_logs())

    def add_user(
        self,
        *,
        current_role: Role,
        identifier: str,
        name: str,
        role: Role,
        site: Site,
        password: str,
    ) -> User:
        require_role(current_role, Role.BOSS)
        identifier = require_non_empty(identifier, "Identifiant")
        name = require_non_empty(name, "Nom")
        password = require_non_empty(password, "Mot de passe")

        if role == Role.BOSS:
            raise ValidationError("Impossible de créer un second compte Boss")
        if site not in Site.operational():
            raise ValidationError("Site invalide")

        entries = self._directory.load()
        if identifier in entries:
            raise ValidationError("Cet identifiant existe déjà")

        user = User(email=identifier, name=name, role=role, site=site)
        entries[identifier] = DirectoryEntry(user=user, password_hash=self._hash_password(password))
        self._directory.save(entries)
        return user

    def delete_user(self, *, current_role: Role, identifier: str) -> None:
        require_role(current_role, Role.BOSS)
        if identifier == BOSS_IDENTIFIER:
            raise ValidationError("Impossible de supprimer le compte Boss.")

        entries = self._directory.load()
        if entries.pop(identifier, None) is None:
            raise ValidationError("Compte introuvable")
        self._directory.save(entries)

    def update_password(self, *, current_role: Role, identifier: str, new_password: str) -> bool:
        require_role(current_role, Role.BOSS)
        new_password = require_non_empty(new_password, "Mot de passe")

        entries = self._directory.load()
        entry = entries.get(identifier)
        if not entry:
            return False
        entries[identifier] = DirectoryEntry(user=entry.user, password_hash=self._hash_password(new_password))
        self._directory.save(entries)
        return True
