from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from ..core.constants import ACTIVITY_LOG_CAP, LOGS_KEY, USERS_KEY
from ..storage.base import KeyValueStore
from ..storage.json_store import read_json, write_json
from ..storage.records import load_records, save_records
from .model import ActivityLog, DirectoryEntry, User
from .seed import SEED_ACCOUNTS

logger = logging.getLogger(__name__)


class UserDirectoryRepository(Protocol):
    """Annuaire des comptes: identifiant -> (utilisateur, mot de passe haché)."""

    def load(self) -> dict[str, DirectoryEntry]:
        raise NotImplementedError

    def save(self, entries: dict[str, DirectoryEntry]) -> None:
        raise NotImplementedError


class ActivityLogRepository(Protocol):
    def list_logs(self) -> Sequence[ActivityLog]:
        raise NotImplementedError

    def prepend(self, log: ActivityLog) -> None:
        raise NotImplementedError


class StoreUserDirectory(UserDirectoryRepository):
    """Whole directory kept as one JSON blob; every mutation rewrites it."""

    def __init__(self, store: KeyValueStore, *, hash_password: Callable[[str], str]):
        self._store = store
        self._hash_password = hash_password

    def _seed(self) -> dict[str, DirectoryEntry]:
        entries = {
            identifier: DirectoryEntry(
                user=User(email=identifier, name=name, role=role, site=site),
                password_hash=self._hash_password(password),
            )
            for identifier, name, role, site, password in SEED_ACCOUNTS
        }
        self.save(entries)
        logger.info("User directory seeded with %d accounts", len(entries))
        return entries

    def load(self) -> dict[str, DirectoryEntry]:
        raw = read_json(self._store, USERS_KEY, None)
        if not isinstance(raw, dict) or not raw:
            return self._seed()

        try:
            return {str(k): DirectoryEntry.from_dict(v) for k, v in raw.items()}
        except (KeyError, TypeError, ValueError):
            logger.warning("Malformed user directory, reseeding")
            return self._seed()

    def save(self, entries: dict[str, DirectoryEntry]) -> None:
        write_json(self._store, USERS_KEY, {k: v.to_dict() for k, v in entries.items()})


class StoreActivityLog(ActivityLogRepository):
    def __init__(self, store: KeyValueStore, *, cap: int = ACTIVITY_LOG_CAP):
        self._store = store
        self._cap = int(cap)

    def list_logs(self) -> Sequence[ActivityLog]:
        return load_records(self._store, LOGS_KEY, ActivityLog.from_dict)

    def prepend(self, log: ActivityLog) -> None:
        logs = [log, *self.list_logs()][: self._cap]
        save_records(self._store, LOGS_KEY, logs)
