from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Site
from ..storage.base import KeyValueStore
from ..storage.keys import STAFF, site_key
from ..storage.records import load_records, save_records
from .model import StaffMember


class StaffRepository(Protocol):
    def list_all(self, site: Site) -> list[StaffMember]:
        raise NotImplementedError

    def save_all(self, site: Site, members: Sequence[StaffMember]) -> None:
        raise NotImplementedError


class StoreStaffRepository(StaffRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self, site: Site) -> list[StaffMember]:
        return load_records(self._store, site_key(STAFF, site), StaffMember.from_dict)

    def save_all(self, site: Site, members: Sequence[StaffMember]) -> None:
        save_records(self._store, site_key(STAFF, site), members)
