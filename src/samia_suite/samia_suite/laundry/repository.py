from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Site
from ..storage.base import KeyValueStore
from ..storage.keys import LAUNDRY, site_key
from ..storage.records import load_records, save_records
from .model import LaundryRequest


class LaundryRepository(Protocol):
    def list_all(self, site: Site) -> list[LaundryRequest]:
        raise NotImplementedError

    def save_all(self, site: Site, requests: Sequence[LaundryRequest]) -> None:
        raise NotImplementedError


class StoreLaundryRepository(LaundryRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self, site: Site) -> list[LaundryRequest]:
        return load_records(self._store, site_key(LAUNDRY, site), LaundryRequest.from_dict)

    def save_all(self, site: Site, requests: Sequence[LaundryRequest]) -> None:
        save_records(self._store, site_key(LAUNDRY, site), requests)
