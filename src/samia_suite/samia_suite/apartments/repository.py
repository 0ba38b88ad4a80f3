from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Site
from ..storage.base import KeyValueStore
from ..storage.keys import APARTMENTS, site_key
from ..storage.records import load_records, save_records
from .model import Apartment


class ApartmentRepository(Protocol):
    def list_all(self, site: Site) -> list[Apartment]:
        raise NotImplementedError

    def get_by_id(self, site: Site, apartment_id: str) -> Optional[Apartment]:
        raise NotImplementedError

    def save_all(self, site: Site, apartments: Sequence[Apartment]) -> None:
        raise NotImplementedError


class StoreApartmentRepository(ApartmentRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self, site: Site) -> list[Apartment]:
        return load_records(self._store, site_key(APARTMENTS, site), Apartment.from_dict)

    def get_by_id(self, site: Site, apartment_id: str) -> Optional[Apartment]:
        return next((a for a in self.list_all(site) if a.id == apartment_id), None)

    def save_all(self, site: Site, apartments: Sequence[Apartment]) -> None:
        save_records(self._store, site_key(APARTMENTS, site), apartments)
