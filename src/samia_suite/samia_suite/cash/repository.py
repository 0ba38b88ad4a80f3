from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Site
from ..storage.base import KeyValueStore
from ..storage.keys import CASH, site_key
from ..storage.records import load_records, save_records
from .model import CashTransaction


class CashRepository(Protocol):
    def list_all(self, site: Site) -> list[CashTransaction]:
        raise NotImplementedError

    def save_all(self, site: Site, transactions: Sequence[CashTransaction]) -> None:
        raise NotImplementedError


class StoreCashRepository(CashRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self, site: Site) -> list[CashTransaction]:
        return load_records(self._store, site_key(CASH, site), CashTransaction.from_dict)

    def save_all(self, site: Site, transactions: Sequence[CashTransaction]) -> None:
        save_records(self._store, site_key(CASH, site), transactions)
