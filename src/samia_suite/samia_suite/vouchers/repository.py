from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Site
from ..storage.base import KeyValueStore
from ..storage.keys import VOUCHERS, site_key
from ..storage.records import load_records, save_records
from .model import MealVoucher


class VoucherRepository(Protocol):
    def list_all(self, site: Site) -> list[MealVoucher]:
        raise NotImplementedError

    def save_all(self, site: Site, vouchers: Sequence[MealVoucher]) -> None:
        raise NotImplementedError


class StoreVoucherRepository(VoucherRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self, site: Site) -> list[MealVoucher]:
        return load_records(self._store, site_key(VOUCHERS, site), MealVoucher.from_dict)

    def save_all(self, site: Site, vouchers: Sequence[MealVoucher]) -> None:
        save_records(self._store, site_key(VOUCHERS, site), vouchers)
