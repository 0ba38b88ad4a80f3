from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Site
from ..storage.base import KeyValueStore
from ..storage.keys import STOCK_COMMANDS, STOCK_ITEMS, site_key
from ..storage.records import load_records, save_records
from .model import ChefCommand, StockItem


class StockRepository(Protocol):
    def list_items(self, site: Site) -> list[StockItem]:
        raise NotImplementedError

    def save_items(self, site: Site, items: Sequence[StockItem]) -> None:
        raise NotImplementedError

    def list_commands(self, site: Site) -> list[ChefCommand]:
        raise NotImplementedError

    def save_commands(self, site: Site, commands: Sequence[ChefCommand]) -> None:
        raise NotImplementedError


class StoreStockRepository(StockRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_items(self, site: Site) -> list[StockItem]:
        return load_records(self._store, site_key(STOCK_ITEMS, site), StockItem.from_dict)

    def save_items(self, site: Site, items: Sequence[StockItem]) -> None:
        save_records(self._store, site_key(STOCK_ITEMS, site), items)

    def list_commands(self, site: Site) -> list[ChefCommand]:
        return load_records(self._store, site_key(STOCK_COMMANDS, site), ChefCommand.from_dict)

    def save_commands(self, site: Site, commands: Sequence[ChefCommand]) -> None:
        save_records(self._store, site_key(STOCK_COMMANDS, site), commands)
