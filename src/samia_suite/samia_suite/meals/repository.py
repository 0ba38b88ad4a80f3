from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Site
from ..storage.base import KeyValueStore
from ..storage.keys import DISHES, PLANNING, site_key
from ..storage.records import load_records, save_records
from .model import DailyPlan, Dish


class MealsRepository(Protocol):
    def list_dishes(self, site: Site) -> list[Dish]:
        raise NotImplementedError

    def save_dishes(self, site: Site, dishes: Sequence[Dish]) -> None:
        raise NotImplementedError

    def list_plans(self, site: Site) -> list[DailyPlan]:
        raise NotImplementedError

    def save_plans(self, site: Site, plans: Sequence[DailyPlan]) -> None:
        raise NotImplementedError


class StoreMealsRepository(MealsRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_dishes(self, site: Site) -> list[Dish]:
        return load_records(self._store, site_key(DISHES, site), Dish.from_dict)

    def save_dishes(self, site: Site, dishes: Sequence[Dish]) -> None:
        save_records(self._store, site_key(DISHES, site), dishes)

    def list_plans(self, site: Site) -> list[DailyPlan]:
        return load_records(self._store, site_key(PLANNING, site), DailyPlan.from_dict)

    def save_plans(self, site: Site, plans: Sequence[DailyPlan]) -> None:
        save_records(self._store, site_key(PLANNING, site), plans)
