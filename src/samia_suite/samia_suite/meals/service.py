from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import FRENCH_DAYS, french_weekday, now_local
from ..common.ids import new_id
from ..common.permissions import require_role
from ..common.validators import parse_amount, require_non_empty
from ..core.enums import MealCategory, Role, Site
from ..core.exceptions import ValidationError
from .model import DailyPlan, Dish, MenuLine
from .repository import MealsRepository


class MealService:
    def __init__(self, meals: MealsRepository):
        self._meals = meals

    def list_dishes(self, site: Site) -> list[Dish]:
        return self._meals.list_dishes(site)

    def list_plans(self, site: Site) -> list[DailyPlan]:
        return self._meals.list_plans(site)

    def planning_grid(self, site: Site) -> dict[str, dict[str, Optional[DailyPlan]]]:
        """{day: {category: plan or None}} for the seven days, Sunday first."""
        plans = {(p.day, p.category): p for p in self._meals.list_plans(site)}
        return {day: {cat.value: plans.get((day, cat)) for cat in MealCategory} for day in FRENCH_DAYS}

    def add_dish(
        self,
        *,
        current_role: Role,
        site: Site,
        name: str,
        description: str,
        price: float,
        category: MealCategory,
    ) -> Dish:
        require_role(current_role, Role.CHEF)
        name = require_non_empty(name, "Nom du plat")
        price = parse_amount(price, "Prix") if price is not None else -1
        if price < 0:
            raise ValidationError("Prix invalide")

        dish = Dish(id=new_id(), name=name, description=(description or "").strip(), price=price, category=category)
        self._meals.save_dishes(site, [*self._meals.list_dishes(site), dish])
        return dish

    def set_plan(self, *, current_role: Role, site: Site, day: str, category: MealCategory, dish_id: str) -> DailyPlan:
        """Upsert the main dish of one (day, service) cell."""
        require_role(current_role, Role.CHEF)
        if day not in FRENCH_DAYS:
            raise ValidationError("Jour invalide")
        if not any(d.id == dish_id for d in self._meals.list_dishes(site)):
            raise ValidationError("Plat introuvable")

        plans = self._meals.list_plans(site)
        for idx, plan in enumerate(plans):
            if plan.day == day and plan.category == category:
                plans[idx] = replace(plan, main_dish_id=dish_id)
                self._meals.save_plans(site, plans)
                return plans[idx]

        plan = DailyPlan(id=new_id(), day=day, category=category, main_dish_id=dish_id)
        self._meals.save_plans(site, [*plans, plan])
        return plan

    def today_menu(self, site: Site, *, now: Optional[datetime] = None) -> list[MenuLine]:
        day = french_weekday(now or now_local())
        dishes = {d.id: d.name for d in self._meals.list_dishes(site)}
        return [
            MenuLine(category=p.category, dish_name=dishes.get(p.main_dish_id, "?"))
            for p in self._meals.list_plans(site)
            if p.day == day
        ]
