from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..apartments.service import ApartmentService
from ..cash.service import CashService
from ..core.constants import BUDGET_PER_CLIENT
from ..core.enums import Site
from ..laundry.service import LaundryPulse, LaundryService
from ..meals.model import MenuLine
from ..meals.service import MealService
from ..staff.service import Presence, StaffService
from ..stock.model import StockItem
from ..stock.service import StockService
from ..vouchers.service import VoucherService, VoucherStats


@dataclass(frozen=True)
class Performance:
    budget: float
    expenses: float

    @property
    def index(self) -> float:
        return self.budget - self.expenses

    @property
    def status(self) -> str:
        if self.index > 0:
            return "good"
        if self.index < 0:
            return "bad"
        return "neutral"


@dataclass(frozen=True)
class Dashboard:
    site: Site
    total_clients: int
    performance: Performance
    vouchers: VoucherStats
    presence: Presence
    laundry: LaundryPulse
    critical_stock: list[StockItem]
    pending_commands: int
    today_menu: list[MenuLine]


class DashboardService:
    """Home screen: a read-only snapshot assembled from the other services."""

    def __init__(
        self,
        *,
        apartments: ApartmentService,
        cash: CashService,
        vouchers: VoucherService,
        staff: StaffService,
        laundry: LaundryService,
        stock: StockService,
        meals: MealService,
    ):
        self._apartments = apartments
        self._cash = cash
        self._vouchers = vouchers
        self._staff = staff
        self._laundry = laundry
        self._stock = stock
        self._meals = meals

    def build(self, site: Site, *, now: Optional[datetime] = None) -> Dashboard:
        clients = self._apartments.occupancy(site).clients
        return Dashboard(
            site=site,
            total_clients=clients,
            performance=Performance(
                budget=float(clients * BUDGET_PER_CLIENT),
                expenses=self._cash.today_expenses(site, now=now),
            ),
            vouchers=self._vouchers.daily_stats(site, now=now),
            presence=self._staff.presence(site, now=now),
            laundry=self._laundry.pulse(site),
            critical_stock=self._stock.critical_items(site),
            pending_commands=self._stock.pending_commands_count(site),
            today_menu=self._meals.today_menu(site, now=now),
        )
