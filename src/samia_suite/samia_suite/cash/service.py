from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_day, now_local
from ..common.ids import new_id
from ..common.permissions import require_role
from ..common.validators import parse_amount, require_non_empty, require_positive
from ..core.enums import CashType, Role, Site
from .model import CashTransaction
from .repository import CashRepository

FUNDING_CATEGORY = "Fond"
EXPENSE_CATEGORIES = ["Courses", "Entretien", "Transport", "Divers"]


@dataclass(frozen=True)
class CashSummary:
    entries: float
    expenses: float

    @property
    def balance(self) -> float:
        return self.entries - self.expenses


class CashService:
    """Caisse du site: le Boss alimente le fond, le Gérant saisit les dépenses."""

    def __init__(self, cash: CashRepository):
        self._cash = cash

    def list_all(self, site: Site) -> list[CashTransaction]:
        return self._cash.list_all(site)

    def _record(self, site: Site, cash_type: CashType, amount, description: str, category: str, now) -> CashTransaction:
        amount = require_positive(parse_amount(amount, "Montant"), "Montant")
        description = require_non_empty(description, "Description")
        tx = CashTransaction(
            id=new_id(),
            type=cash_type,
            amount=amount,
            description=description,
            timestamp=(now or now_local()).isoformat(timespec="seconds"),
            category=category,
        )
        self._cash.save_all(site, [tx, *self._cash.list_all(site)])
        return tx

    def add_funding(
        self, *, current_role: Role, site: Site, amount, description: str, now: Optional[datetime] = None
    ) -> CashTransaction:
        require_role(current_role, Role.BOSS)
        return self._record(site, CashType.ENTRY, amount, description, FUNDING_CATEGORY, now)

    def add_expense(
        self,
        *,
        current_role: Role,
        site: Site,
        amount,
        description: str,
        category: str = "Divers",
        now: Optional[datetime] = None,
    ) -> CashTransaction:
        require_role(current_role, Role.GERANT)
        return self._record(site, CashType.EXPENSE, amount, description, (category or "Divers").strip(), now)

    def summary(self, site: Site) -> CashSummary:
        txs = self._cash.list_all(site)
        return CashSummary(
            entries=sum(t.amount for t in txs if t.type == CashType.ENTRY),
            expenses=sum(t.amount for t in txs if t.type == CashType.EXPENSE),
        )

    def balance(self, site: Site) -> float:
        return self.summary(site).balance

    def today_expenses(self, site: Site, *, now: Optional[datetime] = None) -> float:
        today = iso_day(now or now_local())
        return sum(t.amount for t in self._cash.list_all(site) if t.type == CashType.EXPENSE and t.day == today)
