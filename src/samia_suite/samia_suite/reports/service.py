from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd

from ..apartments.service import ApartmentService
from ..cash.service import CashService
from ..common.datetime_utils import now_local
from ..core.enums import Site
from ..staff.service import StaffService
from ..stock.service import StockService


@dataclass(frozen=True)
class ReportData:
    site: Site
    generated_at: str
    staff_cost: float
    cash_entries: float
    cash_expenses: float
    cash_balance: float
    stock_value: float
    occupancy_rate: float
    staff_rows: list[dict]
    stock_by_category: list[dict]


class ReportService:
    """Monthly management report of one site (Boss and Gérant)."""

    def __init__(self, staff: StaffService, cash: CashService, stock: StockService, apartments: ApartmentService):
        self._staff = staff
        self._cash = cash
        self._stock = stock
        self._apartments = apartments

    def build(self, site: Site, *, now: Optional[datetime] = None) -> ReportData:
        payroll = self._staff.payroll(site)
        cash = self._cash.summary(site)

        staff_rows = [
            {
                "name": line.member.name,
                "function": line.member.function,
                "base_salary": line.member.monthly_base_salary,
                "absences": line.absences,
                "net_salary": round(line.net_salary, 2),
            }
            for line in payroll
        ]

        by_category: dict[str, dict] = {}
        for item in self._stock.list_items(site):
            row = by_category.setdefault(item.category.value, {"category": item.category.value, "items": 0, "value": 0.0})
            row["items"] += 1
            row["value"] += item.value

        return ReportData(
            site=site,
            generated_at=(now or now_local()).isoformat(timespec="seconds"),
            staff_cost=sum(line.net_salary for line in payroll),
            cash_entries=cash.entries,
            cash_expenses=cash.expenses,
            cash_balance=cash.balance,
            stock_value=self._stock.stock_value(site),
            occupancy_rate=self._apartments.occupancy(site).rate,
            staff_rows=staff_rows,
            stock_by_category=sorted(by_category.values(), key=lambda r: r["category"]),
        )

    def export_excel(self, site: Site, *, now: Optional[datetime] = None) -> bytes:
        data = self.build(site, now=now)

        summary = pd.DataFrame(
            [
                {"Indicateur": "Site", "Valeur": data.site.value},
                {"Indicateur": "Généré le", "Valeur": data.generated_at},
                {"Indicateur": "Masse salariale (DH)", "Valeur": round(data.staff_cost, 2)},
                {"Indicateur": "Entrées caisse (DH)", "Valeur": data.cash_entries},
                {"Indicateur": "Dépenses caisse (DH)", "Valeur": data.cash_expenses},
                {"Indicateur": "Solde caisse (DH)", "Valeur": data.cash_balance},
                {"Indicateur": "Valeur du stock (DH)", "Valeur": round(data.stock_value, 2)},
                {"Indicateur": "Taux d'occupation (%)", "Valeur": round(data.occupancy_rate, 1)},
            ]
        )
        staff = pd.DataFrame(data.staff_rows, columns=["name", "function", "base_salary", "absences", "net_salary"])
        staff.columns = ["Nom", "Fonction", "Salaire de base", "Absences", "Net à payer"]
        stock = pd.DataFrame(data.stock_by_category, columns=["category", "items", "value"])
        stock.columns = ["Catégorie", "Articles", "Valeur"]

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            summary.to_excel(writer, index=False, sheet_name="Synthese")
            staff.to_excel(writer, index=False, sheet_name="Personnel")
            stock.to_excel(writer, index=False, sheet_name="Stock")
        return output.getvalue()
