from __future__ import annotations

from ...core.constants import PAYROLL_DAYS_PER_MONTH
from ...staff.model import StaffMember
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: monthly / 30 per day, unjustified absences are deducted."""

    def __init__(self, days_per_month: int = PAYROLL_DAYS_PER_MONTH):
        self._days = int(days_per_month)

    def daily_rate(self, member: StaffMember) -> float:
        return float(member.monthly_base_salary or 0) / self._days

    def net_salary(self, member: StaffMember) -> float:
        return self.daily_rate(member) * (self._days - member.absences)
