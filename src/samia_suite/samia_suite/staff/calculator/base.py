from __future__ import annotations

from abc import ABC, abstractmethod

from ...staff.model import StaffMember


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_rate(self, member: StaffMember) -> float:
        raise NotImplementedError

    @abstractmethod
    def net_salary(self, member: StaffMember) -> float:
        raise NotImplementedError
