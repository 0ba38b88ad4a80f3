from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_day, now_local
from ..common.ids import new_id
from ..common.permissions import require_role
from ..common.validators import parse_amount, require_non_empty
from ..core.enums import AttendanceStatus, Role, Site, StaffStatus
from ..core.exceptions import ValidationError
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import AttendanceMark, StaffMember
from .repository import StaffRepository

_MANAGERS = (Role.BOSS, Role.GERANT)


@dataclass(frozen=True)
class PayrollLine:
    member: StaffMember
    absences: int
    daily_rate: float
    net_salary: float


@dataclass(frozen=True)
class Presence:
    present: int
    absent: int


class StaffService:
    def __init__(self, staff: StaffRepository, *, calculator: Optional[PayrollCalculator] = None):
        self._staff = staff
        self._calculator = calculator or StandardPayrollCalculator()

    def list_all(self, site: Site) -> list[StaffMember]:
        return self._staff.list_all(site)

    def save_member(
        self,
        *,
        current_role: Role,
        site: Site,
        name: str,
        function: str,
        monthly_base_salary,
        phone: str = "",
        status: StaffStatus = StaffStatus.ON_DUTY,
        previous_month_salary=None,
        member_id: Optional[str] = None,
    ) -> StaffMember:
        """Create a member, or update the profile of `member_id` keeping its attendance."""
        require_role(current_role, *_MANAGERS)
        name = require_non_empty(name, "Nom")
        function = require_non_empty(function, "Fonction")
        salary = parse_amount(monthly_base_salary, "Salaire de base")
        if salary < 0:
            raise ValidationError("Salaire de base invalide")
        previous = None
        if previous_month_salary not in (None, ""):
            previous = parse_amount(previous_month_salary, "Salaire du mois précédent")
            if previous < 0:
                raise ValidationError("Salaire du mois précédent invalide")

        members = self._staff.list_all(site)
        if member_id:
            for idx, m in enumerate(members):
                if m.id == member_id:
                    members[idx] = replace(
                        m,
                        name=name,
                        function=function,
                        phone=(phone or "").strip(),
                        monthly_base_salary=salary,
                        previous_month_salary=previous,
                        status=status,
                    )
                    self._staff.save_all(site, members)
                    return members[idx]
            raise ValidationError("Employé introuvable")

        member = StaffMember(
            id=new_id(),
            name=name,
            function=function,
            phone=(phone or "").strip(),
            site=site,
            monthly_base_salary=salary,
            previous_month_salary=previous,
            status=status,
        )
        self._staff.save_all(site, [*members, member])
        return member

    def delete_member(self, *, current_role: Role, site: Site, member_id: str) -> None:
        require_role(current_role, *_MANAGERS)
        members = self._staff.list_all(site)
        kept = [m for m in members if m.id != member_id]
        if len(kept) == len(members):
            raise ValidationError("Employé introuvable")
        self._staff.save_all(site, kept)

    def _update_today(self, site: Site, member_id: str, now: datetime, change) -> StaffMember:
        today = iso_day(now)
        members = self._staff.list_all(site)
        for idx, m in enumerate(members):
            if m.id == member_id:
                members[idx] = change(m, today)
                self._staff.save_all(site, members)
                return members[idx]
        raise ValidationError("Employé introuvable")

    def mark_attendance(
        self,
        *,
        current_role: Role,
        site: Site,
        member_id: str,
        status: AttendanceStatus,
        now: Optional[datetime] = None,
    ) -> StaffMember:
        """Pointage: one mark per day, a new mark replaces today's."""
        require_role(current_role, *_MANAGERS)
        if status not in (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT):
            raise ValidationError("Pointage invalide")

        def _mark(m: StaffMember, today: str) -> StaffMember:
            others = tuple(a for a in m.attendance if a.date != today)
            return replace(m, attendance=(*others, AttendanceMark(date=today, status=status)))

        return self._update_today(site, member_id, now or now_local(), _mark)

    def justify(self, *, current_role: Role, site: Site, member_id: str, now: Optional[datetime] = None) -> StaffMember:
        require_role(current_role, *_MANAGERS)

        def _justify(m: StaffMember, today: str) -> StaffMember:
            current = m.mark_for(today)
            if not current or current.status != AttendanceStatus.ABSENT:
                raise ValidationError("Seule une absence du jour peut être justifiée")
            return replace(
                m,
                attendance=tuple(
                    AttendanceMark(date=a.date, status=AttendanceStatus.JUSTIFIED) if a.date == today else a
                    for a in m.attendance
                ),
            )

        return self._update_today(site, member_id, now or now_local(), _justify)

    def payroll(self, site: Site) -> list[PayrollLine]:
        return [
            PayrollLine(
                member=m,
                absences=m.absences,
                daily_rate=self._calculator.daily_rate(m),
                net_salary=self._calculator.net_salary(m),
            )
            for m in self._staff.list_all(site)
        ]

    def total_payroll(self, site: Site) -> float:
        return sum(line.net_salary for line in self.payroll(site))

    def presence(self, site: Site, *, now: Optional[datetime] = None) -> Presence:
        today = iso_day(now or now_local())
        marks = [m.mark_for(today) for m in self._staff.list_all(site)]
        return Presence(
            present=sum(1 for a in marks if a and a.status == AttendanceStatus.PRESENT),
            absent=sum(1 for a in marks if a and a.status == AttendanceStatus.ABSENT),
        )
