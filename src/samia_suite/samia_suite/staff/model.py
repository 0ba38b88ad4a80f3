from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import AttendanceStatus, Site, StaffStatus


@dataclass(frozen=True)
class AttendanceMark:
    date: str
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {"date": self.date, "status": self.status.value}

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceMark":
        return cls(date=str(data["date"]), status=AttendanceStatus(data["status"]))


@dataclass(frozen=True)
class StaffMember:
    id: str
    name: str
    function: str
    site: Site
    monthly_base_salary: float
    phone: str = ""
    status: StaffStatus = StaffStatus.ON_DUTY
    previous_month_salary: Optional[float] = None
    attendance: tuple[AttendanceMark, ...] = field(default_factory=tuple)

    def mark_for(self, day: str) -> Optional[AttendanceMark]:
        return next((m for m in self.attendance if m.date == day), None)

    @property
    def absences(self) -> int:
        # Justified days are paid.
        return sum(1 for m in self.attendance if m.status == AttendanceStatus.ABSENT)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "function": self.function,
            "phone": self.phone,
            "site": self.site.value,
            "monthly_base_salary": self.monthly_base_salary,
            "previous_month_salary": self.previous_month_salary,
            "status": self.status.value,
            "attendance": [m.to_dict() for m in self.attendance],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StaffMember":
        prev = data.get("previous_month_salary")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            function=str(data.get("function", "")),
            phone=str(data.get("phone", "")),
            site=Site(data["site"]),
            monthly_base_salary=float(data.get("monthly_base_salary", 0)),
            previous_month_salary=float(prev) if prev is not None else None,
            status=StaffStatus(data.get("status", StaffStatus.ON_DUTY.value)),
            attendance=tuple(AttendanceMark.from_dict(m) for m in data.get("attendance", [])),
        )
