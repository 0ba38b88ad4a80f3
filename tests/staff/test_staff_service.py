from __future__ import annotations

from datetime import timedelta

import pytest

from src.samia_suite.samia_suite.core.enums import AttendanceStatus, Role, Site, StaffStatus
from src.samia_suite.samia_suite.core.exceptions import AuthorizationError, ValidationError
from src.samia_suite.samia_suite.staff.model import AttendanceMark

SITE = Site.MDIQ


def _hire(container, name="Youssef", salary="4500"):
    return container.staff_service.save_member(
        current_role=Role.GERANT, site=SITE, name=name, function="Serveur", monthly_base_salary=salary
    )


def test_save_member_create_and_update(container):
    svc = container.staff_service
    member = _hire(container)
    assert member.site == SITE
    assert member.status == StaffStatus.ON_DUTY
    assert member.previous_month_salary is None

    updated = svc.save_member(
        current_role=Role.BOSS,
        site=SITE,
        member_id=member.id,
        name="Youssef B.",
        function="Chef de rang",
        monthly_base_salary="5000,50",
        previous_month_salary="4800",
        status=StaffStatus.ON_LEAVE,
    )
    assert updated.id == member.id
    assert updated.monthly_base_salary == 5000.5
    assert updated.previous_month_salary == 4800
    assert svc.list_all(SITE)[0].previous_month_salary == 4800
    assert [m.name for m in svc.list_all(SITE)] == ["Youssef B."]


def test_save_member_rules(container):
    svc = container.staff_service
    with pytest.raises(AuthorizationError):
        svc.save_member(current_role=Role.CHEF, site=SITE, name="A", function="B", monthly_base_salary=1)
    with pytest.raises(ValidationError):
        svc.save_member(current_role=Role.BOSS, site=SITE, name="A", function="", monthly_base_salary=1)
    with pytest.raises(ValidationError):
        svc.save_member(current_role=Role.BOSS, site=SITE, name="A", function="B", monthly_base_salary="abc")
    with pytest.raises(ValidationError):
        svc.save_member(
            current_role=Role.BOSS, site=SITE, name="A", function="B", monthly_base_salary=1, previous_month_salary="nan"
        )
    with pytest.raises(ValidationError):
        svc.save_member(current_role=Role.BOSS, site=SITE, member_id="nope", name="A", function="B", monthly_base_salary=1)


def test_delete_member(container):
    svc = container.staff_service
    member = _hire(container)
    svc.delete_member(current_role=Role.GERANT, site=SITE, member_id=member.id)
    assert svc.list_all(SITE) == []
    with pytest.raises(ValidationError):
        svc.delete_member(current_role=Role.GERANT, site=SITE, member_id=member.id)


def test_mark_attendance_replaces_todays_mark(container, fixed_now):
    svc = container.staff_service
    member = _hire(container)

    svc.mark_attendance(current_role=Role.GERANT, site=SITE, member_id=member.id, status=AttendanceStatus.ABSENT, now=fixed_now)
    svc.mark_attendance(
        current_role=Role.GERANT, site=SITE, member_id=member.id, status=AttendanceStatus.PRESENT, now=fixed_now
    )
    svc.mark_attendance(
        current_role=Role.GERANT,
        site=SITE,
        member_id=member.id,
        status=AttendanceStatus.ABSENT,
        now=fixed_now - timedelta(days=1),
    )

    marks = svc.list_all(SITE)[0].attendance
    assert sorted(marks, key=lambda m: m.date) == [
        AttendanceMark(date="2025-03-11", status=AttendanceStatus.ABSENT),
        AttendanceMark(date="2025-03-12", status=AttendanceStatus.PRESENT),
    ]


def test_justify_only_todays_absence(container, fixed_now):
    svc = container.staff_service
    member = _hire(container)

    with pytest.raises(ValidationError):
        svc.justify(current_role=Role.BOSS, site=SITE, member_id=member.id, now=fixed_now)

    svc.mark_attendance(current_role=Role.BOSS, site=SITE, member_id=member.id, status=AttendanceStatus.ABSENT, now=fixed_now)
    justified = svc.justify(current_role=Role.BOSS, site=SITE, member_id=member.id, now=fixed_now)

    assert justified.mark_for("2025-03-12").status == AttendanceStatus.JUSTIFIED
    with pytest.raises(ValidationError):
        svc.justify(current_role=Role.BOSS, site=SITE, member_id=member.id, now=fixed_now)


def test_pointage_only_present_or_absent(container, fixed_now):
    member = _hire(container)
    with pytest.raises(ValidationError):
        container.staff_service.mark_attendance(
            current_role=Role.BOSS, site=SITE, member_id=member.id, status=AttendanceStatus.JUSTIFIED, now=fixed_now
        )


def test_payroll_and_presence(container, fixed_now):
    svc = container.staff_service
    a = _hire(container, "A", "3000")
    b = _hire(container, "B", "6000")
    _hire(container, "C", "1500")
    svc.mark_attendance(current_role=Role.BOSS, site=SITE, member_id=a.id, status=AttendanceStatus.ABSENT, now=fixed_now)
    svc.mark_attendance(current_role=Role.BOSS, site=SITE, member_id=b.id, status=AttendanceStatus.PRESENT, now=fixed_now)

    lines = {line.member.name: line for line in svc.payroll(SITE)}
    assert lines["A"].absences == 1
    assert lines["A"].net_salary == pytest.approx(2900)
    assert lines["B"].net_salary == pytest.approx(6000)
    assert svc.total_payroll(SITE) == pytest.approx(2900 + 6000 + 1500)

    presence = svc.presence(SITE, now=fixed_now)
    assert (presence.present, presence.absent) == (1, 1)
