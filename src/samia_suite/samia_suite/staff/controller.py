from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.datetime_utils import iso_day, now_local
from ..common.web import current_site, current_user, login_required, parse_enum, run_action
from ..container import Container
from ..core.enums import AttendanceStatus, StaffStatus


def register(app: Flask, container: Container) -> None:
    svc = container.staff_service

    @app.route("/staff", endpoint="staff")
    @login_required
    def staff():
        site = current_site()
        return render_template(
            "staff.html",
            payroll=svc.payroll(site),
            total_payroll=svc.total_payroll(site),
            presence=svc.presence(site),
            today=iso_day(now_local()),
            statuses=list(StaffStatus),
            active_page="staff",
        )

    @app.route("/staff", methods=["POST"], endpoint="save_member")
    @login_required
    def save_member():
        form = request.form
        run_action(
            lambda: svc.save_member(
                current_role=current_user().role,
                site=current_site(),
                member_id=form.get("member_id") or None,
                name=form.get("name", ""),
                function=form.get("function", ""),
                phone=form.get("phone", ""),
                monthly_base_salary=form.get("monthly_base_salary", ""),
                previous_month_salary=form.get("previous_month_salary", "").strip() or None,
                status=parse_enum(StaffStatus, form.get("status", StaffStatus.ON_DUTY.value), "Statut"),
            ),
            "Fiche employé enregistrée",
        )
        return redirect(url_for("staff"))

    @app.route("/staff/<member_id>/delete", methods=["POST"], endpoint="delete_member")
    @login_required
    def delete_member(member_id: str):
        run_action(
            lambda: svc.delete_member(current_role=current_user().role, site=current_site(), member_id=member_id),
            "Employé supprimé",
        )
        return redirect(url_for("staff"))

    @app.route("/staff/<member_id>/attendance", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance(member_id: str):
        run_action(
            lambda: svc.mark_attendance(
                current_role=current_user().role,
                site=current_site(),
                member_id=member_id,
                status=parse_enum(AttendanceStatus, request.form.get("status"), "Pointage"),
            ),
            "Pointage enregistré",
        )
        return redirect(url_for("staff"))

    @app.route("/staff/<member_id>/justify", methods=["POST"], endpoint="justify_absence")
    @login_required
    def justify_absence(member_id: str):
        run_action(
            lambda: svc.justify(current_role=current_user().role, site=current_site(), member_id=member_id),
            "Absence justifiée",
        )
        return redirect(url_for("staff"))
