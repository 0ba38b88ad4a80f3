from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.web import current_site, current_user, login_required, parse_enum, run_action
from ..container import Container
from ..core.enums import MealCategory, VoucherType
from .model import BEVERAGES


def register(app: Flask, container: Container) -> None:
    svc = container.voucher_service

    @app.route("/vouchers", endpoint="vouchers")
    @login_required
    def vouchers():
        site = current_site()
        return render_template(
            "vouchers.html",
            vouchers=svc.list_all(site),
            stats=svc.daily_stats(site),
            occupied=container.apartment_service.list_occupied(site),
            meal_types=list(MealCategory),
            beverages=BEVERAGES,
            active_page="vouchers",
        )

    @app.route("/vouchers", methods=["POST"], endpoint="create_voucher")
    @login_required
    def create_voucher():
        form = request.form
        meal = form.get("meal_type", "").strip()
        run_action(
            lambda: svc.create_voucher(
                current_role=current_user().role,
                site=current_site(),
                voucher_type=parse_enum(VoucherType, form.get("type"), "Type de bon"),
                apartment_id=form.get("apartment_id", ""),
                meal_type=parse_enum(MealCategory, meal, "Service") if meal else None,
                beverages=form.getlist("beverages"),
            ),
            "Bon émis",
        )
        return redirect(url_for("vouchers"))

    @app.route("/vouchers/<voucher_id>/consume", methods=["POST"], endpoint="consume_voucher")
    @login_required
    def consume_voucher(voucher_id: str):
        run_action(
            lambda: svc.mark_consumed(current_role=current_user().role, site=current_site(), voucher_id=voucher_id),
            "Bon consommé",
        )
        return redirect(url_for("vouchers"))
