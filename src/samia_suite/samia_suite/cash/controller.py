from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.web import current_site, current_user, roles_required, run_action
from ..container import Container
from ..core.enums import Role
from .service import EXPENSE_CATEGORIES


def register(app: Flask, container: Container) -> None:
    svc = container.cash_service

    @app.route("/cash", endpoint="cash")
    @roles_required(Role.BOSS, Role.GERANT)
    def cash():
        site = current_site()
        return render_template(
            "cash.html",
            transactions=svc.list_all(site),
            summary=svc.summary(site),
            today_expenses=svc.today_expenses(site),
            categories=EXPENSE_CATEGORIES,
            active_page="cash",
        )

    @app.route("/cash/funding", methods=["POST"], endpoint="add_funding")
    @roles_required(Role.BOSS, Role.GERANT)
    def add_funding():
        run_action(
            lambda: svc.add_funding(
                current_role=current_user().role,
                site=current_site(),
                amount=request.form.get("amount", ""),
                description=request.form.get("description", ""),
            ),
            "Fond de caisse ajouté",
        )
        return redirect(url_for("cash"))

    @app.route("/cash/expenses", methods=["POST"], endpoint="add_expense")
    @roles_required(Role.BOSS, Role.GERANT)
    def add_expense():
        run_action(
            lambda: svc.add_expense(
                current_role=current_user().role,
                site=current_site(),
                amount=request.form.get("amount", ""),
                description=request.form.get("description", ""),
                category=request.form.get("category", ""),
            ),
            "Dépense enregistrée",
        )
        return redirect(url_for("cash"))
