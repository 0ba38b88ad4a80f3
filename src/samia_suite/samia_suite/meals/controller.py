from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.datetime_utils import FRENCH_DAYS
from ..common.validators import parse_amount
from ..common.web import current_site, current_user, login_required, parse_enum, run_action
from ..container import Container
from ..core.enums import MealCategory


def register(app: Flask, container: Container) -> None:
    svc = container.meal_service

    @app.route("/meals", endpoint="meals")
    @login_required
    def meals():
        site = current_site()
        return render_template(
            "meals.html",
            dishes=svc.list_dishes(site),
            grid=svc.planning_grid(site),
            dish_names={d.id: d.name for d in svc.list_dishes(site)},
            days=FRENCH_DAYS,
            categories=list(MealCategory),
            today_menu=svc.today_menu(site),
            active_page="meals",
        )

    @app.route("/meals/dishes", methods=["POST"], endpoint="add_dish")
    @login_required
    def add_dish():
        form = request.form
        price = form.get("price", "").strip()
        run_action(
            lambda: svc.add_dish(
                current_role=current_user().role,
                site=current_site(),
                name=form.get("name", ""),
                description=form.get("description", ""),
                price=parse_amount(price, "Prix") if price else 0.0,
                category=parse_enum(MealCategory, form.get("category"), "Service"),
            ),
            "Plat ajouté",
        )
        return redirect(url_for("meals"))

    @app.route("/meals/planning", methods=["POST"], endpoint="set_plan")
    @login_required
    def set_plan():
        form = request.form
        run_action(
            lambda: svc.set_plan(
                current_role=current_user().role,
                site=current_site(),
                day=form.get("day", ""),
                category=parse_enum(MealCategory, form.get("category"), "Service"),
                dish_id=form.get("dish_id", ""),
            ),
            "Planning mis à jour",
        )
        return redirect(url_for("meals"))
