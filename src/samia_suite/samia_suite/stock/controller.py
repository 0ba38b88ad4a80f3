from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.validators import parse_amount
from ..common.web import current_site, current_user, login_required, parse_enum, run_action
from ..container import Container
from ..core.enums import StockCategory, StockUnit


def register(app: Flask, container: Container) -> None:
    svc = container.stock_service

    @app.route("/stock", endpoint="stock")
    @login_required
    def stock():
        site = current_site()
        return render_template(
            "stock.html",
            items=svc.list_items(site),
            commands=svc.list_commands(site),
            categories=list(StockCategory),
            units=list(StockUnit),
            stock_value=svc.stock_value(site),
            active_page="stock",
        )

    @app.route("/stock/products", methods=["POST"], endpoint="add_product")
    @login_required
    def add_product():
        form = request.form
        threshold = form.get("min_threshold", "").strip()
        run_action(
            lambda: svc.add_product(
                current_role=current_user().role,
                site=current_site(),
                name=form.get("name", ""),
                category=parse_enum(StockCategory, form.get("category"), "Catégorie"),
                unit=parse_enum(StockUnit, form.get("unit"), "Unité"),
                unit_price=parse_amount(form.get("unit_price"), "Prix unitaire"),
                min_threshold=parse_amount(threshold, "Seuil minimum") if threshold else None,
            ),
            "Article ajouté",
        )
        return redirect(url_for("stock"))

    @app.route("/stock/<item_id>/adjust", methods=["POST"], endpoint="adjust_stock")
    @login_required
    def adjust_stock(item_id: str):
        run_action(
            lambda: svc.adjust_stock(
                current_role=current_user().role,
                site=current_site(),
                item_id=item_id,
                delta=parse_amount(request.form.get("delta"), "Quantité"),
            ),
            "Stock mis à jour",
        )
        return redirect(url_for("stock"))

    @app.route("/stock/commands", methods=["POST"], endpoint="create_command")
    @login_required
    def create_command():
        run_action(
            lambda: svc.create_command(
                current_role=current_user().role,
                site=current_site(),
                item_id=request.form.get("item_id", ""),
                quantity=parse_amount(request.form.get("quantity"), "Quantité"),
            ),
            "Commande envoyée au magasin",
        )
        return redirect(url_for("stock"))

    @app.route("/stock/commands/<command_id>/deliver", methods=["POST"], endpoint="deliver_command")
    @login_required
    def deliver_command(command_id: str):
        run_action(
            lambda: svc.mark_delivered(current_role=current_user().role, site=current_site(), command_id=command_id),
            "Commande livrée",
        )
        return redirect(url_for("stock"))
