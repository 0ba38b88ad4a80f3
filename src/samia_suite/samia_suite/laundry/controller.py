from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.web import current_site, current_user, login_required, run_action
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.laundry_service

    @app.route("/laundry", endpoint="laundry")
    @login_required
    def laundry():
        site = current_site()
        return render_template(
            "laundry.html",
            requests=svc.list_all(site),
            pulse=svc.pulse(site),
            occupied=container.apartment_service.list_occupied(site),
            active_page="laundry",
        )

    @app.route("/laundry", methods=["POST"], endpoint="create_laundry")
    @login_required
    def create_laundry():
        run_action(
            lambda: svc.create_request(
                current_role=current_user().role,
                site=current_site(),
                apartment_id=request.form.get("apartment_id", ""),
                items=request.form.get("items", ""),
            ),
            "Dépôt enregistré",
        )
        return redirect(url_for("laundry"))

    @app.route("/laundry/<request_id>/advance", methods=["POST"], endpoint="advance_laundry")
    @login_required
    def advance_laundry(request_id: str):
        run_action(
            lambda: svc.advance(current_role=current_user().role, site=current_site(), request_id=request_id),
            "Statut du linge mis à jour",
        )
        return redirect(url_for("laundry"))
