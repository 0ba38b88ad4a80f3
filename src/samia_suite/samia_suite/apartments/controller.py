from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.web import current_site, current_user, login_required, parse_enum, run_action
from ..container import Container
from ..core.enums import AccommodationType, ApartmentStatus, ApartmentType


def register(app: Flask, container: Container) -> None:
    svc = container.apartment_service

    @app.route("/apartments", endpoint="apartments")
    @login_required
    def apartments():
        site = current_site()
        return render_template(
            "apartments.html",
            apartments=svc.list_all(site),
            occupancy=svc.occupancy(site),
            residences=svc.residences(site),
            types=list(ApartmentType),
            statuses=[s for s in ApartmentStatus if s != ApartmentStatus.OCCUPIED],
            active_page="apartments",
        )

    @app.route("/apartments", methods=["POST"], endpoint="add_apartment")
    @login_required
    def add_apartment():
        form = request.form
        run_action(
            lambda: svc.add_apartment(
                current_role=current_user().role,
                site=current_site(),
                residence=form.get("residence", ""),
                block=form.get("block", ""),
                number=form.get("number", ""),
                apartment_type=parse_enum(ApartmentType, form.get("type", ApartmentType.SUITE.value), "Type"),
                capacity=int(form.get("capacity") or 4),
            ),
            "Suite ajoutée",
        )
        return redirect(url_for("apartments"))

    @app.route("/apartments/<apartment_id>/check-in", methods=["POST"], endpoint="check_in")
    @login_required
    def check_in(apartment_id: str):
        form = request.form
        run_action(
            lambda: svc.check_in(
                current_role=current_user().role,
                site=current_site(),
                apartment_id=apartment_id,
                client_name=form.get("client_name", ""),
                accommodation=parse_enum(
                    AccommodationType, form.get("accommodation", AccommodationType.SINGLE.value), "Formule"
                ),
            ),
            "Arrivée enregistrée",
        )
        return redirect(url_for("apartments"))

    @app.route("/apartments/<apartment_id>/check-out", methods=["POST"], endpoint="check_out")
    @login_required
    def check_out(apartment_id: str):
        run_action(
            lambda: svc.check_out(current_role=current_user().role, site=current_site(), apartment_id=apartment_id),
            "Départ enregistré, suite en ménage",
        )
        return redirect(url_for("apartments"))

    @app.route("/apartments/<apartment_id>/ready", methods=["POST"], endpoint="mark_ready")
    @login_required
    def mark_ready(apartment_id: str):
        run_action(
            lambda: svc.mark_ready(current_role=current_user().role, site=current_site(), apartment_id=apartment_id),
            "Suite prête",
        )
        return redirect(url_for("apartments"))

    @app.route("/apartments/<apartment_id>/status", methods=["POST"], endpoint="set_apartment_status")
    @login_required
    def set_apartment_status(apartment_id: str):
        run_action(
            lambda: svc.set_status(
                current_role=current_user().role,
                site=current_site(),
                apartment_id=apartment_id,
                status=parse_enum(ApartmentStatus, request.form.get("status"), "Statut"),
            ),
            "Statut mis à jour",
        )
        return redirect(url_for("apartments"))
