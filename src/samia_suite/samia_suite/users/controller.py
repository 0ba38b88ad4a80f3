from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import ACTIVE_SITE_KEY, current_user, parse_enum, roles_required, run_action
from ..container import Container
from ..core.enums import Role, Site
from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_user() is not None:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            identifier = request.form.get("identifier", "")
            password = request.form.get("password", "")
            remember = bool(request.form.get("remember_me"))

            try:
                role = parse_enum(Role, request.form.get("role", ""), "Poste")
                user = container.auth_service.login(identifier, password, role, persist=remember)
                session.pop(ACTIVE_SITE_KEY, None)
                flash(f"Bienvenue {user.name}", "success")
                return redirect(url_for("dashboard"))
            except (AuthenticationError, ValidationError) as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Login failed")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"Erreur système lors de la connexion: {e}", "danger")
                else:
                    flash("Erreur système lors de la connexion", "danger")

        return render_template("login.html", roles=list(Role))

    @app.route("/logout", endpoint="logout")
    def logout():
        container.session_service.logout()
        session.pop(ACTIVE_SITE_KEY, None)
        flash("Vous êtes déconnecté.", "info")
        return redirect(url_for("login"))

    @app.route("/site", methods=["POST"], endpoint="switch_site")
    @roles_required(Role.BOSS)
    def switch_site():
        requested = request.form.get("site", "")
        if requested in {s.value for s in Site.operational()}:
            session[ACTIVE_SITE_KEY] = requested
        else:
            flash("Site invalide", "danger")
        return redirect(request.referrer or url_for("dashboard"))

    @app.route("/settings", endpoint="settings")
    @roles_required(Role.BOSS)
    def settings():
        role = current_user().role
        return render_template(
            "settings.html",
            users=container.user_service.list_entries(current_role=role),
            logs=container.user_service.list_logs(current_role=role)[:100],
            roles=[r for r in Role if r != Role.BOSS],
            sites=Site.operational(),
            active_page="settings",
        )

    @app.route("/settings/users/add", methods=["POST"], endpoint="add_user")
    @roles_required(Role.BOSS)
    def add_user():
        form = request.form
        run_action(
            lambda: container.user_service.add_user(
                current_role=current_user().role,
                identifier=form.get("identifier", ""),
                name=form.get("name", ""),
                role=parse_enum(Role, form.get("role", ""), "Poste"),
                site=parse_enum(Site, form.get("site", ""), "Site"),
                password=form.get("password", ""),
            ),
            "Compte créé",
        )
        return redirect(url_for("settings"))

    @app.route("/settings/users/<identifier>/delete", methods=["POST"], endpoint="delete_user")
    @roles_required(Role.BOSS)
    def delete_user(identifier: str):
        run_action(
            lambda: container.user_service.delete_user(current_role=current_user().role, identifier=identifier),
            "Compte supprimé",
        )
        return redirect(url_for("settings"))

    @app.route("/settings/users/<identifier>/password", methods=["POST"], endpoint="update_password")
    @roles_required(Role.BOSS)
    def update_password(identifier: str):
        def _update():
            updated = container.user_service.update_password(
                current_role=current_user().role,
                identifier=identifier,
                new_password=request.form.get("password", ""),
            )
            if not updated:
                raise ValidationError("Compte introuvable")

        run_action(_update, "Mot de passe mis à jour")
        return redirect(url_for("settings"))
