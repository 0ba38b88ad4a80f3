from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.web import current_user, login_required, parse_enum, run_action
from ..container import Container
from ..core.enums import Role, Site


def register(app: Flask, container: Container) -> None:
    svc = container.message_service

    @app.route("/messages", endpoint="messages")
    @login_required
    def messages():
        user = current_user()
        visible = svc.visible_for(user)
        # Opening the inbox reads everything addressed to the user.
        svc.mark_read(user)
        return render_template(
            "messages.html",
            messages=visible,
            roles=list(Role),
            sites=list(Site),
            active_page="messages",
        )

    @app.route("/messages", methods=["POST"], endpoint="send_message")
    @login_required
    def send_message():
        form = request.form
        run_action(
            lambda: svc.send(
                sender=current_user(),
                recipient_role=parse_enum(Role, form.get("recipient_role"), "Destinataire"),
                recipient_site=parse_enum(Site, form.get("recipient_site"), "Site"),
                content=form.get("content", ""),
            ),
            "Message envoyé",
        )
        return redirect(url_for("messages"))
