from __future__ import annotations

import io

from flask import Flask, render_template, send_file

from ..common.datetime_utils import now_local
from ..common.web import current_site, login_required, roles_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        data = container.dashboard_service.build(current_site())
        return render_template("dashboard.html", data=data, active_page="dashboard")

    @app.route("/reports", endpoint="reports")
    @roles_required(Role.BOSS, Role.GERANT)
    def reports():
        data = container.report_service.build(current_site())
        return render_template("reports.html", report=data, active_page="reports")

    @app.route("/reports/export", endpoint="export_report")
    @roles_required(Role.BOSS, Role.GERANT)
    def export_report():
        site = current_site()
        now = now_local()
        content = container.report_service.export_excel(site, now=now)
        filename = f"rapport_{site.name.lower()}_{now.strftime('%Y%m%d')}.xlsx"
        return send_file(
            io.BytesIO(content),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=filename,
        )
