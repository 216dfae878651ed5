from __future__ import annotations

import io
import logging
from pathlib import PurePosixPath

from flask import Flask, jsonify, render_template, request, send_file

from ..backup.service import XLSX_MIMETYPE
from ..common.audit import log_action
from ..common.web import build_login_required, client_ip, current_username, fail, fail_for, server_error
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = build_login_required(container.auth_service, logger)
    dashboard = container.dashboard_service
    backup = container.backup_service

    @app.route("/api/summary", methods=["GET"], endpoint="api_summary")
    @login_required
    def api_summary():
        try:
            data = dashboard.summary(request.args.get("gender"))
        except DomainError as e:
            return fail_for(e)
        except Exception:
            return server_error(logger, "Failed to load dashboard data.", action="Load Dashboard")
        return jsonify({"success": True, **data})

    @app.route("/api/backup/excel", methods=["GET"], endpoint="api_backup_excel")
    @login_required
    def api_backup_excel():
        try:
            payload = backup.export_workbook()
        except Exception:
            return server_error(logger, "Excel backup failed.", action="Download Backup")

        log_action(current_username(), "Downloaded Backup", client_ip(), "Success")
        return send_file(
            io.BytesIO(payload),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=backup.filename(),
        )

    @app.route("/", defaults={"path": ""}, methods=["GET"], endpoint="dashboard_page")
    @app.route("/<path:path>", methods=["GET"], endpoint="dashboard_page")
    @login_required
    def dashboard_page(path: str):
        if path.startswith("api/"):
            return fail("Not found.", 404)
        if PurePosixPath(path).suffix:
            logger.warning("Resource not found: /%s from IP: %s", path, client_ip())
            return "Not found", 404
        return render_template("index.html", username=current_username())
