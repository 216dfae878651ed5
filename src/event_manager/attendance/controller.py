from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.audit import log_action, log_failed_action
from ..common.web import build_login_required, client_ip, current_username, fail_for, request_data, server_error
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = build_login_required(container.auth_service, logger)
    attendance = container.attendance_service

    @app.route("/api/attendance", methods=["POST"], endpoint="api_mark_attendance")
    @login_required
    def api_mark_attendance():
        data = request_data()
        uid, day = data.get("uid"), data.get("day")
        try:
            attendance.award(uid=uid, day=day, admin_username=current_username())
        except DomainError as e:
            log_failed_action(current_username(), "Attempted Mark Attendance", client_ip(), f"Failed - UID: {uid}, Day: {day}, Error: {e}")
            return fail_for(e)
        except Exception:
            return server_error(logger, "Failed to mark attendance.", action="Mark Attendance", details=f"UID: {uid}")

        log_action(current_username(), "Marked Attendance", client_ip(), f"UID: {uid}, Day: {day}")
        return jsonify({"success": True, "message": f"Attendance marked for Day {day}."})

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="api_bulk_attendance")
    @login_required
    def api_bulk_attendance():
        data = request_data()
        try:
            outcome = attendance.award_bulk(uids=data.get("uids"), day=data.get("day"), admin_username=current_username())
        except DomainError as e:
            return fail_for(e)
        except Exception:
            return server_error(logger, "Server error during bulk attendance.", action="Mark Bulk Attendance")

        log_action(current_username(), "Marked Bulk Attendance", client_ip(), f"Day: {data.get('day')}, {outcome.audit_details()}")
        return jsonify({"success": outcome.success, "message": outcome.message, "results": outcome.to_dict()})
