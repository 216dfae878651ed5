from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.audit import log_action, log_failed_action
from ..common.web import build_login_required, client_ip, current_username, fail_for, request_data, server_error
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = build_login_required(container.auth_service, logger)
    points_service = container.points_service
    events = container.event_service

    @app.route("/api/points", methods=["POST"], endpoint="api_add_points")
    @login_required
    def api_add_points():
        data = request_data()
        uid, points, reason = data.get("uid"), data.get("points"), data.get("reason")
        try:
            points_service.grant(uid=uid, points=points, reason=reason, admin_username=current_username())
        except DomainError as e:
            log_failed_action(current_username(), "Attempted Add Points", client_ip(), f"Failed - UID: {uid}, Error: {e}")
            return fail_for(e)
        except Exception:
            return server_error(logger, "Failed to add points.", action="Add Points", details=f"UID: {uid}")

        log_action(current_username(), "Added Points", client_ip(), f"UID: {uid}, Points: {points}, Reason: {reason}")
        return jsonify({"success": True, "message": "Points added successfully."})

    @app.route("/api/event-points", methods=["POST"], endpoint="api_event_points")
    @login_required
    def api_event_points():
        data = request_data()
        try:
            outcome = points_service.grant_bulk(
                uids=data.get("uids"),
                points=data.get("points"),
                event_name=data.get("eventName"),
                admin_username=current_username(),
            )
        except DomainError as e:
            return fail_for(e)
        except Exception:
            return server_error(logger, "Server error during bulk points add.", action="Add Event Points (Bulk)")

        details = f"Event: {str(data.get('eventName')).strip()}, Points: {data.get('points')}, {outcome.audit_details()}"
        log_action(current_username(), "Added Event Points (Bulk)", client_ip(), details)
        return jsonify({"success": outcome.success, "message": outcome.message, "results": outcome.to_dict()})

    @app.route("/api/events/search", methods=["GET"], endpoint="api_events_search")
    @login_required
    def api_events_search():
        try:
            names = events.search(request.args.get("term"))
        except Exception:
            return server_error(logger, "Failed to search events.", action="Search Events")
        return jsonify({"success": True, "events": names})

    @app.route("/api/events/participants", methods=["GET"], endpoint="api_event_participants")
    @login_required
    def api_event_participants():
        try:
            rows = events.participants(request.args.get("eventName"))
        except DomainError as e:
            return fail_for(e)
        except Exception:
            return server_error(logger, "Failed to load event participants.", action="View Event Participants")
        return jsonify({"success": True, "participants": [{"uid": p.uid, "name": p.name} for p in rows]})
