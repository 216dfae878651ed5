from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.audit import log_action, log_failed_action
from ..common.web import build_login_required, client_ip, current_username, fail_for, request_data, server_error
from ..container import Container
from ..core.exceptions import DomainError, NotFoundError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = build_login_required(container.auth_service, logger)
    candidates = container.candidate_service

    @app.route("/api/candidates", methods=["POST"], endpoint="api_create_candidate")
    @login_required
    def api_create_candidate():
        data = request_data()
        name = data.get("name")
        try:
            uid = candidates.create(
                name=name,
                age=data.get("age"),
                phone=data.get("phone"),
                gender=data.get("gender"),
            )
        except DomainError as e:
            log_failed_action(current_username(), "Attempted Create Candidate", client_ip(), f"Failed - Name: {name}, Error: {e}")
            return fail_for(e)
        except Exception:
            return server_error(logger, "Failed to create candidate.", action="Create Candidate", details=f"Name: {name}")

        log_action(current_username(), "Created Candidate", client_ip(), f"UID: {uid}, Name: {str(name).strip()}")
        return jsonify({"success": True, "uid": uid}), 201

    @app.route("/api/candidates", methods=["GET"], endpoint="api_find_candidate")
    @login_required
    def api_find_candidate():
        try:
            detail = candidates.find(request.args.get("searchTerm"))
        except DomainError as e:
            return fail_for(e)
        except Exception:
            return server_error(logger, "Error fetching candidate data.", action="View Candidate")
        return jsonify({"success": True, "data": candidates.detail_to_ui(detail)})

    @app.route("/api/candidates/all", methods=["GET"], endpoint="api_all_candidates")
    @login_required
    def api_all_candidates():
        try:
            rows = candidates.list_all(
                gender=request.args.get("gender"),
                search=request.args.get("search"),
                sort=request.args.get("sort"),
            )
        except DomainError as e:
            return fail_for(e)
        except Exception:
            return server_error(logger, "Error fetching all candidates.", action="View All Candidates")
        return jsonify({"success": True, "data": candidates.summaries_to_ui(rows)})

    @app.route("/api/candidates/<uid>", methods=["DELETE"], endpoint="api_delete_candidate")
    @login_required
    def api_delete_candidate(uid: str):
        try:
            candidates.delete(uid)
        except NotFoundError as e:
            log_failed_action(current_username(), "Attempted Delete Candidate", client_ip(), f"Failed - UID {uid} not found")
            return fail_for(e)
        except DomainError as e:
            return fail_for(e)
        except Exception:
            return server_error(logger, "Failed to delete candidate.", action="Delete Candidate", details=f"UID: {uid}")

        log_action(current_username(), "Deleted Candidate", client_ip(), f"UID: {uid}")
        return jsonify({"success": True, "message": f"Candidate {uid} deleted successfully."})
