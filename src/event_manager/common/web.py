from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import g, jsonify, redirect, request, session, url_for

from ..core.exceptions import AuthenticationError, DuplicateEntryError, NotFoundError, ValidationError
from .audit import log_failed_action

SESSION_TOKEN_KEY = "token"

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (DuplicateEntryError, 409),
)


def request_data() -> dict[str, Any]:
    """JSON body if present, otherwise the submitted form."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def client_ip() -> Optional[str]:
    return request.remote_addr


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def fail_for(error: Exception):
    for exc_type, status in STATUS_BY_ERROR:
        if isinstance(error, exc_type):
            return fail(str(error), status)
    raise error


def current_username() -> Optional[str]:
    admin = g.get("admin")
    return admin.username if admin else None


def build_login_required(auth_service, logger):
    """Decorator factory bound to the app's auth service.

    API paths answer 401 JSON, page paths redirect to the login page.
    """

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = auth_service.resolve(session.get(SESSION_TOKEN_KEY))
            if identity is None:
                session.pop(SESSION_TOKEN_KEY, None)
                logger.warning("Unauthorized access attempt to %s from IP: %s", request.full_path.rstrip("?"), client_ip())
                if request.path.startswith("/api/"):
                    return fail("Authentication required.", 401)
                return redirect(url_for("login_page"))
            g.admin = identity
            return view(*args, **kwargs)

        return wrapper

    return login_required


def server_error(logger, message: str, *, action: str, details: str = ""):
    """Answer a generic 500; the traceback and context only go to the logs.

    Must be called from inside an ``except`` block.
    """

    username = current_username()
    ip_address = client_ip()
    logger.exception("%s error by %s, IP: %s", action, username or "Unknown user", ip_address)
    log_failed_action(username, f"Attempted {action}", ip_address, f"Failed - {details}" if details else "Failed")
    return fail(message, 500)
