from __future__ import annotations

import logging

from flask import Flask, jsonify, redirect, render_template, session, url_for

from ..common.web import SESSION_TOKEN_KEY, client_ip, fail, request_data, server_error
from ..container import Container
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = request_data()
        username = str(data.get("username") or "")
        password = str(data.get("password") or "")

        try:
            token, _ = auth.login(
                username,
                password,
                ip_address=client_ip(),
                previous_token=session.get(SESSION_TOKEN_KEY),
            )
        except AuthenticationError as e:
            return fail(str(e), 401)
        except Exception:
            return server_error(logger, "Server error during login.", action="Login", details=f"Username: {username}")

        session.clear()
        session.permanent = True
        session[SESSION_TOKEN_KEY] = token
        return jsonify({"success": True, "message": "Login successful!"})

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        token = session.get(SESSION_TOKEN_KEY)
        try:
            auth.logout(token, ip_address=client_ip())
        except Exception:
            return server_error(logger, "Logout failed.", action="Logout")
        finally:
            session.clear()
        return jsonify({"success": True, "message": "Logged out successfully."})

    @app.route("/api/auth/status", methods=["GET"], endpoint="api_auth_status")
    def api_auth_status():
        try:
            identity = auth.resolve(session.get(SESSION_TOKEN_KEY))
        except Exception:
            return server_error(logger, "Could not check login status.", action="Check Login Status")
        if identity is None:
            return jsonify({"loggedIn": False})
        return jsonify({"loggedIn": True, "username": identity.username})

    @app.route("/Login", methods=["GET"], endpoint="login_page")
    def login_page():
        if auth.resolve(session.get(SESSION_TOKEN_KEY)) is not None:
            return redirect(url_for("dashboard_page"))
        return render_template("login.html")
