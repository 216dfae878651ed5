"""Action log for administrator activity.

Lines look like ``<timestamp> [INFO]: Admin: admin1, IP: 10.0.0.5, Action: Added Points, Details: ...``
and go both to the console and to a persistent log file.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"

audit_logger = logging.getLogger("event_manager.audit")


def configure_logging(log_file: str | Path | None = "action.log", *, level: str | int = "INFO") -> None:
    """Install console + file handlers on the package logger (idempotent)."""

    root = logging.getLogger("event_manager")
    root.setLevel(level)
    if getattr(root, "_event_manager_configured", False):
        return

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root._event_manager_configured = True  # type: ignore[attr-defined]


def format_action(username: str | None, action: str, ip_address: str | None, details: str = "") -> str:
    message = f"Admin: {username or 'Unknown user'}, IP: {ip_address or '-'}, Action: {action}"
    if details:
        message += f", Details: {details}"
    return message


def log_action(username: str | None, action: str, ip_address: str | None, details: str = "") -> None:
    audit_logger.info(format_action(username, action, ip_address, details))


def log_failed_action(username: str | None, action: str, ip_address: str | None, details: str = "") -> None:
    audit_logger.warning(format_action(username, action, ip_address, details))
