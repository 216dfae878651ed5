"""Write an Excel backup (Candidates, Points Log, Attendance) to ./backups."""

from __future__ import annotations

import importlib
from pathlib import Path

from config import get_settings_module

from event_manager.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG), pool_size=1, session_backend="memory")

    service = container.backup_service
    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    out_file = out_dir / service.filename()
    out_file.write_bytes(service.export_workbook())
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
