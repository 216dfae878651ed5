from __future__ import annotations

import io
from datetime import datetime

import pandas as pd

from ..common.datetime_utils import now_local
from .repository import BackupRepository

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# sheet name, table, columns
SHEETS = (
    ("Candidates", "candidates", ["uid", "name", "age", "phone", "gender", "created_at"]),
    ("Points Log", "points_log", ["log_id", "candidate_uid", "points", "reason", "admin_username", "awarded_at"]),
    ("Attendance", "attendance", ["attendance_id", "candidate_uid", "event_day", "attended_at"]),
)


class BackupService:
    """Spreadsheet export of the three data tables."""

    def __init__(self, backup: BackupRepository):
        self._backup = backup

    def export_workbook(self) -> bytes:
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            for sheet_name, table, columns in SHEETS:
                rows = self._backup.dump_table(table)
                df = pd.DataFrame(list(rows), columns=columns)
                df.to_excel(writer, index=False, sheet_name=sheet_name)
                worksheet = writer.sheets[sheet_name]
                for idx, column in enumerate(columns):
                    letter = worksheet.cell(row=1, column=idx + 1).column_letter
                    worksheet.column_dimensions[letter].width = 10 if column.endswith("id") else 25
        return out.getvalue()

    @staticmethod
    def filename(now: datetime | None = None) -> str:
        now = now or now_local()
        return f"EventBackup-{now.strftime('%Y%m%d_%H%M%S')}.xlsx"
