import io
from datetime import datetime

import pandas as pd

from event_manager.backup.service import BackupService

from fakes import InMemoryBackup, Ledger


def test_workbook_has_three_sheets_with_all_rows():
    ledger = Ledger()
    uid = ledger.add_candidate("Asha")
    ledger.add_points(uid, 100, "Attendance Day 1", "admin1")
    ledger.attendance.append((uid, 1, ledger.now.date()))

    payload = BackupService(InMemoryBackup(ledger)).export_workbook()
    sheets = pd.read_excel(io.BytesIO(payload), sheet_name=None, engine="openpyxl")

    assert list(sheets) == ["Candidates", "Points Log", "Attendance"]
    assert sheets["Candidates"]["name"].tolist() == ["Asha"]
    assert sheets["Points Log"]["reason"].tolist() == ["Attendance Day 1"]
    assert sheets["Attendance"]["event_day"].tolist() == [1]


def test_empty_tables_still_get_headers():
    payload = BackupService(InMemoryBackup(Ledger())).export_workbook()
    sheets = pd.read_excel(io.BytesIO(payload), sheet_name=None, engine="openpyxl")
    assert list(sheets["Attendance"].columns) == ["attendance_id", "candidate_uid", "event_day", "attended_at"]
    assert sheets["Attendance"].empty


def test_filename():
    assert BackupService.filename(datetime(2026, 3, 14, 9, 5, 7)) == "EventBackup-20260314_090507.xlsx"
