from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from attendance_calendar.attendance.model import AttendanceHistory, AttendanceRecord
from attendance_calendar.container import build_services
from attendance_calendar.core.exceptions import UpstreamError
from attendance_calendar.main import create_app


@dataclass
class InMemoryHistory:
    months: dict[tuple[str, str], list[dict]] = field(default_factory=dict)
    configured: bool = True

    def is_configured(self) -> bool:
        return self.configured

    def get_month(self, card_no: str, month_anchor: str) -> AttendanceHistory:
        rows = self.months.get((card_no, month_anchor), [])
        return AttendanceHistory(records=tuple(AttendanceRecord.from_api(r) for r in rows))


class BrokenHistory:
    def is_configured(self) -> bool:
        return True

    def get_month(self, card_no: str, month_anchor: str) -> AttendanceHistory:
        raise UpstreamError("Attendance history API returned 500")


MARCH = [
    {"dt": "2025-03-01", "STATUS": "PRESENT", "t_in": "09:00", "t_out": "18:00"},
    {"dt": "2025-03-02", "STATUS": "DOUBLE ABSENT"},
    {"dt": "2025-03-03", "STATUS": "Miss Out", "status_remarks": "Forgot, to punch"},
]


def _client(monkeypatch, repo, **kwargs):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(build_services(repo, **kwargs))
    return app.test_client()


@pytest.fixture
def client(monkeypatch):
    return _client(monkeypatch, InMemoryHistory({("E100", "2025-03-01"): MARCH}))


def test_config_endpoint(client):
    res = client.get("/api/attendance/history/config")

    assert res.status_code == 200
    assert res.get_json() == {"configured": True}


def test_month_view(client):
    res = client.get("/api/attendance/history/E100?month=2025-03-01")

    assert res.status_code == 200
    assert "no-store" in res.headers["Cache-Control"]
    data = res.get_json()
    assert data["month_anchor"] == "2025-03-01"
    assert len(data["cells"]) == 37
    assert data["cells"][7]["style"]["dots"][0] == {"color": "black", "hex": "#000000", "count": 2}
    assert data["summary"]["double_absent"] == 1
    assert data["summary"]["not_completed"] == 1
    assert data["summary"]["total"] == 3


def test_bad_month_is_400(client):
    res = client.get("/api/attendance/history/E100?month=March")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_record_detail_and_404(client):
    res = client.get("/api/attendance/history/E100/records/2025-03-01")
    assert res.status_code == 200
    assert res.get_json()["time_in"] == "09:00"

    res = client.get("/api/attendance/history/E100/records/2025-03-15")
    assert res.status_code == 404


def test_legend(client):
    res = client.get("/api/attendance/legend")

    assert res.status_code == 200
    assert res.get_json()[0]["title"] == "Present"


def test_csv_export(client):
    res = client.get("/attendance/history/E100.csv?month=2025-03-01")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "attendance_E100_202503.csv" in res.headers["Content-Disposition"]
    text = res.data.decode("utf-8-sig")
    lines = text.splitlines()
    assert lines[0] == "work_date,card_no,name,status,label,time_in,time_out,remarks,correction_reason"
    assert lines[1].startswith("2025-03-01,E100,,PRESENT,P,09:00,18:00")
    assert '"Forgot, to punch"' in lines[3]


def test_upstream_failure_is_502(monkeypatch):
    client = _client(monkeypatch, BrokenHistory())

    res = client.get("/api/attendance/history/E100?month=2025-03-01")

    assert res.status_code == 502
    assert res.get_json()["message"] == "Failed to fetch attendance history"


def test_not_configured_is_503(monkeypatch):
    client = _client(monkeypatch, InMemoryHistory(configured=False))

    assert client.get("/api/attendance/history/config").get_json() == {"configured": False}
    assert client.get("/api/attendance/history/E100?month=2025-03-01").status_code == 503


def test_split_dots_setting_reaches_cells(monkeypatch):
    repo = InMemoryHistory({("E100", "2025-03-01"): [{"dt": "2025-03-01", "STATUS": "PRESENT LATE EARLY_OUT"}]})
    client = _client(monkeypatch, repo, split_late_early_dots=True)

    data = client.get("/api/attendance/history/E100?month=2025-03-01").get_json()

    assert [d["color"] for d in data["cells"][6]["style"]["dots"]] == ["white", "blue"]


def test_missing_month_uses_local_clock(monkeypatch):
    client = _client(monkeypatch, InMemoryHistory({("E100", "2025-03-01"): MARCH}))

    def fixed():
        return datetime(2025, 3, 2, 9, 0)

    monkeypatch.setattr("attendance_calendar.attendance.controller.now_local", fixed)
    monkeypatch.setattr("attendance_calendar.attendance.service.now_local", fixed)

    data = client.get("/api/attendance/history/E100").get_json()

    assert data["month_anchor"] == "2025-03-01"
    assert data["cells"][7]["state"] == "recorded"
    assert data["cells"][8]["state"] == "future"


def test_csv_filename_is_quoted_and_sanitised(client):
    res = client.get("/attendance/history/E%201%3Bx.csv?month=2025-03-01")

    assert res.status_code == 200
    assert res.headers["Content-Disposition"] == 'attachment; filename="attendance_E_1_x_202503.csv"'
