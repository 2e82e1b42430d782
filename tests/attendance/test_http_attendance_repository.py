import pytest
import requests

from attendance_calendar.attendance.http_attendance_repository import ApiConfig, HttpAttendanceHistoryRepository
from attendance_calendar.core.exceptions import NotConfiguredError, UpstreamError


class FakeResponse:
    def __init__(self, status_code=200, body=None, invalid_json=False):
        self.status_code = status_code
        self._body = body
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


def _repo(session, base_url="http://hr.local/api/", token="secret"):
    return HttpAttendanceHistoryRepository(ApiConfig(base_url=base_url, token=token, timeout=7), session=session)


def test_get_month_builds_request_and_parses_records():
    session = FakeSession(
        FakeResponse(
            body={
                "records": [
                    {"dt": {"value": "2025-03-01"}, "STATUS": "PRESENT"},
                    {"dt": "2025-03-02", "STATUS": "ABSENT"},
                ],
                "summary": {"present": 5, "total": 2},
            }
        )
    )

    history = _repo(session).get_month("E 100", "2025-03-01")

    url, kwargs = session.calls[0]
    assert url == "http://hr.local/api/attendance/history/E%20100"
    assert kwargs["params"] == {"month": "2025-03-01"}
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["timeout"] == 7
    assert [r.work_date for r in history.records] == ["2025-03-01", "2025-03-02"]
    assert history.reported_summary == {"present": 5, "total": 2}


def test_no_token_means_no_authorization_header():
    session = FakeSession(FakeResponse(body={"records": []}))

    _repo(session, token=None).get_month("E100", "2025-03-01")

    assert "Authorization" not in session.calls[0][1]["headers"]


def test_non_object_records_are_skipped():
    session = FakeSession(FakeResponse(body={"records": [None, "junk", {"dt": "2025-03-03", "STATUS": "WO"}]}))

    history = _repo(session).get_month("E100", "2025-03-01")

    assert len(history.records) == 1
    assert history.reported_summary is None


def test_missing_records_key_is_an_empty_month():
    session = FakeSession(FakeResponse(body={}))

    assert _repo(session).get_month("E100", "2025-03-01").records == ()


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=500, body={"message": "boom"}),
        FakeResponse(status_code=403, body={"message": "Access denied"}),
        FakeResponse(invalid_json=True),
        FakeResponse(body=["not", "an", "object"]),
        FakeResponse(body={"records": "nope"}),
    ],
)
def test_bad_upstream_responses_raise(response):
    with pytest.raises(UpstreamError):
        _repo(FakeSession(response)).get_month("E100", "2025-03-01")


def test_transport_errors_raise_upstream_error():
    session = FakeSession(error=requests.ConnectionError("refused"))

    with pytest.raises(UpstreamError):
        _repo(session).get_month("E100", "2025-03-01")


def test_unconfigured_repository():
    repo = _repo(FakeSession(), base_url="  ")

    assert repo.is_configured() is False
    with pytest.raises(NotConfiguredError):
        repo.get_month("E100", "2025-03-01")


def test_null_records_is_an_empty_month():
    session = FakeSession(FakeResponse(body={"records": None, "summary": {"total": 0}}))

    history = _repo(session).get_month("E100", "2025-03-01")

    assert history.records == ()
    assert history.reported_summary == {"total": 0}
