from __future__ import annotations

import logging
import urllib.parse
from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT
from ..core.exceptions import NotConfiguredError, UpstreamError
from .model import AttendanceHistory, AttendanceRecord
from .repository import AttendanceHistoryRepository

log = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    token: Optional[str] = None
    timeout: float = DEFAULT_HTTP_TIMEOUT


class HttpAttendanceHistoryRepository(AttendanceHistoryRepository):
    """Reads attendance history from the external REST API."""

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    def is_configured(self) -> bool:
        return bool((self._config.base_url or "").strip())

    def _headers(self) -> dict:
        hdr = {"Accept": "application/json"}
        if self._config.token:
            hdr["Authorization"] = f"Bearer {self._config.token}"
        return hdr

    def get_month(self, card_no: str, month_anchor: str) -> AttendanceHistory:
        if not self.is_configured():
            raise NotConfiguredError("Attendance history API is not configured")

        base = self._config.base_url.rstrip("/")
        url = f"{base}/attendance/history/{urllib.parse.quote(card_no, safe='')}"
        try:
            res = self._session.get(
                url,
                params={"month": month_anchor},
                headers=self._headers(),
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Attendance history request failed: {e}") from e

        if not res.ok:
            raise UpstreamError(f"Attendance history API returned {res.status_code}")

        try:
            body = res.json()
        except ValueError as e:
            raise UpstreamError("Attendance history API returned invalid JSON") from e

        if not isinstance(body, dict):
            raise UpstreamError("Attendance history API returned an unexpected payload")

        # a null records field is an empty month
        items = body.get("records") or []
        if not isinstance(items, list):
            raise UpstreamError("Attendance history API returned an unexpected payload")

        records = []
        for item in items:
            if not isinstance(item, dict):
                log.warning("Skipping non-object attendance record for card %s: %r", card_no, item)
                continue
            records.append(AttendanceRecord.from_api(item))

        summary = body.get("summary")
        log.info("Attendance history card=%s month=%s records=%d", card_no, month_anchor, len(records))
        return AttendanceHistory(records=tuple(records), reported_summary=summary if isinstance(summary, dict) else None)
