from __future__ import annotations

from typing import Protocol

from .model import AttendanceHistory


class AttendanceHistoryRepository(Protocol):
    def is_configured(self) -> bool:
        raise NotImplementedError

    def get_month(self, card_no: str, month_anchor: str) -> AttendanceHistory:
        """Records of one member for the month starting at ``month_anchor`` (YYYY-MM-01)."""

        raise NotImplementedError
