from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..calendar_grid.aggregator import CalendarAggregator
from ..calendar_grid.model import CalendarCell, Summary
from ..common.datetime_utils import check_year_month, month_anchor, normalize_date_key, now_local, shift_month
from ..common.validators import require_non_empty
from ..core.constants import MONTH_NAMES, NO_VALUE, WEEKDAY_HEADERS
from ..core.enums import CellState
from ..core.exceptions import NotConfiguredError, NotFoundError, ValidationError
from .classifier import StatusClassifier
from .model import AttendanceHistory
from .repository import AttendanceHistoryRepository


@dataclass(frozen=True)
class MonthView:
    card_no: str
    year: int
    month: int
    cells: list[dict]
    summary: Summary

    @property
    def anchor(self) -> str:
        return month_anchor(self.year, self.month)

    def to_dict(self) -> dict:
        prev_y, prev_m = shift_month(self.year, self.month, -1)
        next_y, next_m = shift_month(self.year, self.month, 1)
        return {
            "card_no": self.card_no,
            "month_anchor": self.anchor,
            "month_name": MONTH_NAMES[self.month - 1],
            "year": self.year,
            "prev_anchor": month_anchor(prev_y, prev_m),
            "next_anchor": month_anchor(next_y, next_m),
            "weekday_headers": list(WEEKDAY_HEADERS),
            "cells": self.cells,
            "summary": self.summary.to_dict(),
        }


class AttendanceCalendarService:
    def __init__(
        self,
        history: AttendanceHistoryRepository,
        *,
        classifier: Optional[StatusClassifier] = None,
        aggregator: Optional[CalendarAggregator] = None,
    ):
        self._history = history
        self._classifier = classifier or StatusClassifier()
        self._aggregator = aggregator or CalendarAggregator(self._classifier)

    def is_configured(self) -> bool:
        return self._history.is_configured()

    def _fetch(self, card_no: str, year: int, month: int) -> AttendanceHistory:
        card_no = require_non_empty(card_no, "Card number")
        check_year_month(year, month)
        if not self._history.is_configured():
            raise NotConfiguredError("Attendance history API is not configured")
        return self._history.get_month(card_no, month_anchor(year, month))

    def get_month_view(self, card_no: str, year: int, month: int, *, today: Optional[date] = None) -> MonthView:
        history = self._fetch(card_no, year, month)
        today = today or now_local().date()

        grid = self._aggregator.build_grid(history.records, year, month, today)
        return MonthView(
            card_no=card_no.strip(),
            year=year,
            month=month,
            cells=[self._cell_to_ui(c, year, month) for c in grid],
            summary=self._aggregator.summarize(history.records),
        )

    def get_record_detail(self, card_no: str, work_date: str) -> dict:
        key = normalize_date_key(work_date)
        if key is None:
            raise ValidationError(f"Invalid date: {work_date!r}")
        year, month = int(key[:4]), int(key[5:7])

        history = self._fetch(card_no, year, month)
        record = self._aggregator.index_by_date(history.records).get(key)
        if record is None:
            raise NotFoundError(f"No attendance record for {key}")

        style = self._classifier.classify(record.status)
        return {
            "date": record.work_date,
            "status": record.status,
            "label": self._classifier.label(record.status),
            "background_hex": style.background_hex,
            "text_hex": style.text_hex,
            "time_in": record.display_time_in,
            "time_out": record.display_time_out,
            "remarks": record.remarks or NO_VALUE,
            "correction_reason": record.correction_reason,
            "branch": record.branch_code or NO_VALUE,
            "entry_type": record.entry_type or NO_VALUE,
        }

    def export_month_rows(self, card_no: str, year: int, month: int) -> list[dict]:
        history = self._fetch(card_no, year, month)
        rows = sorted(
            (r for r in history.records if r.work_date),
            key=lambda r: r.work_date,
        )
        return [
            {
                "work_date": r.work_date,
                "card_no": r.card_number or card_no.strip(),
                "name": r.name or "",
                "status": r.status,
                "label": self._classifier.label(r.status),
                "time_in": r.display_time_in,
                "time_out": r.display_time_out,
                "remarks": r.remarks or "",
                "correction_reason": r.correction_reason or "",
            }
            for r in rows
        ]

    def legend(self) -> list[dict]:
        return self._classifier.legend()

    def _cell_to_ui(self, cell: CalendarCell, year: int, month: int) -> dict:
        if cell.day is None:
            return {"day": None, "date": None, "state": CellState.BLANK.value}

        out = {"day": cell.day, "date": f"{year:04d}-{month:02d}-{cell.day:02d}"}
        # Future days render greyed out even when a record already exists.
        if cell.is_future:
            return {**out, "state": CellState.FUTURE.value}
        if cell.record is None:
            return {**out, "state": CellState.EMPTY.value}

        status = cell.record.status
        return {
            **out,
            "state": CellState.RECORDED.value,
            "status": status,
            "label": self._classifier.label(status),
            "style": self._classifier.classify(status).to_dict(),
        }
