from __future__ import annotations

from collections import Counter
from datetime import date, datetime
from typing import Iterable, Optional

from ..attendance.classifier import StatusClassifier
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import as_date, days_in_month, leading_blanks
from ..core.constants import DATE_FORMAT
from ..core.enums import SummaryBucket
from .model import CalendarCell, Summary


class CalendarAggregator:
    """Builds the month grid and stat counters from one member's records.

    Holds no state besides the classifier, so it is safe to share.
    """

    def __init__(self, classifier: Optional[StatusClassifier] = None):
        self._classifier = classifier or StatusClassifier()

    @staticmethod
    def index_by_date(records: Iterable[AttendanceRecord]) -> dict[str, AttendanceRecord]:
        by_date: dict[str, AttendanceRecord] = {}
        for r in records:
            if r.work_date:
                by_date[r.work_date] = r
        return by_date

    def build_grid(
        self,
        records: Iterable[AttendanceRecord],
        year: int,
        month: int,
        today: date | datetime,
    ) -> list[CalendarCell]:
        """Leading blanks (Sunday-first week) followed by one cell per day.

        ``month`` is 1..12 as in ``datetime.date``; January is 1, not 0.

        No trailing padding is added after the last day.
        """

        by_date = self.index_by_date(records)
        today = as_date(today)

        cells = [CalendarCell(day=None) for _ in range(leading_blanks(year, month))]
        for day in range(1, days_in_month(year, month) + 1):
            cell_date = date(year, month, day)
            cells.append(
                CalendarCell(
                    day=day,
                    record=by_date.get(cell_date.strftime(DATE_FORMAT)),
                    is_future=cell_date > today,
                )
            )
        return cells

    def summarize(self, records: Iterable[AttendanceRecord]) -> Summary:
        counts: Counter = Counter()
        total = 0
        for r in records:
            total += 1
            bucket = self._classifier.bucket(r.status)
            if bucket is not None:
                counts[bucket] += 1

        return Summary(
            present=counts[SummaryBucket.PRESENT],
            absent=counts[SummaryBucket.ABSENT],
            double_absent=counts[SummaryBucket.DOUBLE_ABSENT],
            half_day=counts[SummaryBucket.HALF_DAY],
            miss=counts[SummaryBucket.MISS],
            total=total,
        )
