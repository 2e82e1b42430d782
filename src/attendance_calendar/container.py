from __future__ import annotations

from dataclasses import dataclass

from .attendance.classifier import StatusClassifier
from .attendance.http_attendance_repository import ApiConfig, HttpAttendanceHistoryRepository
from .attendance.repository import AttendanceHistoryRepository
from .attendance.rules.table import build_display_rules
from .attendance.service import AttendanceCalendarService
from .calendar_grid.aggregator import CalendarAggregator
from .core.constants import DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class Container:
    history_repo: AttendanceHistoryRepository

    classifier: StatusClassifier
    aggregator: CalendarAggregator
    calendar_service: AttendanceCalendarService


def build_services(history_repo: AttendanceHistoryRepository, *, split_late_early_dots: bool = False) -> Container:
    classifier = StatusClassifier(build_display_rules(split_late_early_dots=split_late_early_dots))
    aggregator = CalendarAggregator(classifier)
    calendar_service = AttendanceCalendarService(history_repo, classifier=classifier, aggregator=aggregator)

    return Container(
        history_repo=history_repo,
        classifier=classifier,
        aggregator=aggregator,
        calendar_service=calendar_service,
    )


def build_container(*, api_config: dict, split_late_early_dots: bool = False) -> Container:
    config = ApiConfig(
        base_url=str(api_config.get("base_url") or ""),
        token=api_config.get("token") or None,
        timeout=float(api_config.get("timeout", DEFAULT_HTTP_TIMEOUT)),
    )
    return build_services(HttpAttendanceHistoryRepository(config), split_late_early_dots=split_late_early_dots)
