from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.datetime_utils import normalize_date_key
from ..common.validators import optional_text
from ..core.constants import BACKGROUND_HEX, DARK_TEXT_HEX, DOT_HEX, LIGHT_TEXT_HEX, NO_VALUE
from ..core.enums import BackgroundColor, DotColor


def _first(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None and value != "":
            return value
    return None


@dataclass(frozen=True)
class AttendanceRecord:
    """One person-day as returned by the attendance history API."""

    work_date: Optional[str]
    status: str = ""
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    result_time_in: Optional[str] = None
    result_time_out: Optional[str] = None
    remarks: Optional[str] = None
    correction_reason: Optional[str] = None
    entry_type: Optional[str] = None
    card_number: Optional[str] = None
    name: Optional[str] = None
    branch_code: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "AttendanceRecord":
        """Build a record from either the camelCase or the warehouse field names."""

        status = _first(payload, "status", "STATUS")
        return cls(
            work_date=normalize_date_key(_first(payload, "date", "dt")),
            status="" if status is None else str(status),
            time_in=optional_text(_first(payload, "timeIn", "t_in")),
            time_out=optional_text(_first(payload, "timeOut", "t_out")),
            result_time_in=optional_text(payload.get("result_t_in")),
            result_time_out=optional_text(payload.get("result_t_out")),
            remarks=optional_text(_first(payload, "remarks", "status_remarks")),
            correction_reason=optional_text(_first(payload, "correctionReason", "CORRECTION_REASON")),
            entry_type=optional_text(_first(payload, "entryType", "entry_type")),
            card_number=optional_text(_first(payload, "cardNumber", "card_no", "CARD_NO")),
            name=optional_text(_first(payload, "name", "Name")),
            branch_code=optional_text(_first(payload, "branch", "branch_code")),
        )

    @property
    def display_time_in(self) -> str:
        return self.result_time_in or self.time_in or NO_VALUE

    @property
    def display_time_out(self) -> str:
        return self.result_time_out or self.time_out or NO_VALUE


@dataclass(frozen=True)
class AttendanceHistory:
    """A month of records for one member.

    ``reported_summary`` is whatever the API precomputed; it is kept for
    reference only, counters are always recomputed from ``records``.
    """

    records: tuple[AttendanceRecord, ...] = ()
    reported_summary: Optional[dict] = None


@dataclass(frozen=True)
class Dot:
    color: DotColor
    count: int = 1

    @property
    def hex(self) -> str:
        return DOT_HEX[self.color]


@dataclass(frozen=True)
class DisplayStyle:
    background: BackgroundColor
    dots: tuple[Dot, ...] = field(default_factory=tuple)

    @property
    def background_hex(self) -> str:
        return BACKGROUND_HEX[self.background]

    @property
    def text_hex(self) -> str:
        # dark text on white cells
        return DARK_TEXT_HEX if self.background_hex == "#ffffff" else LIGHT_TEXT_HEX

    def expanded_dots(self) -> list[str]:
        return [dot.hex for dot in self.dots for _ in range(dot.count)]

    def to_dict(self) -> dict:
        return {
            "background": self.background.value,
            "background_hex": self.background_hex,
            "text_hex": self.text_hex,
            "dots": [{"color": d.color.value, "hex": d.hex, "count": d.count} for d in self.dots],
        }
