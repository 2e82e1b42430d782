from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class CalendarCell:
    """One slot of the 7-column month grid; ``day`` is None for padding."""

    day: Optional[int]
    record: Optional[AttendanceRecord] = None
    is_future: bool = False


@dataclass(frozen=True)
class Summary:
    present: int = 0
    absent: int = 0
    double_absent: int = 0
    half_day: int = 0
    miss: int = 0
    total: int = 0

    @property
    def not_completed(self) -> int:
        """Absent and double absent combined, as the stat cards show it."""
        return self.absent + self.double_absent

    def to_dict(self) -> dict:
        return {**asdict(self), "not_completed": self.not_completed}
