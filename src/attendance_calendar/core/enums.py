from __future__ import annotations

from enum import Enum


class BackgroundColor(str, Enum):
    """Calendar cell background tokens."""

    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    ORANGE = "orange"
    BLUE = "blue"
    PURPLE = "purple"
    NEUTRAL = "neutral"
    MUTED = "muted"


class DotColor(str, Enum):
    """Colours of the small badges drawn on a calendar cell."""

    BLACK = "black"
    WHITE = "white"
    BLUE = "blue"
    GRAY = "gray"


class SummaryBucket(str, Enum):
    """Stat-card counter a status contributes to."""

    PRESENT = "present"
    ABSENT = "absent"
    DOUBLE_ABSENT = "double_absent"
    HALF_DAY = "half_day"
    MISS = "miss"


class CellState(str, Enum):
    BLANK = "blank"
    FUTURE = "future"
    EMPTY = "empty"
    RECORDED = "recorded"
