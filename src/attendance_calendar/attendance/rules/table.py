"""Ordered status tables shared by cell styling, badges and summary counters.

Order matters: the first matching rule wins, so exact spellings come before
the substring fallbacks.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import BackgroundColor, DotColor, SummaryBucket
from ..model import DisplayStyle, Dot
from .base import LabelRule, StatusRule
from .contains_matcher import AnyMatcher, ContainsMatcher
from .exact_matcher import ExactMatcher

GREEN = BackgroundColor.GREEN
RED = BackgroundColor.RED

LATE_DOT = Dot(DotColor.WHITE)
EARLY_DOT = Dot(DotColor.BLUE)

DEFAULT_STYLE = DisplayStyle(BackgroundColor.NEUTRAL)


def _late_early_style(split_dots: bool) -> DisplayStyle:
    if split_dots:
        return DisplayStyle(GREEN, (LATE_DOT, EARLY_DOT))
    return DisplayStyle(GREEN, (EARLY_DOT,))


def build_display_rules(*, split_late_early_dots: bool = False) -> tuple[StatusRule, ...]:
    """Build the classification table.

    ``split_late_early_dots`` draws a late dot followed by an early-out dot for
    combined statuses instead of the single early-out dot.
    """

    late_early = _late_early_style(split_late_early_dots)
    present = SummaryBucket.PRESENT

    return (
        StatusRule(
            "double_absent",
            AnyMatcher(ExactMatcher("DOUBLE ABSENT", "DOUBLE A"), ContainsMatcher("DOUBLE")),
            DisplayStyle(RED, (Dot(DotColor.BLACK, 2),)),
            SummaryBucket.DOUBLE_ABSENT,
        ),
        StatusRule("absent", ExactMatcher("ABSENT"), DisplayStyle(RED), SummaryBucket.ABSENT),
        StatusRule("present", ExactMatcher("PRESENT"), DisplayStyle(GREEN), present),
        StatusRule("present_late", ExactMatcher("PRESENT LATE"), DisplayStyle(GREEN, (LATE_DOT,)), present),
        StatusRule(
            "present_early_out",
            ExactMatcher("PRESENT EARLY_OUT", "PRESENT E"),
            DisplayStyle(GREEN, (EARLY_DOT,)),
            present,
        ),
        StatusRule("present_late_early_out", ExactMatcher("PRESENT LATE EARLY_OUT", "PRESENT L"), late_early, present),
        StatusRule(
            "half_day",
            ExactMatcher("HALFDAY", "HALF DAY"),
            DisplayStyle(BackgroundColor.YELLOW),
            SummaryBucket.HALF_DAY,
        ),
        StatusRule(
            "miss_in_out",
            ExactMatcher("MISS OUT", "MISS IN"),
            DisplayStyle(BackgroundColor.ORANGE, (Dot(DotColor.BLUE),)),
            SummaryBucket.MISS,
        ),
        StatusRule(
            "miss_pending",
            ExactMatcher("MISS PENDING", "MISS PEND"),
            DisplayStyle(BackgroundColor.MUTED, (Dot(DotColor.GRAY),)),
            SummaryBucket.MISS,
        ),
        StatusRule("leave", ExactMatcher("LEAVE"), DisplayStyle(BackgroundColor.BLUE)),
        StatusRule("weekly_off", ExactMatcher("WEEKLY OFF", "WO"), DisplayStyle(BackgroundColor.PURPLE)),
        # Fallbacks for spellings the backend has not used yet.
        StatusRule("present_late_early_like", ContainsMatcher("PRESENT", "LATE", "EARLY"), late_early, present),
        StatusRule("present_late_like", ContainsMatcher("PRESENT", "LATE"), DisplayStyle(GREEN, (LATE_DOT,)), present),
        StatusRule("present_early_like", ContainsMatcher("PRESENT", "EARLY"), DisplayStyle(GREEN, (EARLY_DOT,)), present),
        StatusRule("present_like", ContainsMatcher("PRESENT"), DisplayStyle(GREEN), present),
        StatusRule("absent_like", ContainsMatcher("ABSENT"), DisplayStyle(RED), SummaryBucket.ABSENT),
        StatusRule("miss_like", ContainsMatcher("MISS"), DisplayStyle(BackgroundColor.ORANGE), SummaryBucket.MISS),
        StatusRule("half_like", ContainsMatcher("HALF"), DisplayStyle(BackgroundColor.YELLOW), SummaryBucket.HALF_DAY),
    )


LABEL_RULES: tuple[LabelRule, ...] = (
    LabelRule(ContainsMatcher("PRESENT"), "P"),
    LabelRule(AnyMatcher(ExactMatcher("ABSENT"), ContainsMatcher("DOUBLE")), "A"),
    LabelRule(ContainsMatcher("HALF"), "HD"),
    LabelRule(ContainsMatcher("MISS"), "M"),
    LabelRule(ExactMatcher("LEAVE"), "L"),
    LabelRule(ExactMatcher("WEEKLY OFF", "WO"), "WO"),
)

DEFAULT_LABEL = "-"


@dataclass(frozen=True)
class LegendEntry:
    title: str
    sample_status: str


# Legend styles are looked up through the classifier.
LEGEND_ENTRIES: tuple[LegendEntry, ...] = (
    LegendEntry("Present", "PRESENT"),
    LegendEntry("Absent", "ABSENT"),
    LegendEntry("Double Absent", "DOUBLE ABSENT"),
    LegendEntry("Half Day", "HALF DAY"),
    LegendEntry("Miss In/Out", "MISS OUT"),
    LegendEntry("Miss Pending", "MISS PENDING"),
    LegendEntry("Leave", "LEAVE"),
    LegendEntry("Weekly Off", "WEEKLY OFF"),
    LegendEntry("Late", "PRESENT LATE"),
    LegendEntry("Early Out", "PRESENT EARLY_OUT"),
)
