from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..core.enums import SummaryBucket
from .model import DisplayStyle
from .rules.base import LabelRule, StatusRule
from .rules.table import DEFAULT_LABEL, DEFAULT_STYLE, LABEL_RULES, LEGEND_ENTRIES, build_display_rules

log = logging.getLogger(__name__)


def normalize_status(value: Any) -> str:
    """Upper-case and trim a raw status; None becomes ""."""
    if value is None:
        return ""
    return str(value).strip().upper()


class StatusClassifier:
    """Maps raw backend status text to a cell style, a badge and a counter.

    Every lookup is total: unknown or empty statuses end at the neutral
    default and are logged, never raised.
    """

    def __init__(
        self,
        rules: Optional[Sequence[StatusRule]] = None,
        *,
        label_rules: Sequence[LabelRule] = LABEL_RULES,
    ):
        self._rules = tuple(rules) if rules is not None else build_display_rules()
        self._label_rules = tuple(label_rules)

    def match(self, status: Any) -> Optional[StatusRule]:
        s = normalize_status(status)
        for rule in self._rules:
            if rule.matcher.matches(s):
                return rule
        return None

    def classify(self, status: Any) -> DisplayStyle:
        """Cell style for a status; the only lookup that logs unknown statuses."""
        rule = self.match(status)
        if rule:
            return rule.style

        if normalize_status(status):
            log.warning("Unrecognised attendance status %r, using neutral style", status)
        else:
            log.debug("Empty attendance status, using neutral style")
        return DEFAULT_STYLE

    def bucket(self, status: Any) -> Optional[SummaryBucket]:
        rule = self.match(status)
        return rule.bucket if rule else None

    def label(self, status: Any) -> str:
        s = normalize_status(status)
        for rule in self._label_rules:
            if rule.matcher.matches(s):
                return rule.label
        return DEFAULT_LABEL

    def legend(self) -> list[dict]:
        return [
            {"title": entry.title, "label": self.label(entry.sample_status), **self.classify(entry.sample_status).to_dict()}
            for entry in LEGEND_ENTRIES
        ]
