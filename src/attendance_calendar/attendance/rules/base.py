from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import SummaryBucket
from ..model import DisplayStyle


class StatusMatcher(ABC):
    """Decides whether a normalised (upper-cased, trimmed) status fits a rule."""

    @abstractmethod
    def matches(self, status: str) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class StatusRule:
    """One row of the ordered classification table."""

    name: str
    matcher: StatusMatcher
    style: DisplayStyle
    bucket: Optional[SummaryBucket] = None


@dataclass(frozen=True)
class LabelRule:
    matcher: StatusMatcher
    label: str
