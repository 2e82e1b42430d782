from __future__ import annotations

from .base import StatusMatcher


class ExactMatcher(StatusMatcher):
    """Status equals one of the given spellings."""

    def __init__(self, *values: str):
        self.values = frozenset(values)

    def matches(self, status: str) -> bool:
        return status in self.values

    def __repr__(self) -> str:
        return f"ExactMatcher({', '.join(sorted(self.values))})"
