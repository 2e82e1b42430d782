from __future__ import annotations

from .base import StatusMatcher


class ContainsMatcher(StatusMatcher):
    """Status contains every given fragment."""

    def __init__(self, *fragments: str):
        self.fragments = tuple(fragments)

    def matches(self, status: str) -> bool:
        return all(fragment in status for fragment in self.fragments)

    def __repr__(self) -> str:
        return f"ContainsMatcher({', '.join(self.fragments)})"


class AnyMatcher(StatusMatcher):
    """Matches when any of the wrapped matchers does."""

    def __init__(self, *matchers: StatusMatcher):
        self.matchers = tuple(matchers)

    def matches(self, status: str) -> bool:
        return any(m.matches(status) for m in self.matchers)
