"""Sets of resource IDs split into failed, warning and passed."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _unique(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def _without(ids: Iterable[str], remove: Iterable[str]) -> list[str]:
    excluded = set(remove)
    return [i for i in ids if i not in excluded]


@dataclass
class ResourcesIDs:
    """Unique resource IDs; a resource is only in its most severe list."""

    passed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    warning: list[str] = field(default_factory=list)

    def set_failed(self, ids: Iterable[str]) -> None:
        self.failed = _unique(ids)

    def set_warning(self, ids: Iterable[str]) -> None:
        """Set the warning IDs; call after the failed IDs are set."""
        self.warning = _without(_unique(ids), self.failed)

    def set_passed(self, ids: Iterable[str]) -> None:
        """Set the passed IDs; call after the warning IDs are set."""
        self.passed = _without(_unique(ids), self.failed + self.warning)

    def extend(self, other: ResourcesIDs) -> None:
        """Merge another set of IDs into this one."""
        self.set_failed(self.failed + other.failed)
        self.set_warning(self.warning + other.warning)
        self.set_passed(self.passed + other.passed)

    def all_resources(self) -> list[str]:
        return self.failed + self.warning + self.passed


def percentage(big: int, small: int) -> int:
    """Percentage of ``big`` not taken up by ``small``, truncated; 100 if both are 0."""
    if big == 0:
        return 100 if small == 0 else 0
    return int((big - small) / big * 100)