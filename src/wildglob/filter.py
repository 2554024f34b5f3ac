"""Filtering dictionary entries by a glob on one of their fields."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from wildglob.matcher import WILDCARD, GlobMatcher

if TYPE_CHECKING:
    from wildglob.config import Config

__all__ = ["ALL", "EntryFilter", "filter_entries"]

logger = logging.getLogger(__name__)

# Filter value that disables filtering.
ALL = "all"


class EntryFilter:
    """Keeps entries whose ``field`` value is matched by a glob pattern.

    The pattern is compiled once. Each entry costs exactly one match.
    """

    def __init__(
        self,
        pattern: str,
        field: str = "pos",
        matcher: GlobMatcher | None = None,
    ) -> None:
        self._matcher = matcher or GlobMatcher()
        self._field = field
        self._pattern = self._matcher.compile(pattern)
        self._accept_all = pattern == ALL or pattern == self._matcher.wildcard

    @classmethod
    def from_config(cls, config: Config, field: str = "pos") -> EntryFilter:
        """Build a filter from the configured part-of-speech pattern and wildcard."""
        return cls(config.pos_filter, field=field, matcher=config.matcher())

    @property
    def pattern(self) -> str:
        return self._pattern.source

    @property
    def field(self) -> str:
        return self._field

    def accepts(self, entry: Mapping[str, Any]) -> bool:
        """Return True if the entry's field value is matched by the pattern.

        A missing or None field is tested as the empty string.
        """
        if self._accept_all:
            return True
        value = entry.get(self._field)
        subject = "" if value is None else str(value)
        return self._pattern.matches(subject)

    def apply(self, entries: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
        """Return the accepted entries, preserving input order."""
        total = 0
        kept: list[Mapping[str, Any]] = []
        for entry in entries:
            total += 1
            if self.accepts(entry):
                kept.append(entry)
        logger.debug(
            "Filter %s=%r kept %d of %d entries",
            self._field,
            self._pattern.source,
            len(kept),
            total,
        )
        return kept


def filter_entries(
    pattern: str,
    entries: Iterable[Mapping[str, Any]],
    field: str = "pos",
    wildcard: str = WILDCARD,
) -> list[Mapping[str, Any]]:
    """Filter entries by matching ``pattern`` against each entry's ``field``."""
    return EntryFilter(pattern, field=field, matcher=GlobMatcher(wildcard)).apply(entries)
