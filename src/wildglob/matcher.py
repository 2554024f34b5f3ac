"""Wildcard glob matching over plain strings."""

from __future__ import annotations

from dataclasses import dataclass, field

from wildglob.errors import InvalidWildcardError

__all__ = ["WILDCARD", "Pattern", "GlobMatcher", "compile_pattern", "match_pattern"]

WILDCARD = "*"


@dataclass(frozen=True)
class Pattern:
    """A glob pattern split into its literal segments.

    A pattern with ``k`` wildcard tokens has ``k + 1`` segments, some of
    which may be empty (leading, trailing or consecutive wildcards).
    Segments and the leading/trailing flags are derived from ``source``
    and ``wildcard`` on construction.

    Raises:
        InvalidWildcardError: If ``wildcard`` is empty.
    """

    source: str
    wildcard: str = WILDCARD
    segments: tuple[str, ...] = field(init=False)
    leading_wildcard: bool = field(init=False)
    trailing_wildcard: bool = field(init=False)

    def __post_init__(self) -> None:
        if not self.wildcard:
            raise InvalidWildcardError(self.wildcard)
        segments = tuple(self.source.split(self.wildcard))
        # Flags follow the split, since a multi-character token can overlap itself.
        has_wildcard = len(segments) > 1
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "leading_wildcard", has_wildcard and segments[0] == "")
        object.__setattr__(self, "trailing_wildcard", has_wildcard and segments[-1] == "")

    def matches(self, subject: str) -> bool:
        """Return True if the whole subject is matched by this pattern.

        Segments are consumed left to right at their leftmost occurrence.
        The walk never backtracks: all wildcards are equivalent and
        unconstrained, so the leftmost occurrence is never a worse choice.

        Args:
            subject: The string to test.

        Returns:
            True if the subject matches, False otherwise.
        """
        if self.source == "":
            return subject == ""
        if self.source == self.wildcard:
            return True
        if len(self.segments) == 1:
            return subject == self.source

        pos = 0
        last = len(self.segments) - 1
        for i in range(last):
            segment = self.segments[i]
            if i == 0:
                # First segment is anchored unless the pattern opens with a wildcard.
                if not self.leading_wildcard and not subject.startswith(segment):
                    return False
                pos = len(segment)
                continue
            idx = subject.find(segment, pos)
            if idx == -1:
                return False
            pos = idx + len(segment)

        if self.trailing_wildcard:
            return True
        return subject[pos:].endswith(self.segments[last])


def compile_pattern(pattern: str, wildcard: str = WILDCARD) -> Pattern:
    """Split a pattern on the wildcard token.

    Raises:
        InvalidWildcardError: If ``wildcard`` is empty.
    """
    return Pattern(source=pattern, wildcard=wildcard)


def match_pattern(pattern: str, subject: str, wildcard: str = WILDCARD) -> bool:
    """Match a subject string against a wildcard pattern.

    Supports ``*`` (or the given token) as a wildcard that matches any run
    of zero or more characters. There is no escaping: every occurrence of
    the token in ``pattern`` is a wildcard.

    Args:
        pattern: The pattern to match against. May contain wildcards.
        subject: The string to test.
        wildcard: The wildcard token.

    Returns:
        True if the subject matches the pattern in its entirety, False otherwise.
    """
    return compile_pattern(pattern, wildcard).matches(subject)


class GlobMatcher:
    """Stateless matcher bound to a single wildcard token.

    Thread safety:
        Immutable after construction. Safe to share between threads.
    """

    __slots__ = ("_wildcard",)

    def __init__(self, wildcard: str = WILDCARD) -> None:
        if not wildcard:
            raise InvalidWildcardError(wildcard)
        self._wildcard = wildcard

    @property
    def wildcard(self) -> str:
        """The token treated as a wildcard."""
        return self._wildcard

    def compile(self, pattern: str) -> Pattern:
        return compile_pattern(pattern, self._wildcard)

    def matches(self, pattern: str, subject: str) -> bool:
        """Return True if ``subject`` is matched by ``pattern`` in its entirety."""
        return self.compile(pattern).matches(subject)

    def __repr__(self) -> str:
        return f"GlobMatcher(wildcard={self._wildcard!r})"
