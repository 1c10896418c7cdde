"""
Glob patterns for pool names.

Supports '?' (exactly one character) and '*' (any number of characters),
like shell globbing. There is no escape character; everything else
matches literally.
"""

import re
from typing import Iterable, List

from poolselect.interfaces import PoolCandidate


def is_glob(s: str) -> bool:
    """True if s contains a wildcard."""
    return "*" in s or "?" in s


class Glob:
    """Shell-like wildcard pattern."""

    def __init__(self, pattern: str):
        self._pattern = pattern
        self._compiled = None

    @property
    def pattern(self) -> str:
        return self._pattern

    def to_pattern(self) -> "re.Pattern":
        if self._compiled is None:
            parts = []
            for char in self._pattern:
                if char == "?":
                    parts.append(".")
                elif char == "*":
                    parts.append(".*")
                else:
                    parts.append(re.escape(char))
            self._compiled = re.compile("".join(parts), re.DOTALL)
        return self._compiled

    def matches(self, s: str) -> bool:
        return self.to_pattern().fullmatch(s) is not None

    def __repr__(self) -> str:
        return f"Glob({self._pattern!r})"

    def __str__(self) -> str:
        return self._pattern


def filter_candidates(candidates: Iterable[PoolCandidate], pattern: str) -> List[PoolCandidate]:
    """Candidates whose name matches pattern, in input order."""
    glob = Glob(pattern)
    return [c for c in candidates if glob.matches(c.name)]
