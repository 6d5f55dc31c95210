"""
Coordinate parsing and range validation for feature requests.

Intervals are half-open, [start, end). Parsing is permissive: anything that
is not a plain (optionally signed) decimal integer counts as 0.
"""

from __future__ import annotations

import re

from core.errors import InvalidRange

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_coordinate(raw: str | None) -> int:
    text = raw or ""
    if not _INT_RE.fullmatch(text):
        return 0
    return int(text)


def validate_range(start: int, end: int) -> tuple[int, int]:
    """
    Reject end < start. start == end is an empty range, not an error.

    No upper bound is checked here; the backend returns an empty or
    truncated result for coordinates past the end of a sequence.
    """
    if end < start:
        raise InvalidRange(start, end)
    return start, end


def is_sequence_request(raw: str | None) -> bool:
    return raw == "true"
