"""
Error kinds and the per-operation recovery policy.

Backend failures are handled in one place (`guarded`) instead of ad-hoc
try/except blocks in each service:

| operation  | recovery |
|------------|----------|
| organisms  | EMPTY    |
| so_types   | EMPTY    |
| ref_seqs   | EMPTY    |
| features   | EMPTY    |
| sequence   | RAISE (SEQUENCE_ERROR_POLICY=empty to recover) |
"""

from __future__ import annotations

import enum
import logging
from typing import Awaitable, Callable, TypeVar

from . import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InvalidRange(ValueError):
    """
    Requested interval ends before it starts.
    """

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"Invalid range: end ({end}) precedes start ({start}).")
        self.start = start
        self.end = end


class BackendUnavailable(RuntimeError):
    """
    The Chado database could not be reached or a query failed.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"Backend query failed: {operation}")
        self.operation = operation


class Recovery(str, enum.Enum):
    EMPTY = "empty"
    RAISE = "raise"


RECOVERY_POLICY: dict[str, Recovery] = {
    "organisms": Recovery.EMPTY,
    "so_types": Recovery.EMPTY,
    "ref_seqs": Recovery.EMPTY,
    "features": Recovery.EMPTY,
    "sequence": Recovery.RAISE,
}


def recovery_for(operation: str) -> Recovery:
    if operation == "sequence":
        try:
            return Recovery(settings.sequence_error_policy())
        except ValueError:
            return RECOVERY_POLICY["sequence"]
    return RECOVERY_POLICY.get(operation, Recovery.RAISE)


async def guarded(operation: str, fetch: Callable[[], Awaitable[list[T]]], **context: object) -> list[T]:
    """
    Run `fetch` and apply the recovery policy of `operation` on BackendUnavailable.

    EMPTY logs the failure and returns []; RAISE lets it propagate to the
    exception handler (HTTP 500).
    """
    try:
        return await fetch()
    except BackendUnavailable:
        if recovery_for(operation) is Recovery.RAISE:
            raise
        details = " ".join(f"{k}={v}" for k, v in context.items())
        logger.exception("backend_error_recovered operation=%s %s", operation, details)
        return []
