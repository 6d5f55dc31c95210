"""
Async database access helpers (raw SQL) using asyncpg.

This module creates and closes the connection pool. FastAPI creates it on
startup, hands it to the Chado repository and closes it on shutdown (see
`api/main.py`). The pool is safe for concurrent use by in-flight requests.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings
from .errors import BackendUnavailable

logger = logging.getLogger(__name__)

# Failures that mean "the store could not answer", as opposed to bugs in our code.
BACKEND_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.database_url()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
        command_timeout=settings.command_timeout_s(),
    )
    logger.info(
        "db_pool_created min_size=%s max_size=%s",
        settings.pool_min_size(),
        settings.pool_max_size(),
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_all(pool: asyncpg.Pool, operation: str, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.

    Any driver, connection or timeout failure is re-raised as BackendUnavailable
    tagged with `operation`, so callers can apply their recovery policy.
    """
    try:
        rows = await pool.fetch(sql, *args)
    except BACKEND_ERRORS as e:
        raise BackendUnavailable(operation) from e
    return [_record_to_dict(r) for r in rows]
