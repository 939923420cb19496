import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

from analysis_client.config.settings import Settings
from analysis_client.errors.exceptions import DatabaseError
from analysis_client.logging.logger import Log

SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS ui_slots (
        name TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS rendered_documents (
        name TEXT PRIMARY KEY,
        markup TEXT NOT NULL,
        saved_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
    """,
)


def build_conninfo(settings: Settings) -> str:
    return (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )


class CacheDatabase:
    """Lazily opened connection pool shared by both cache tiers.

    The pool is created and the schema ensured on first use; later calls reuse
    the same pool. ``CREATE TABLE IF NOT EXISTS`` keeps repeated opens no-ops.
    """

    def __init__(self, conninfo: str, timeout_seconds: float = 5.0) -> None:
        self._conninfo = conninfo
        self._timeout_seconds = timeout_seconds
        self._pool: AsyncConnectionPool | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "CacheDatabase":
        return cls(build_conninfo(settings), settings.cache_connect_timeout_seconds)

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    async def open(self) -> AsyncConnectionPool:
        """Return the pool, opening it and creating the schema on first call.

        Raises:
            DatabaseError: ``connectionFailed`` if the server is unreachable.
        """
        if self._pool is not None:
            return self._pool
        async with self._lock:
            if self._pool is None:
                self._pool = await self._open_pool()
        return self._pool

    async def _open_pool(self) -> AsyncConnectionPool:
        pool = AsyncConnectionPool(
            self._conninfo,
            min_size=1,
            max_size=4,
            timeout=self._timeout_seconds,
            open=False,
        )
        try:
            await pool.open(wait=True, timeout=self._timeout_seconds)
            async with pool.connection() as conn:
                for statement in SCHEMA_STATEMENTS:
                    await conn.execute(statement)
                await conn.commit()
        except psycopg.Error as exc:
            await pool.close()
            raise DatabaseError("connectionFailed", exc) from exc
        Log.info("Cache database opened")
        return pool

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[psycopg.AsyncConnection[Any]]:
        """Yield a pooled connection. Caller commits.

        Raises:
            DatabaseError: ``connectionFailed`` when no connection can be
                obtained, ``transactionFailed`` for errors inside the block.
        """
        pool = await self.open()
        try:
            async with pool.connection() as conn:
                yield conn
        except PoolTimeout as exc:
            raise DatabaseError("connectionFailed", exc) from exc
        except psycopg.Error as exc:
            raise DatabaseError("transactionFailed", exc) from exc

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
