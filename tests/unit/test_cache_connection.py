import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import psycopg
import pytest

from analysis_client.cache.connection import SCHEMA_STATEMENTS, CacheDatabase, build_conninfo
from analysis_client.config.settings import Settings
from analysis_client.errors.exceptions import DatabaseError


def _mock_pool() -> tuple[MagicMock, MagicMock]:
    mock_conn = MagicMock()
    mock_conn.execute = AsyncMock()
    mock_conn.commit = AsyncMock()
    mock_pool = MagicMock()
    mock_pool.open = AsyncMock()
    mock_pool.close = AsyncMock()
    mock_pool.connection.return_value.__aenter__ = AsyncMock(return_value=mock_conn)
    mock_pool.connection.return_value.__aexit__ = AsyncMock(return_value=False)
    return mock_pool, mock_conn


class TestConninfo:
    def test_builds_from_settings(self) -> None:
        settings = Settings(db_host="db", db_port=6543, db_database="d", db_username="u", db_password="p")
        assert build_conninfo(settings) == "host=db port=6543 dbname=d user=u password=p"


class TestLazyOpen:
    @patch("analysis_client.cache.connection.AsyncConnectionPool")
    def test_not_opened_until_first_use(self, mock_pool_cls: MagicMock) -> None:
        database = CacheDatabase("host=x")
        assert database.is_open is False
        mock_pool_cls.assert_not_called()

    @patch("analysis_client.cache.connection.AsyncConnectionPool")
    def test_opens_once_and_creates_schema(self, mock_pool_cls: MagicMock) -> None:
        mock_pool, mock_conn = _mock_pool()
        mock_pool_cls.return_value = mock_pool
        database = CacheDatabase("host=x")

        async def scenario() -> None:
            await database.open()
            await database.open()

        asyncio.run(scenario())

        mock_pool_cls.assert_called_once()
        mock_pool.open.assert_awaited_once()
        assert mock_conn.execute.await_count == len(SCHEMA_STATEMENTS)
        assert database.is_open is True

    @patch("analysis_client.cache.connection.AsyncConnectionPool")
    def test_concurrent_first_use_opens_once(self, mock_pool_cls: MagicMock) -> None:
        mock_pool, _conn = _mock_pool()
        mock_pool_cls.return_value = mock_pool
        database = CacheDatabase("host=x")

        async def scenario() -> None:
            await asyncio.gather(database.open(), database.open(), database.open())

        asyncio.run(scenario())

        mock_pool_cls.assert_called_once()

    @patch("analysis_client.cache.connection.AsyncConnectionPool")
    def test_open_failure_is_connection_error(self, mock_pool_cls: MagicMock) -> None:
        mock_pool, _conn = _mock_pool()
        mock_pool.open.side_effect = psycopg.OperationalError("refused")
        mock_pool_cls.return_value = mock_pool
        database = CacheDatabase("host=x")

        with pytest.raises(DatabaseError) as exc_info:
            asyncio.run(database.open())

        assert exc_info.value.code == "connectionFailed"
        mock_pool.close.assert_awaited_once()
        assert database.is_open is False


class TestConnection:
    @patch("analysis_client.cache.connection.AsyncConnectionPool")
    def test_error_inside_block_is_transaction_error(self, mock_pool_cls: MagicMock) -> None:
        mock_pool, _conn = _mock_pool()
        mock_pool_cls.return_value = mock_pool
        database = CacheDatabase("host=x")

        async def scenario() -> None:
            async with database.connection():
                raise psycopg.DataError("bad value")

        with pytest.raises(DatabaseError) as exc_info:
            asyncio.run(scenario())

        assert exc_info.value.code == "transactionFailed"

    @patch("analysis_client.cache.connection.AsyncConnectionPool")
    def test_close_releases_pool(self, mock_pool_cls: MagicMock) -> None:
        mock_pool, _conn = _mock_pool()
        mock_pool_cls.return_value = mock_pool
        database = CacheDatabase("host=x")

        async def scenario() -> None:
            await database.open()
            await database.close()
            await database.close()

        asyncio.run(scenario())

        mock_pool.close.assert_awaited_once()
        assert database.is_open is False
