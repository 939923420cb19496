import os
from collections.abc import Callable, Generator

import psycopg
import pytest

from analysis_client.cache.connection import SCHEMA_STATEMENTS, CacheDatabase, build_conninfo
from analysis_client.cache.persistent_cache import PersistentCache
from analysis_client.cache.repositories.document_repository import DocumentRepository
from analysis_client.cache.repositories.slot_repository import SlotRepository
from analysis_client.config.settings import Settings

TEST_DOCUMENT_SLOT = "markdown_test"
TEST_SLOT_PREFIX = "test:"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "analysis_client_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_conninfo(test_settings: Settings) -> Generator[str, None, None]:
    conninfo = build_conninfo(test_settings)
    try:
        with psycopg.connect(conninfo, connect_timeout=3) as conn:
            for statement in SCHEMA_STATEMENTS:
                conn.execute(statement)
    except psycopg.Error as e:
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a scratch database"
        )
    yield conninfo


@pytest.fixture
def database(integration_conninfo: str) -> CacheDatabase:
    """Fresh, unopened CacheDatabase. Each test opens and closes it inside its own event loop."""
    return CacheDatabase(integration_conninfo, timeout_seconds=3)


@pytest.fixture
def slot_key() -> Callable[[str], str]:
    """Namespace slot names so cleanup only removes rows written by tests."""

    def make(name: str) -> str:
        return f"{TEST_SLOT_PREFIX}{name}"

    return make


@pytest.fixture
def make_cache(integration_conninfo: str) -> Callable[[], PersistentCache]:
    """Build a PersistentCache on its own CacheDatabase, writing to the test document slot."""

    def make() -> PersistentCache:
        database = CacheDatabase(integration_conninfo, timeout_seconds=3)
        return PersistentCache(
            SlotRepository(database), DocumentRepository(database, TEST_DOCUMENT_SLOT)
        )

    return make


@pytest.fixture(autouse=True)
def integration_cleanup(integration_conninfo: str) -> Generator[None, None, None]:
    yield
    with psycopg.connect(integration_conninfo) as conn:
        conn.execute("DELETE FROM ui_slots WHERE name LIKE %s", (f"{TEST_SLOT_PREFIX}%",))
        conn.execute("DELETE FROM rendered_documents WHERE name = %s", (TEST_DOCUMENT_SLOT,))
