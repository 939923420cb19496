from pathlib import Path

import pytest
from fakes import SAMPLE_DATA, FakeChunkedEngine, FakeSingleShotEngine

from analysis_client.cache.memory import MemoryDocumentStore, MemorySlotStore
from analysis_client.cache.persistent_cache import PersistentCache
from analysis_client.config.settings import Settings
from analysis_client.validation.models import FileHandle


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        cache_backend="memory",
        default_locale="en",
        options_debounce_seconds=0.05,
    )


@pytest.fixture()
def cache() -> PersistentCache:
    return PersistentCache(MemorySlotStore(), MemoryDocumentStore())


@pytest.fixture()
def chunked_engine() -> FakeChunkedEngine:
    return FakeChunkedEngine(
        [
            "# Analysis\n\n- sessions: 2\n",
            "## Session A\n\nfirst\n",
            "## Session B\n\nsecond\n",
            "## Timings\n\n- total: 1ms\n",
        ]
    )


@pytest.fixture()
def single_shot_engine() -> FakeSingleShotEngine:
    return FakeSingleShotEngine("## Summary\n\nall good\n")


@pytest.fixture()
def data_file(tmp_path: Path) -> FileHandle:
    path = tmp_path / "cstimer_20250101_120000.txt"
    path.write_bytes(SAMPLE_DATA)
    return FileHandle.from_path(path)
