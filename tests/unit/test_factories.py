import pytest

from analysis_client.cache.factory import CacheFactory
from analysis_client.cache.memory import MemoryDocumentStore, MemorySlotStore
from analysis_client.cache.persistent_cache import PersistentCache
from analysis_client.cache.repositories.document_repository import DocumentRepository
from analysis_client.cache.repositories.slot_repository import SlotRepository
from analysis_client.config.settings import Settings
from analysis_client.engine.example_engine import ExampleEngine
from analysis_client.engine.factory import EngineFactory
from analysis_client.engine.markdown_renderer import MarkdownItRenderer


class TestCacheFactory:
    def test_creates_memory_cache(self) -> None:
        cache = CacheFactory.create(Settings(cache_backend="memory"))
        assert isinstance(cache, PersistentCache)
        assert isinstance(cache._slots, MemorySlotStore)
        assert isinstance(cache._documents, MemoryDocumentStore)

    def test_creates_postgres_cache_without_connecting(self) -> None:
        cache = CacheFactory.create(Settings(cache_backend="postgres"))
        assert isinstance(cache._slots, SlotRepository)
        assert isinstance(cache._documents, DocumentRepository)
        assert cache._slots._database is cache._documents._database
        assert cache._slots._database.is_open is False

    def test_is_case_insensitive(self) -> None:
        cache = CacheFactory.create(Settings(cache_backend="Memory"))
        assert isinstance(cache._slots, MemorySlotStore)

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown cache backend 'redis'"):
            CacheFactory.create(Settings(cache_backend="redis"))


class TestEngineFactory:
    def test_creates_example_engine(self) -> None:
        assert isinstance(EngineFactory.create(Settings(engine="example")), ExampleEngine)

    def test_unknown_engine_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown engine 'wasm'"):
            EngineFactory.create(Settings(engine="wasm"))

    def test_creates_markdown_renderer(self) -> None:
        assert isinstance(EngineFactory.create_renderer(Settings()), MarkdownItRenderer)
