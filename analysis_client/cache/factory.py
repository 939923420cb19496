from analysis_client.cache.connection import CacheDatabase
from analysis_client.cache.memory import MemoryDocumentStore, MemorySlotStore
from analysis_client.cache.persistent_cache import PersistentCache
from analysis_client.cache.repositories.document_repository import DocumentRepository
from analysis_client.cache.repositories.slot_repository import SlotRepository
from analysis_client.config.settings import Settings


class CacheFactory:
    """Creates the persistent cache for the configured backend."""

    BACKENDS: tuple[str, ...] = ("postgres", "memory")

    @classmethod
    def create(cls, settings: Settings) -> PersistentCache:
        backend = settings.cache_backend.lower()
        if backend == "memory":
            return PersistentCache(MemorySlotStore(), MemoryDocumentStore())
        if backend == "postgres":
            # both tiers share one lazily opened pool
            database = CacheDatabase.from_settings(settings)
            return PersistentCache(
                SlotRepository(database),
                DocumentRepository(database, settings.document_slot_name),
            )
        raise ValueError(
            f"Unknown cache backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
