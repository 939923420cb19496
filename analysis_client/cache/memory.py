"""In-process cache stores.

No database needed. Used for local development, tests, and as the reference
behaviour for the PostgreSQL repositories.
"""

from analysis_client.cache.base import BaseDocumentStore, BaseSlotStore


class MemorySlotStore(BaseSlotStore):
    def __init__(self) -> None:
        self._slots: dict[str, str] = {}

    async def get_slot(self, name: str) -> str | None:
        return self._slots.get(name)

    async def set_slot(self, name: str, value: str) -> None:
        self._slots[name] = value


class MemoryDocumentStore(BaseDocumentStore):
    def __init__(self) -> None:
        self._markup: str | None = None

    async def save(self, markup: str) -> None:
        self._markup = markup

    async def load(self) -> str | None:
        return self._markup

    async def clear(self) -> None:
        self._markup = None
