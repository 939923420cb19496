from analysis_client.cache.base import BaseDocumentStore, BaseSlotStore
from analysis_client.cache.models import SlotName
from analysis_client.errors.exceptions import DatabaseError
from analysis_client.logging.logger import Log


class PersistentCache:
    """Two independent tiers that outlive a single page load.

    The key-value tier holds small UI scalars; the document tier holds the
    last fully rendered report. Reads never raise: a failed read is logged and
    reported as a miss. Writes raise ``DatabaseError`` so the caller decides
    whether the failure matters.
    """

    def __init__(self, slots: BaseSlotStore, documents: BaseDocumentStore) -> None:
        self._slots = slots
        self._documents = documents

    async def get_slot(self, name: SlotName | str) -> str | None:
        key = _slot_key(name)
        try:
            value = await self._slots.get_slot(key)
        except DatabaseError as exc:
            Log.warning(f"Slot '{key}' read failed ({exc.code}), treating as absent: {exc.cause}")
            return None
        Log.debug(f"Slot '{key}' {'hit' if value is not None else 'miss'}")
        return value

    async def set_slot(self, name: SlotName | str, value: str) -> None:
        """Raises DatabaseError when the write fails."""
        key = _slot_key(name)
        await self._slots.set_slot(key, value)
        Log.debug(f"Slot '{key}' written ({len(value)} chars)")

    async def save_document(self, markup: str) -> None:
        """Overwrite the document slot.

        Raises:
            DatabaseError: on connection or transaction failure.
        """
        await self._documents.save(markup)
        Log.info(f"Rendered document cached ({len(markup)} chars)")

    async def load_document(self) -> str | None:
        try:
            markup = await self._documents.load()
        except DatabaseError as exc:
            Log.warning(f"Document load failed ({exc.code}), treating as cache miss: {exc.cause}")
            return None
        Log.debug("Document cache hit" if markup is not None else "Document cache miss")
        return markup

    async def clear_document(self) -> None:
        """Raises DatabaseError when the delete fails."""
        await self._documents.clear()
        Log.info("Rendered document cache cleared")

    async def close(self) -> None:
        await self._slots.close()
        await self._documents.close()


def _slot_key(name: SlotName | str) -> str:
    return name.value if isinstance(name, SlotName) else name
