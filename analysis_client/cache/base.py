from abc import ABC, abstractmethod


class BaseSlotStore(ABC):
    """Contract for the key-value tier: small independent string slots."""

    @abstractmethod
    async def get_slot(self, name: str) -> str | None:
        """Return the stored value or None when the slot was never written.

        Raises:
            DatabaseError: when the store cannot be reached.
        """

    @abstractmethod
    async def set_slot(self, name: str, value: str) -> None:
        """Overwrite one slot. No cross-slot transaction is implied.

        Raises:
            DatabaseError: when the store cannot be reached or the write fails.
        """

    async def close(self) -> None:
        """Release the underlying connection, if any."""


class BaseDocumentStore(ABC):
    """Contract for the document tier: exactly one named markup slot."""

    @abstractmethod
    async def save(self, markup: str) -> None:
        """Overwrite the slot unconditionally (last writer wins).

        Raises:
            DatabaseError: on connection or transaction failure.
        """

    @abstractmethod
    async def load(self) -> str | None:
        """Return the stored markup, or None when the slot is empty.

        Raises:
            DatabaseError: on connection or transaction failure.
        """

    @abstractmethod
    async def clear(self) -> None:
        """Empty the slot. Clearing an empty slot is a no-op.

        Raises:
            DatabaseError: on connection or transaction failure.
        """

    async def close(self) -> None:
        """Release the underlying connection, if any."""
