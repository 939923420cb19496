from analysis_client.cache.base import BaseSlotStore
from analysis_client.cache.connection import CacheDatabase


class SlotRepository(BaseSlotStore):
    """Key-value tier backed by the ui_slots table."""

    def __init__(self, database: CacheDatabase) -> None:
        self._database = database

    async def get_slot(self, name: str) -> str | None:
        async with self._database.connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    "SELECT value FROM ui_slots WHERE name = %s",
                    (name,),
                )
                row = await cur.fetchone()

        if row is None:
            return None
        return str(row[0])

    async def set_slot(self, name: str, value: str) -> None:
        async with self._database.connection() as conn:
            await conn.execute(
                """
                INSERT INTO ui_slots (name, value, updated_at)
                VALUES (%s, %s, NOW())
                ON CONFLICT (name)
                DO UPDATE SET value = EXCLUDED.value, updated_at = NOW()
                """,
                (name, value),
            )
            await conn.commit()

    async def close(self) -> None:
        await self._database.close()
