from analysis_client.cache.base import BaseDocumentStore
from analysis_client.cache.connection import CacheDatabase


class DocumentRepository(BaseDocumentStore):
    """Document tier backed by a single named row of rendered_documents."""

    def __init__(self, database: CacheDatabase, slot_name: str = "markdown") -> None:
        self._database = database
        self._slot_name = slot_name

    async def save(self, markup: str) -> None:
        async with self._database.connection() as conn:
            await conn.execute(
                """
                INSERT INTO rendered_documents (name, markup, saved_at)
                VALUES (%s, %s, NOW())
                ON CONFLICT (name)
                DO UPDATE SET markup = EXCLUDED.markup, saved_at = NOW()
                """,
                (self._slot_name, markup),
            )
            await conn.commit()

    async def load(self) -> str | None:
        async with self._database.connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    "SELECT markup FROM rendered_documents WHERE name = %s",
                    (self._slot_name,),
                )
                row = await cur.fetchone()

        if row is None:
            return None
        return str(row[0])

    async def clear(self) -> None:
        async with self._database.connection() as conn:
            await conn.execute(
                "DELETE FROM rendered_documents WHERE name = %s",
                (self._slot_name,),
            )
            await conn.commit()

    async def close(self) -> None:
        await self._database.close()
