import httpx

from analysis_client.config.settings import Settings
from analysis_client.errors.exceptions import NetworkError
from analysis_client.logging.logger import Log


class StaticTextFetcher:
    """Fetches static text (README files, the example data file) over HTTP."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticTextFetcher":
        return cls(
            base_url=settings.static_base_url,
            timeout_seconds=settings.static_timeout_seconds,
        )

    async def fetch_text(self, path: str) -> str:
        """Return the body at ``path`` as text.

        Raises:
            NetworkError: ``notFound`` for a 404, ``default`` for any other
                failed status or transport error.
        """
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as exc:
            raise NetworkError("default", exc) from exc

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            code = "notFound" if response.status_code == 404 else "default"
            raise NetworkError(code, exc) from exc

        Log.debug(f"Fetched {path} ({len(response.content)} bytes)")
        return response.text

    async def close(self) -> None:
        await self._client.aclose()
