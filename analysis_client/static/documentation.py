import html

from analysis_client.engine.base import BaseMarkupRenderer
from analysis_client.errors.classifier import classify_exception
from analysis_client.errors.exceptions import NetworkError
from analysis_client.static.fetcher import StaticTextFetcher
from analysis_client.validation.models import FileHandle

README_PATHS: dict[str, str] = {
    "en": "README.md",
    "zh": "README-ZH.md",
}
EXAMPLE_FILE_NAME = "example.txt"


class DocumentationLoader:
    """Loads the README and the bundled example data file."""

    def __init__(self, fetcher: StaticTextFetcher, renderer: BaseMarkupRenderer) -> None:
        self._fetcher = fetcher
        self._renderer = renderer

    async def load_readme(self, lang: str, locale: str) -> str:
        """Return the README for ``lang`` ("en" or "zh") rendered to markup.

        A fetch failure is classified and returned as an error block in
        ``locale`` instead of being raised.
        """
        path = README_PATHS.get(lang, README_PATHS["en"])
        try:
            text = await self._fetcher.fetch_text(path)
        except NetworkError as exc:
            error = classify_exception(exc, locale)
            return f'<div class="error-message active">{html.escape(error.message)}</div>'
        return self._renderer.to_markup(text)

    async def load_example(self) -> FileHandle:
        """Fetch the example data file as an in-memory text/plain handle.

        Raises:
            NetworkError: when the example cannot be fetched.
        """
        text = await self._fetcher.fetch_text(EXAMPLE_FILE_NAME)
        return FileHandle.from_bytes(EXAMPLE_FILE_NAME, text.encode("utf-8"), "text/plain")
