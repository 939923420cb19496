from collections.abc import Awaitable, Callable

from analysis_client.cache.models import SlotName
from analysis_client.cache.persistent_cache import PersistentCache
from analysis_client.errors.exceptions import DatabaseError
from analysis_client.locale.locales import DEFAULT_OPTIONS, LOCALES, waiting_placeholder
from analysis_client.logging.logger import Log


class LocaleController:
    """Holds the active locale and invalidates cached state when it changes.

    A switch never re-renders the previous report in the new language: the
    rendered report is opaque markup. Instead the cached file label and
    document are overwritten with locale-specific placeholders and the host
    is asked to reload.
    """

    def __init__(
        self,
        cache: PersistentCache,
        default_locale: str = "zh-CN",
        reload: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        if default_locale not in LOCALES:
            raise ValueError(
                f"Unknown locale '{default_locale}'. Choose from: {list(LOCALES)}"
            )
        self._cache = cache
        self._default_locale = default_locale
        self._active = default_locale
        self._reload = reload

    def active_locale(self) -> str:
        return self._active

    def dictionary(self, code: str | None = None) -> dict[str, str]:
        """Return the dictionary for ``code`` (default: active locale).

        Unknown codes fall back to the default locale's dictionary.
        """
        return LOCALES.get(code or self._active) or LOCALES[self._default_locale]

    def default_options(self, code: str | None = None) -> str:
        return DEFAULT_OPTIONS.get(code or self._active) or DEFAULT_OPTIONS[self._default_locale]

    def set_reload_hook(self, reload: Callable[[], Awaitable[None]]) -> None:
        self._reload = reload

    async def load(self) -> str:
        """Adopt the locale stored in the key-value tier, if it is supported."""
        stored = await self._cache.get_slot(SlotName.LOCALE)
        if stored is not None and stored.strip() in LOCALES:
            self._active = stored.strip()
        else:
            self._active = self._default_locale
        Log.debug(f"Active locale: {self._active}")
        return self._active

    async def switch_locale(self, new_code: str) -> None:
        """Persist ``new_code``, invalidate cached UI state, and reload the host.

        Cache write failures are logged and do not stop the switch or the
        remaining writes.

        Raises:
            ValueError: for an unsupported locale code.
        """
        if new_code not in LOCALES:
            raise ValueError(f"Unknown locale '{new_code}'. Choose from: {list(LOCALES)}")
        self._active = new_code
        dictionary = LOCALES[new_code]
        await self._invalidate("locale", self._cache.set_slot(SlotName.LOCALE, new_code))
        await self._invalidate(
            "file label", self._cache.set_slot(SlotName.FILE_LABEL, dictionary["no-upload"])
        )
        await self._invalidate("document", self._cache.save_document(waiting_placeholder(dictionary)))
        Log.info(f"Locale switched to {new_code}: {dictionary['new-locale']}")
        if self._reload is not None:
            await self._reload()

    async def _invalidate(self, what: str, write: Awaitable[None]) -> None:
        try:
            await write
        except DatabaseError as exc:
            Log.error(f"Locale switch could not write {what} ({exc.code}): {exc.cause}")
