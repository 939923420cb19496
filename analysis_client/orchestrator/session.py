from analysis_client.cache.debouncer import Debouncer
from analysis_client.cache.factory import CacheFactory
from analysis_client.cache.models import SlotName
from analysis_client.cache.persistent_cache import PersistentCache
from analysis_client.config.settings import Settings
from analysis_client.engine.base import BaseAnalysisEngine
from analysis_client.engine.factory import EngineFactory
from analysis_client.errors.classifier import classify_exception
from analysis_client.errors.exceptions import DatabaseError, NetworkError
from analysis_client.locale.controller import LocaleController
from analysis_client.locale.locales import waiting_placeholder
from analysis_client.logging.logger import Log
from analysis_client.navigation.navigator import ReactiveNavigator
from analysis_client.orchestrator.context import RenderEventKind, SessionContext
from analysis_client.orchestrator.models import RunOutcome
from analysis_client.orchestrator.orchestrator import AnalysisOrchestrator, build_orchestrator
from analysis_client.static.documentation import DocumentationLoader
from analysis_client.static.fetcher import StaticTextFetcher
from analysis_client.validation.models import FileHandle


class AnalyzerSession:
    """Everything one host page needs: restore, edit, select, run, switch locale.

    The host's event layer calls these methods; the session keeps the visible
    scalars (options text, file label, nav header) in sync with the cache.
    """

    def __init__(
        self,
        *,
        context: SessionContext,
        orchestrator: AnalysisOrchestrator,
        cache: PersistentCache,
        locale: LocaleController,
        navigator: ReactiveNavigator,
        documentation: DocumentationLoader,
        fetcher: StaticTextFetcher | None = None,
        options_debounce_seconds: float = 2.0,
    ) -> None:
        self.context = context
        self.navigator = navigator
        self._orchestrator = orchestrator
        self._cache = cache
        self._locale = locale
        self._documentation = documentation
        self._fetcher = fetcher
        self._options_debouncer = Debouncer(options_debounce_seconds, self._persist_options)
        self._file: FileHandle | None = None

        self.options_text = ""
        self.file_label = ""
        self.nav_header = ""

        navigator.attach(context)
        locale.set_reload_hook(self.restore)

    @property
    def locale(self) -> LocaleController:
        return self._locale

    async def restore(self) -> None:
        """Rebuild visible state from the cache, as on a page load.

        Any run still in flight is superseded first. Any read failure counts
        as a miss and falls back to locale defaults.
        """
        self.context.invalidate()
        await self._locale.load()
        dictionary = self._locale.dictionary()

        self.options_text = (
            await self._cache.get_slot(SlotName.OPTIONS) or self._locale.default_options()
        )
        self.file_label = await self._cache.get_slot(SlotName.FILE_LABEL) or dictionary["select-data"]
        self.nav_header = await self._cache.get_slot(SlotName.NAV_HEADER) or dictionary["report"]
        collapsed = await self._cache.get_slot(SlotName.OUTLINE_COLLAPSED)
        self.navigator.set_collapsed(collapsed == "true")

        markup = await self._cache.load_document()
        self.context.surface.replace(
            markup if markup is not None else waiting_placeholder(dictionary)
        )
        self.context.error = None
        self.context.notify(RenderEventKind.RESTORED)
        Log.info(f"Session restored (locale {self._locale.active_locale()})")

    def edit_options(self, text: str) -> None:
        """Record an edit; persistence is debounced."""
        self.options_text = text
        self._options_debouncer.push(text)

    async def use_default_options(self) -> None:
        self.options_text = self._locale.default_options()
        await self._remember(SlotName.OPTIONS, self.options_text)

    async def select_file(
        self,
        handle: FileHandle | None,
        *,
        example: bool = False,
    ) -> RunOutcome | None:
        """Remember the chosen file and analyze it. ``None`` clears the choice."""
        dictionary = self._locale.dictionary()
        self._file = handle
        if handle is None:
            self.file_label = dictionary["select-data"]
            return None

        self.file_label = handle.name
        self.nav_header = dictionary["report-example" if example else "report"]
        await self._remember(SlotName.FILE_LABEL, self.file_label)
        await self._remember(SlotName.NAV_HEADER, self.nav_header)
        return await self.run()

    async def load_example(self) -> RunOutcome | None:
        """Fetch the bundled example file and analyze it."""
        dictionary = self._locale.dictionary()
        self.file_label = dictionary["example-file-loading"]
        try:
            handle = await self._documentation.load_example()
        except NetworkError as exc:
            self.context.error = classify_exception(exc, self._locale.active_locale())
            self.file_label = dictionary["example-file-error"]
            return None
        return await self.select_file(handle, example=True)

    async def run(self) -> RunOutcome:
        """Analyze the current options text against the current file."""
        return await self._orchestrator.run(self.context, self.options_text, self._file)

    async def load_readme(self, lang: str) -> str:
        return await self._documentation.load_readme(lang, self._locale.active_locale())

    async def toggle_outline(self) -> bool:
        collapsed = not self.navigator.collapsed
        self.navigator.set_collapsed(collapsed)
        await self._remember(SlotName.OUTLINE_COLLAPSED, "true" if collapsed else "false")
        return collapsed

    async def switch_locale(self, code: str) -> None:
        await self._options_debouncer.flush()
        await self._locale.switch_locale(code)

    async def close(self) -> None:
        await self._options_debouncer.flush()
        if self._fetcher is not None:
            await self._fetcher.close()
        await self._cache.close()

    async def _persist_options(self, text: str) -> None:
        await self._cache.set_slot(SlotName.OPTIONS, text)

    async def _remember(self, name: SlotName, value: str) -> None:
        try:
            await self._cache.set_slot(name, value)
        except DatabaseError as exc:
            Log.warning(f"Could not persist slot '{name.value}' ({exc.code}): {exc.cause}")


def build_session(
    settings: Settings,
    *,
    engine: BaseAnalysisEngine | None = None,
    cache: PersistentCache | None = None,
    fetcher: StaticTextFetcher | None = None,
) -> AnalyzerSession:
    """Build a session with all adapters configured from settings."""
    cache = cache if cache is not None else CacheFactory.create(settings)
    engine = engine if engine is not None else EngineFactory.create(settings)
    fetcher = fetcher if fetcher is not None else StaticTextFetcher.from_settings(settings)
    renderer = EngineFactory.create_renderer(settings)
    locale = LocaleController(cache, settings.default_locale)
    orchestrator = build_orchestrator(
        settings,
        engine=engine,
        renderer=renderer,
        cache=cache,
        locale=locale,
    )
    return AnalyzerSession(
        context=SessionContext(),
        orchestrator=orchestrator,
        cache=cache,
        locale=locale,
        navigator=ReactiveNavigator(settings.outline_active_threshold_px),
        documentation=DocumentationLoader(fetcher, renderer),
        fetcher=fetcher,
        options_debounce_seconds=settings.options_debounce_seconds,
    )
