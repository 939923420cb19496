import asyncio

from analysis_client.cache.persistent_cache import PersistentCache
from analysis_client.config.settings import Settings
from analysis_client.engine.base import (
    BaseAnalysisEngine,
    BaseMarkupRenderer,
    ChunkedEngine,
    SingleShotEngine,
)
from analysis_client.errors.classifier import UserFacingError, classify_exception
from analysis_client.errors.exceptions import AnalysisError, AppError, DatabaseError
from analysis_client.locale.controller import LocaleController
from analysis_client.locale.locales import waiting_placeholder
from analysis_client.logging.logger import Log
from analysis_client.orchestrator.context import RenderEventKind, RunState, SessionContext
from analysis_client.orchestrator.file_loader import FileLoader
from analysis_client.orchestrator.models import RunOutcome, RunStatus
from analysis_client.validation.models import AnalysisRequest, FileHandle, Rejected
from analysis_client.validation.validator import InputValidator


class AnalysisOrchestrator:
    """Runs one request through validation, the engine and progressive rendering.

    Pipeline: validate -> read file -> initialize engine -> render fragments
    one at a time (yielding between them) -> commit the surface to the cache.
    Every failure is classified and surfaced on the context; no failure
    escapes ``run``.
    """

    def __init__(
        self,
        *,
        validator: InputValidator,
        engine: BaseAnalysisEngine,
        renderer: BaseMarkupRenderer,
        cache: PersistentCache,
        locale: LocaleController,
        file_loader: FileLoader | None = None,
        render_yield_seconds: float = 0.0,
        abort_marker: str = "Analysis aborted",
    ) -> None:
        self._validator = validator
        self._engine = engine
        self._renderer = renderer
        self._cache = cache
        self._locale = locale
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._render_yield_seconds = render_yield_seconds
        self._abort_marker = abort_marker

    async def run(
        self,
        context: SessionContext,
        options_text: str,
        file: FileHandle | None,
    ) -> RunOutcome:
        """Run an analysis and render it onto ``context.surface``.

        A newer ``run`` on the same context supersedes this one: once the
        generation moves on, this run stops rendering and never commits.
        """
        generation = context.begin_run()
        locale = self._locale.active_locale()
        Log.info(f"Run {generation} started")

        context.surface.clear()
        context.notify(RenderEventKind.CLEARED, generation)

        # Step 1: Validate
        context.transition(RunState.VALIDATING, generation)
        validation = self._validator.validate(AnalysisRequest(options_text, file))
        if isinstance(validation, Rejected):
            context.transition(RunState.REJECTED, generation)
            return self._fail(context, generation, RunStatus.REJECTED, validation.error, locale)

        report: list[str] = []
        try:
            # Step 2: Read file and initialize the engine
            context.transition(RunState.INVOKING, generation)
            data = await self._file_loader.load(validation.file)
            if not context.is_current(generation):
                return self._superseded(generation, report)
            Log.info(f"Run {generation}: loaded {len(data)} bytes from '{validation.file.name}'")

            await self._initialize(validation.options_text, data, context, locale)
            if not context.is_current(generation):
                return self._superseded(generation, report)

            # Step 3: Stream and render fragments in engine order
            context.transition(RunState.STREAMING, generation)
            for index in range(self._count_fragments()):
                fragment = await self._pull(index)
                if not context.is_current(generation):
                    return self._superseded(generation, report)

                context.transition(RunState.RENDERING, generation)
                context.surface.append(self._render(fragment))
                report.append(fragment)
                context.notify(RenderEventKind.FRAGMENT, generation)

                if index == 0 and self._abort_marker in fragment:
                    Log.info(f"Run {generation}: analysis aborted by engine")
                    context.transition(RunState.IDLE, generation)
                    return RunOutcome(generation, RunStatus.ABORTED, report=tuple(report))

                await asyncio.sleep(self._render_yield_seconds)
                if not context.is_current(generation):
                    return self._superseded(generation, report)
                context.transition(RunState.STREAMING, generation)
        except AppError as exc:
            if not context.is_current(generation):
                return self._superseded(generation, report)
            return self._fail(context, generation, RunStatus.FAILED, exc, locale, report)

        # Step 4: Commit
        context.transition(RunState.COMMITTING, generation)
        cache_error = await self._commit(context, generation, locale)
        context.transition(RunState.IDLE, generation)
        Log.info(f"Run {generation} completed: {len(report)} fragments")
        return RunOutcome(
            generation,
            RunStatus.COMPLETED,
            report=tuple(report),
            cache_error=cache_error,
        )

    async def _initialize(
        self,
        options_text: str,
        data: bytes,
        context: SessionContext,
        locale: str,
    ) -> None:
        try:
            await self._engine.initialize(
                options_text.encode("utf-8"), data, context.surface, locale
            )
        except AppError:
            raise
        except Exception as exc:
            raise AnalysisError("initFailed", exc) from exc

    def _count_fragments(self) -> int:
        if isinstance(self._engine, SingleShotEngine):
            return 1
        if isinstance(self._engine, ChunkedEngine):
            try:
                return self._engine.fragment_count()
            except Exception as exc:
                raise AnalysisError("default", exc) from exc
        raise AnalysisError(
            "default",
            TypeError(f"Unsupported engine type {type(self._engine).__name__}"),
        )

    async def _pull(self, index: int) -> str:
        try:
            if isinstance(self._engine, ChunkedEngine):
                return await self._engine.fragment(index)
            if isinstance(self._engine, SingleShotEngine):
                return await self._engine.whole_report()
        except AppError:
            raise
        except Exception as exc:
            raise AnalysisError("default", exc) from exc
        raise AnalysisError(
            "default",
            TypeError(f"Unsupported engine type {type(self._engine).__name__}"),
        )

    def _render(self, fragment: str) -> str:
        try:
            return self._renderer.to_markup(fragment)
        except Exception as exc:
            raise AnalysisError("renderFailed", exc) from exc

    async def _commit(
        self,
        context: SessionContext,
        generation: int,
        locale: str,
    ) -> UserFacingError | None:
        """Persist the surface. A failure is logged and returned, never raised."""
        try:
            await self._cache.save_document(context.surface.markup)
        except DatabaseError as exc:
            return classify_exception(exc, locale)
        if context.is_current(generation):
            context.notify(RenderEventKind.COMMITTED, generation)
        return None

    def _fail(
        self,
        context: SessionContext,
        generation: int,
        status: RunStatus,
        exc: AppError,
        locale: str,
        report: list[str] | None = None,
    ) -> RunOutcome:
        error = classify_exception(exc, locale)
        if context.is_current(generation):
            context.error = error
            context.surface.replace(waiting_placeholder(self._locale.dictionary(locale)))
            context.notify(RenderEventKind.CLEARED, generation)
            context.transition(RunState.IDLE, generation)
        return RunOutcome(generation, status, report=tuple(report or ()), error=error)

    @staticmethod
    def _superseded(generation: int, report: list[str]) -> RunOutcome:
        Log.debug(f"Run {generation} superseded, discarding results")
        return RunOutcome(generation, RunStatus.SUPERSEDED, report=tuple(report))


def build_orchestrator(
    settings: Settings,
    *,
    engine: BaseAnalysisEngine,
    renderer: BaseMarkupRenderer,
    cache: PersistentCache,
    locale: LocaleController,
) -> AnalysisOrchestrator:
    """Build an orchestrator configured from settings."""
    return AnalysisOrchestrator(
        validator=InputValidator.from_settings(settings),
        engine=engine,
        renderer=renderer,
        cache=cache,
        locale=locale,
        file_loader=FileLoader(),
        render_yield_seconds=settings.render_yield_seconds,
        abort_marker=settings.abort_marker,
    )
