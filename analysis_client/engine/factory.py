from collections.abc import Callable

from analysis_client.config.settings import Settings
from analysis_client.engine.base import BaseAnalysisEngine, BaseMarkupRenderer
from analysis_client.engine.example_engine import ExampleEngine
from analysis_client.engine.markdown_renderer import MarkdownItRenderer


class EngineFactory:
    """Creates the configured engine and markup renderer."""

    ENGINES: dict[str, Callable[[], BaseAnalysisEngine]] = {
        "example": ExampleEngine,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisEngine:
        name = settings.engine.lower()
        engine_factory = cls.ENGINES.get(name)
        if engine_factory is None:
            raise ValueError(f"Unknown engine '{name}'. Choose from: {list(cls.ENGINES)}")
        return engine_factory()

    @classmethod
    def create_renderer(cls, settings: Settings) -> BaseMarkupRenderer:
        _ = settings  # single renderer for now
        return MarkdownItRenderer()
