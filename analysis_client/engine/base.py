from abc import ABC, abstractmethod

from analysis_client.surface.render_surface import RenderSurface


class BaseAnalysisEngine(ABC):
    """Contract for the external analysis engine.

    The engine parses options and data and produces markdown fragments; none
    of that logic lives in this package.
    """

    @abstractmethod
    async def initialize(
        self,
        options: bytes,
        data: bytes,
        surface: RenderSurface,
        locale: str,
    ) -> None:
        """Prepare an analysis run.

        Args:
            options: Sanitized options text, UTF-8 encoded.
            data: Raw bytes of the data file.
            surface: Rendering surface handle the engine may draw charts into.
            locale: Active locale code.

        Raises:
            AnalysisError: or any exception when the engine rejects its input.
        """


class SingleShotEngine(BaseAnalysisEngine):
    """Engine producing the whole report as one blob."""

    @abstractmethod
    async def whole_report(self) -> str:
        """Return the complete report as markdown."""


class ChunkedEngine(BaseAnalysisEngine):
    """Engine producing the report fragment by fragment.

    Fragment 0 is the info fragment, then one fragment per session, then the
    timings fragment.
    """

    @abstractmethod
    def fragment_count(self) -> int:
        """Number of fragments available after ``initialize``."""

    @abstractmethod
    async def fragment(self, index: int) -> str:
        """Return fragment ``index`` as markdown."""


class BaseMarkupRenderer(ABC):
    """Contract for markdown-to-markup renderers."""

    @abstractmethod
    def to_markup(self, text: str) -> str:
        """Render markdown ``text`` to an HTML string."""
