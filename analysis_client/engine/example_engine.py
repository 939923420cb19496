"""Example analysis engine adapter.

Use this module as a reference when wiring a real engine.
Implement ChunkedEngine or SingleShotEngine and register it in EngineFactory.
"""

from typing import ClassVar

from analysis_client.engine.base import ChunkedEngine
from analysis_client.errors.exceptions import AnalysisError
from analysis_client.surface.render_surface import RenderSurface


class ExampleEngine(ChunkedEngine):
    """Chunked engine returning fixed fragments.

    Performs no analysis. Useful for local development, tests, and as a
    template for real engine adapters.
    """

    DEFAULT_SESSIONS: ClassVar[list[str]] = [
        "## Session 1\n\n| stat | value |\n| --- | --- |\n| solves | 0 |\n",
    ]

    def __init__(self, sessions: list[str] | None = None) -> None:
        self._sessions = sessions if sessions is not None else list(self.DEFAULT_SESSIONS)
        self._fragments: list[str] = []

    async def initialize(
        self,
        options: bytes,
        data: bytes,
        surface: RenderSurface,
        locale: str,
    ) -> None:
        _ = surface
        option_lines = [
            line.strip()
            for line in options.decode("utf-8").splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]
        info = (
            "# Analysis\n\n"
            f"- locale: {locale}\n"
            f"- options: {len(option_lines)}\n"
            f"- data: {len(data)} bytes\n"
        )
        timings = "## Timings\n\n- parsing: 0ms\n- analyzing: 0ms\n"
        self._fragments = [info, *self._sessions, timings]

    def fragment_count(self) -> int:
        return len(self._fragments)

    async def fragment(self, index: int) -> str:
        if not self._fragments:
            raise AnalysisError("default", RuntimeError("engine not initialized"))
        return self._fragments[index]
