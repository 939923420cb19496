import asyncio

from analysis_client.engine.base import ChunkedEngine, SingleShotEngine
from analysis_client.surface.render_surface import RenderSurface

SAMPLE_DATA = b'{"session1":[[[0,1234],"R U R\' U\'","",1700000000]]}'


class FakeChunkedEngine(ChunkedEngine):
    """Records calls; serves the fragments it was built with."""

    def __init__(
        self,
        fragments: list[str],
        init_error: Exception | None = None,
    ) -> None:
        self.fragments = fragments
        self.init_error = init_error
        self.init_calls = 0
        self.pulled: list[int] = []
        self.options: bytes = b""
        self.data: bytes = b""
        self.locale = ""

    async def initialize(
        self,
        options: bytes,
        data: bytes,
        surface: RenderSurface,
        locale: str,
    ) -> None:
        self.init_calls += 1
        self.options = options
        self.data = data
        self.locale = locale
        if self.init_error is not None:
            raise self.init_error

    def fragment_count(self) -> int:
        return len(self.fragments)

    async def fragment(self, index: int) -> str:
        self.pulled.append(index)
        return self.fragments[index]


class FakeSingleShotEngine(SingleShotEngine):
    def __init__(self, report: str) -> None:
        self.report = report
        self.init_calls = 0

    async def initialize(
        self,
        options: bytes,
        data: bytes,
        surface: RenderSurface,
        locale: str,
    ) -> None:
        self.init_calls += 1

    async def whole_report(self) -> str:
        return self.report



class GatedEngine(FakeChunkedEngine):
    """Blocks on the second fragment until ``gate`` is set."""

    def __init__(self, fragments: list[str]) -> None:
        super().__init__(fragments)
        self.gate = asyncio.Event()
        self.waiting = False

    async def fragment(self, index: int) -> str:
        if index == 1:
            self.waiting = True
            await self.gate.wait()
        return await super().fragment(index)
