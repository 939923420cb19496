import asyncio
from collections.abc import Awaitable, Callable

from analysis_client.errors.exceptions import AppError
from analysis_client.logging.logger import Log


class Debouncer:
    """Collapses a burst of values into one call issued after a quiet window.

    Each ``push`` restarts the window. When it elapses with no further pushes,
    ``action`` runs once with the last pushed value. Must be used from inside
    a running event loop.
    """

    def __init__(
        self,
        delay_seconds: float,
        action: Callable[[str], Awaitable[None]],
    ) -> None:
        self._delay_seconds = delay_seconds
        self._action = action
        self._timer: asyncio.Task[None] | None = None
        self._in_flight: set[asyncio.Task[None]] = set()
        self._pending: str | None = None

    @property
    def pending(self) -> str | None:
        return self._pending

    def push(self, value: str) -> None:
        self._pending = value
        self._cancel_timer()
        self._timer = asyncio.get_running_loop().create_task(self._fire_later())

    async def flush(self) -> None:
        """Wait for writes in flight, then run the pending action now."""
        self._cancel_timer()
        if self._in_flight:
            await asyncio.gather(*self._in_flight)
        await self._fire()

    async def _fire_later(self) -> None:
        await asyncio.sleep(self._delay_seconds)
        # past the window: a new push must not cancel the write in flight
        task = asyncio.current_task()
        if task is not None:
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)
        self._timer = None
        await self._fire()

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    async def _fire(self) -> None:
        value = self._pending
        if value is None:
            return
        self._pending = None
        try:
            await self._action(value)
        except AppError as exc:
            Log.warning(f"Debounced write failed ({exc.code}): {exc.cause}")
            return
        Log.debug(f"Debounced write issued ({len(value)} chars)")
