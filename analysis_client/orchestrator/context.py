from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from analysis_client.errors.classifier import UserFacingError
from analysis_client.logging.logger import Log
from analysis_client.surface.render_surface import RenderSurface


class RunState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    INVOKING = "invoking"
    STREAMING = "streaming"
    RENDERING = "rendering"
    COMMITTING = "committing"


class RenderEventKind(str, Enum):
    CLEARED = "cleared"
    FRAGMENT = "fragment"
    COMMITTED = "committed"
    RESTORED = "restored"


@dataclass(frozen=True)
class RenderEvent:
    kind: RenderEventKind
    generation: int


RenderListener = Callable[[RenderEvent, RenderSurface], None]


class SessionContext:
    """Mutable state of one host page, passed explicitly to every component.

    ``generation`` increases with every run; continuations compare the value
    they captured at start against it and drop their results when stale.
    """

    def __init__(self, surface: RenderSurface | None = None) -> None:
        self.surface = surface if surface is not None else RenderSurface()
        self.generation = 0
        self.state = RunState.IDLE
        self.error: UserFacingError | None = None
        self._listeners: list[RenderListener] = []

    def begin_run(self) -> int:
        self.generation += 1
        self.error = None
        return self.generation

    def invalidate(self) -> None:
        """Supersede any run in flight without starting a new one."""
        self.generation += 1
        self.state = RunState.IDLE

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def transition(self, state: RunState, generation: int) -> None:
        if not self.is_current(generation):
            return
        Log.debug(f"Run {generation}: {self.state.value} -> {state.value}")
        self.state = state

    def subscribe(self, listener: RenderListener) -> None:
        self._listeners.append(listener)

    def notify(self, kind: RenderEventKind, generation: int | None = None) -> None:
        event = RenderEvent(kind=kind, generation=self.generation if generation is None else generation)
        for listener in self._listeners:
            listener(event, self.surface)
