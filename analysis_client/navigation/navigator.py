"""Outline derived from the rendered surface."""

from collections.abc import Sequence

from analysis_client.logging.logger import Log
from analysis_client.navigation.models import OutlineEntry
from analysis_client.orchestrator.context import RenderEvent, SessionContext
from analysis_client.surface.render_surface import RenderSurface

IDENTIFIER_PREFIX = "section"


class ReactiveNavigator:
    """Maintains an ordered outline of the report headings.

    The outline is rebuilt from scratch on every render notification. Headings
    without an ``id`` get one derived from their position at rebuild time, so
    identifiers shift when heading order or count changes between rebuilds.
    """

    def __init__(self, active_threshold_px: float = 100.0) -> None:
        self._active_threshold_px = active_threshold_px
        self._entries: list[OutlineEntry] = []
        self._active: str | None = None
        self._collapsed = False

    @property
    def entries(self) -> list[OutlineEntry]:
        return list(self._entries)

    @property
    def visible(self) -> bool:
        return bool(self._entries)

    @property
    def active_identifier(self) -> str | None:
        return self._active

    @property
    def collapsed(self) -> bool:
        return self._collapsed

    def set_collapsed(self, collapsed: bool) -> None:
        self._collapsed = collapsed

    def attach(self, context: SessionContext) -> None:
        context.subscribe(self.on_render)

    def on_render(self, event: RenderEvent, surface: RenderSurface) -> None:
        self.rebuild(surface)
        Log.debug(
            f"Outline rebuilt after {event.kind.value} (run {event.generation}): "
            f"{len(self._entries)} entries"
        )

    def rebuild(self, surface: RenderSurface) -> list[OutlineEntry]:
        """Top-level heading present: outline h2, otherwise h3."""
        level = 2 if surface.has_heading(1) else 3
        headings = surface.headings(level)
        identifiers = [
            heading.identifier or f"{IDENTIFIER_PREFIX}-{heading.position}"
            for heading in headings
        ]
        surface.assign_heading_ids(level, identifiers)
        self._entries = [
            OutlineEntry(identifier=identifier, label=heading.text, position=heading.position)
            for identifier, heading in zip(identifiers, headings)
        ]
        if self._active not in identifiers:
            self._active = None
        return self.entries

    def on_scroll(self, heading_tops: Sequence[float]) -> str | None:
        """Mark the last heading whose top edge crossed the threshold as active.

        Args:
            heading_tops: Top edge of each outline heading relative to the
                viewport top, in document order.
        """
        active: str | None = None
        for entry, top in zip(self._entries, heading_tops):
            if top <= self._active_threshold_px:
                active = entry.identifier
        self._active = active
        return active
