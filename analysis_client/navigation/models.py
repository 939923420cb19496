from dataclasses import dataclass


@dataclass(frozen=True)
class OutlineEntry:
    """One outline item derived from a heading on the surface."""

    identifier: str
    label: str
    position: int
