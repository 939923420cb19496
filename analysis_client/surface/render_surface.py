from dataclasses import dataclass

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class HeadingNode:
    """One heading found on the surface, in document order."""

    level: int
    text: str
    identifier: str | None
    position: int


class RenderSurface:
    """In-memory stand-in for the visual report container.

    Holds appended markup fragments in order. It knows how to list headings
    but does no rendering of its own.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    @property
    def markup(self) -> str:
        return "".join(self._parts)

    @property
    def fragment_count(self) -> int:
        return len(self._parts)

    def clear(self) -> None:
        self._parts = []

    def append(self, markup: str) -> None:
        self._parts.append(markup)

    def replace(self, markup: str) -> None:
        self._parts = [markup]

    def has_heading(self, level: int) -> bool:
        return self._soup().find(f"h{level}") is not None

    def headings(self, level: int) -> list[HeadingNode]:
        nodes = self._soup().find_all(f"h{level}")
        return [
            HeadingNode(
                level=level,
                text=node.get_text(strip=True),
                identifier=node.get("id") or None,
                position=index,
            )
            for index, node in enumerate(nodes)
        ]

    def assign_heading_ids(self, level: int, identifiers: list[str]) -> None:
        """Set ``id`` on headings of ``level`` that lack one, in document order.

        Collapses the stored fragments into one serialized part.
        """
        soup = self._soup()
        changed = False
        for node, identifier in zip(soup.find_all(f"h{level}"), identifiers):
            if not node.get("id"):
                node["id"] = identifier
                changed = True
        if changed:
            self._parts = [str(soup)]

    def _soup(self) -> BeautifulSoup:
        return BeautifulSoup(self.markup, "html.parser")
