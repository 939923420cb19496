from markdown_it import MarkdownIt

from analysis_client.engine.base import BaseMarkupRenderer


class MarkdownItRenderer(BaseMarkupRenderer):
    """CommonMark renderer with GitHub-style tables, built on markdown-it-py."""

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": True}).enable("table")

    def to_markup(self, text: str) -> str:
        return self._md.render(text)
