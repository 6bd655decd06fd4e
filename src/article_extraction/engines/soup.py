"""BeautifulSoup-backed document parser and node renderer."""
from bs4 import BeautifulSoup, Tag


class SoupDocumentParser:
    """Parse raw HTML bytes with BeautifulSoup and the lxml parser."""

    def __init__(self, features: str = "lxml"):
        self.features = features

    def parse(self, content: bytes) -> BeautifulSoup:
        # bs4 sniffs the encoding from the bytes (BOM, meta charset, heuristics)
        return BeautifulSoup(content, self.features)


class SoupNodeRenderer:
    """Render a BeautifulSoup node back to UTF-8 HTML bytes."""

    def render(self, node: Tag) -> bytes:
        return node.encode("utf-8")
