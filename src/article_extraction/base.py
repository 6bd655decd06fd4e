"""Capability protocols for the external extraction stack.

The harness never imports a concrete DOM library or readability engine
directly. It is wired with objects satisfying these protocols: the defaults
in src.article_extraction.engines for production, a deterministic fake in
tests.
"""
from typing import Any, Protocol

from .models import Article


class DocumentParser(Protocol):
    """Parse raw HTML bytes into a navigable document."""

    def parse(self, content: bytes) -> Any:
        """
        Args:
            content: Raw HTML bytes

        Returns:
            Parsed document

        Raises:
            Exception: Any failure; the invoker reports it as a ParseError
        """
        ...


class ExtractionEngine(Protocol):
    """
    Readability-style engine turning a document into an Article.

    Example:
        class MyEngine:  # No inheritance needed!
            def extract(self, document, base_url: str) -> Article:
                ...
    """

    def extract(self, document: Any, base_url: str) -> Article:
        """
        Args:
            document: Parsed document (engines may mutate it)
            base_url: URL the document is treated as coming from

        Returns:
            Article with the main-content node and scalar metadata

        Raises:
            Exception: If the page is not an article or extraction fails
        """
        ...


class NodeRenderer(Protocol):
    """Serialize a DOM subtree back to HTML bytes."""

    def render(self, node: Any) -> bytes:
        ...


class ReaderableChecker(Protocol):
    """Heuristic judgment of whether a document is worth extracting."""

    def is_readerable(self, document: Any) -> bool:
        ...
