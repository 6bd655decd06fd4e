"""
Shared pytest fixtures for fixture generation tests.

Provides a deterministic fake extraction engine, a fake readerable checker,
a mocked requests session, and helpers for laying out test pages on disk.
"""
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests
from bs4 import BeautifulSoup

from src.article_extraction.engines.soup import SoupDocumentParser
from src.article_extraction.models import Article
from src.article_extraction.service import ExtractionInvoker
from src.fixture_serialization.service import FixtureSerializer
from src.orchestration.service import FixtureGenerationService
from src.source_acquisition.service import DefaultSourceAcquirer


FAIL_MARKER = "EXTRACTION-FAILS"


class FakeEngine:
    """
    Deterministic stand-in for the readability engine.

    Returns the first <article> (or <body>) untouched, with the configured
    metadata. Documents containing FAIL_MARKER make it raise ValueError.
    """

    def __init__(
        self,
        title: str = "",
        byline: str = "",
        excerpt: str = "",
        site_name: str = "",
        language: str = "",
    ):
        self.title = title
        self.byline = byline
        self.excerpt = excerpt
        self.site_name = site_name
        self.language = language
        self.base_urls: list[str] = []

    def extract(self, document: BeautifulSoup, base_url: str) -> Article:
        self.base_urls.append(base_url)

        if FAIL_MARKER in document.get_text():
            raise ValueError("page is not an article")

        node = document.find("article") or document.body
        text = node.get_text()
        return Article(
            node=node,
            title=self.title,
            byline=self.byline,
            excerpt=self.excerpt,
            site_name=self.site_name,
            language=self.language,
            length=len(text),
            text_content=text,
        )


class FakeReaderableChecker:
    """Returns a fixed verdict and records the documents it was shown."""

    def __init__(self, readerable: bool = True):
        self.readerable = readerable
        self.seen: list[str] = []

    def is_readerable(self, document: BeautifulSoup) -> bool:
        self.seen.append(str(document))
        return self.readerable


def make_response(
    content: bytes = b"<html><body><article><p>Downloaded</p></article></body></html>",
    status_code: int = 200,
    chunks: list[bytes] | None = None,
    stream_error: Exception | None = None,
) -> MagicMock:
    """
    Build a mock requests.Response usable as a context manager.

    Args:
        content: Body returned in one chunk (ignored if chunks is given)
        status_code: HTTP status code
        chunks: Explicit body chunks
        stream_error: Raised by iter_content after the chunks are yielded
    """
    response = MagicMock(spec=requests.Response)
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    response.status_code = status_code
    response.ok = status_code < 400

    body = chunks if chunks is not None else [content]

    def iter_content(chunk_size=1):
        yield from body
        if stream_error is not None:
            raise stream_error

    response.iter_content.side_effect = iter_content
    return response


@pytest.fixture
def test_pages_dir(tmp_path: Path) -> Path:
    """Return an empty test-pages root directory."""
    root = tmp_path / "test-pages"
    root.mkdir()
    return root


@pytest.fixture
def write_source(test_pages_dir: Path) -> Callable[[str, str | bytes], Path]:
    """Factory writing test-pages/<name>/source.html and returning its path."""

    def _write(test_name: str, html: str | bytes) -> Path:
        test_dir = test_pages_dir / test_name
        test_dir.mkdir(parents=True, exist_ok=True)
        source_path = test_dir / "source.html"
        content = html.encode("utf-8") if isinstance(html, str) else html
        source_path.write_bytes(content)
        return source_path

    return _write


@pytest.fixture
def mock_session() -> MagicMock:
    """Mock requests.Session returning a 200 response with a small article."""
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response()
    return session


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def fake_checker() -> FakeReaderableChecker:
    return FakeReaderableChecker(readerable=True)


@pytest.fixture
def fake_invoker(fake_engine: FakeEngine, fake_checker: FakeReaderableChecker) -> ExtractionInvoker:
    """Invoker with the real BeautifulSoup parser and the fake engine."""
    return ExtractionInvoker(
        parser=SoupDocumentParser(),
        engine=fake_engine,
        readerable_checker=fake_checker,
    )


@pytest.fixture
def generation_service(
    test_pages_dir: Path,
    mock_session: MagicMock,
    fake_invoker: ExtractionInvoker,
) -> FixtureGenerationService:
    """Fixture generation service wired to the fake engine and mock session."""
    return FixtureGenerationService(
        test_pages_dir=test_pages_dir,
        acquirer=DefaultSourceAcquirer(session=mock_session, timeout=60),
        invoker=fake_invoker,
        serializer=FixtureSerializer(),
    )
