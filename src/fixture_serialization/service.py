"""Fixture serializer: persist extracted articles as expected outputs."""
import logging
from pathlib import Path

from src.article_extraction.base import NodeRenderer
from src.article_extraction.engines.soup import SoupNodeRenderer
from src.article_extraction.models import Article
from src.atomic_files import atomic_write_bytes
from src.errors import SerializationError
from .models import EXPECTED_HTML_FILENAME, EXPECTED_METADATA_FILENAME, FixtureMetadata


logger = logging.getLogger(__name__)


class FixtureSerializer:
    """
    Write expected.html and expected-metadata.json for a test case.

    Each file is written to a temporary sibling, synced, then renamed into
    place, so a reader never sees a partial file. The pair is not atomic:
    if the metadata write fails, the new expected.html stays on disk.
    """

    def __init__(self, renderer: NodeRenderer | None = None):
        """
        Initialize serializer.

        Args:
            renderer: Node renderer (default: SoupNodeRenderer())
        """
        self.renderer = renderer or SoupNodeRenderer()

    def serialize(self, article: Article, readerable: bool, test_dir: Path) -> None:
        """
        Write both expected output files into test_dir.

        Args:
            article: Extracted article
            readerable: Readerable verdict for the original document
            test_dir: Directory of the test case

        Raises:
            SerializationError: If either file cannot be rendered, written or synced
        """
        test_dir = Path(test_dir)

        html_path = test_dir / EXPECTED_HTML_FILENAME
        try:
            html = self.renderer.render(article.node)
        except Exception as e:
            raise SerializationError(f"failed to render result to {html_path}: {e}", html_path) from e
        self._write(html_path, html)

        metadata_path = test_dir / EXPECTED_METADATA_FILENAME
        metadata = FixtureMetadata.from_article(article, readerable)
        self._write(metadata_path, metadata.to_json().encode("utf-8"))

        logger.info(
            f"Wrote expected output to {test_dir}",
            extra={"path": str(test_dir), "readerable": readerable},
        )

    def _write(self, path: Path, content: bytes) -> None:
        try:
            atomic_write_bytes(path, content)
        except OSError as e:
            raise SerializationError(f"failed to write {path}: {e}", path) from e
