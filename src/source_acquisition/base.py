"""Base protocol for source acquisition strategies."""
from pathlib import Path
from typing import Protocol

from .models import SourceDocument


class SourceAcquirer(Protocol):
    """
    Protocol for resolving a test case directory to its source document.

    Any class with a matching acquire() method satisfies this protocol,
    which lets the orchestration layer run against an in-memory fake in tests.
    """

    def acquire(self, test_dir: Path, source_url: str | None = None) -> SourceDocument:
        """
        Return the source document for a test case, downloading it if needed.

        Args:
            test_dir: Directory of the test case
            source_url: Optional URL forcing a (re)download

        Returns:
            SourceDocument pointing at test_dir/source.html

        Raises:
            ValidationError: If source_url is not a valid absolute URL
            FetchError: If the download fails at the transport level
        """
        ...
