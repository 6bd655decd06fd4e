"""Orchestration models for fixture generation results."""
from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class CaseStage(str, Enum):
    """Stages of generating one test case, in execution order."""

    ACQUIRE = "acquire"
    EXTRACT = "extract"
    SERIALIZE = "serialize"


class CaseResult(BaseModel):
    """
    Outcome of a successfully generated test case.

    Failures are not represented here; they raise CaseGenerationError.

    Attributes:
        test_name: Name of the test case
        test_dir: Directory holding source and expected outputs
        downloaded: Whether source.html was fetched during this run
        readerable: Readerable verdict written to the metadata
        title: Extracted title (for logging)

    Example:
        CaseResult(
            test_name="sample",
            test_dir=Path("test-pages/sample"),
            downloaded=False,
            readerable=True,
            title="Hello",
        )
    """

    test_name: str
    test_dir: Path
    downloaded: bool
    readerable: bool
    title: str = ""
