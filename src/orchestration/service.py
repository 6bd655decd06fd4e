"""
Orchestration service for fixture generation.

Coordinates the per-case workflow: Acquire → Extract → Serialize,
and the batch workflow that repeats it for every existing test case.
"""
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from src.article_extraction.models import ExtractionResult
from src.article_extraction.service import ExtractionInvoker
from src.errors import (
    CaseGenerationError,
    FixtureGenerationError,
    ValidationError,
)
from src.fixture_serialization.service import FixtureSerializer
from src.source_acquisition.base import SourceAcquirer
from src.source_acquisition.models import SOURCE_FILENAME, SourceDocument
from src.source_acquisition.service import DefaultSourceAcquirer, file_exists
from .models import CaseResult, CaseStage


logger = logging.getLogger(__name__)

DEFAULT_TEST_PAGES_DIR = Path("test-pages")

T = TypeVar("T")


class FixtureGenerationService:
    """
    Generates expected outputs for readability test cases.

    Each test case is a directory under test_pages_dir. Generating it runs:
    1. Acquire source.html (reuse, or download when a URL is given or the file is missing)
    2. Extract the article and readerable flag from the source
    3. Serialize expected.html and expected-metadata.json

    A failure at any stage stops the case and is raised as a
    CaseGenerationError naming the case and the stage. Nothing is retried.

    Example:
        # Default configuration (production)
        service = FixtureGenerationService(test_pages_dir=Path("test-pages"))
        service.generate_test_case("sample", "https://example.com/article")
        service.generate_all()

        # Custom configuration (testing)
        service = FixtureGenerationService(
            test_pages_dir=tmp_path,
            acquirer=DefaultSourceAcquirer(session=mock_session),
            invoker=ExtractionInvoker(parser=..., engine=..., readerable_checker=...),
            serializer=FixtureSerializer(renderer=...),
        )
    """

    def __init__(
        self,
        test_pages_dir: Path = DEFAULT_TEST_PAGES_DIR,
        acquirer: SourceAcquirer | None = None,
        invoker: ExtractionInvoker | None = None,
        serializer: FixtureSerializer | None = None,
    ):
        """
        Initialize orchestration service with dependencies.

        Args:
            test_pages_dir: Root directory holding one directory per test case
            acquirer: Source acquirer (default: DefaultSourceAcquirer())
            invoker: Extraction invoker (default: ExtractionInvoker())
            serializer: Fixture serializer (default: FixtureSerializer())
        """
        self.test_pages_dir = Path(test_pages_dir)
        self.acquirer = acquirer or DefaultSourceAcquirer()
        self.invoker = invoker or ExtractionInvoker()
        self.serializer = serializer or FixtureSerializer()

    def generate_test_case(self, test_name: str, source_url: str | None = None) -> CaseResult:
        """
        Generate expected outputs for one test case.

        Args:
            test_name: Name of the test case directory
            source_url: Optional URL forcing a (re)download of source.html

        Returns:
            CaseResult describing the generated case

        Raises:
            ValidationError: If test_name is empty or not a single path segment
            CaseGenerationError: If acquisition, extraction or serialization fails
        """
        _validate_test_name(test_name)
        test_dir = self.test_pages_dir / test_name

        logger.info(f"Generating test for {test_name}", extra={"test_name": test_name})

        source: SourceDocument = self._run_stage(
            test_name, CaseStage.ACQUIRE, lambda: self.acquirer.acquire(test_dir, source_url)
        )
        extraction: ExtractionResult = self._run_stage(
            test_name, CaseStage.EXTRACT, lambda: self.invoker.invoke(source)
        )
        self._run_stage(
            test_name,
            CaseStage.SERIALIZE,
            lambda: self.serializer.serialize(extraction.article, extraction.readerable, test_dir),
        )

        return CaseResult(
            test_name=test_name,
            test_dir=test_dir,
            downloaded=source.downloaded,
            readerable=extraction.readerable,
            title=extraction.article.title,
        )

    def generate_all(self) -> list[CaseResult]:
        """
        Regenerate every test case that already has a source.html.

        Cases run in name order, always reusing their existing source.
        Entries that are not directories, or have no source.html, are skipped.
        The first failing case aborts the run; earlier outputs stay on disk.

        Returns:
            CaseResult for each generated case, in order

        Raises:
            FixtureGenerationError: If the test pages directory cannot be read
            CaseGenerationError: For the first case that fails
        """
        test_names = self.list_test_cases()
        logger.info(
            f"Regenerating {len(test_names)} test cases in {self.test_pages_dir}",
            extra={"path": str(self.test_pages_dir)},
        )

        results = []
        for test_name in test_names:
            results.append(self.generate_test_case(test_name))

        logger.info(f"Regenerated {len(results)} test cases")
        return results

    def list_test_cases(self) -> list[str]:
        """
        Return the names of test cases eligible for regeneration.

        Raises:
            FixtureGenerationError: If the test pages directory cannot be read
        """
        try:
            entries = sorted(self.test_pages_dir.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise FixtureGenerationError(
                f"failed to read test dir {self.test_pages_dir}: {e}"
            ) from e

        test_names = []
        for entry in entries:
            if not entry.is_dir():
                logger.debug(f"Skipping {entry}: not a directory")
                continue
            if not file_exists(entry / SOURCE_FILENAME):
                logger.debug(f"Skipping {entry}: no {SOURCE_FILENAME}")
                continue
            test_names.append(entry.name)

        return test_names

    def _run_stage(self, test_name: str, stage: CaseStage, action: Callable[[], T]) -> T:
        """Run one stage, attaching the case identity to any failure."""
        try:
            return action()
        except Exception as e:
            logger.error(
                f"Stage {stage.value} failed for {test_name}: {e}",
                extra={"test_name": test_name, "stage": stage.value},
            )
            raise CaseGenerationError(test_name, stage.value, e) from e


def _validate_test_name(test_name: str) -> None:
    """
    Ensure test_name is usable as a single directory name.

    Raises:
        ValidationError: If empty, "." or "..", or containing a path separator
    """
    if not test_name:
        raise ValidationError("test name must be defined")

    separators = {"/", os.sep, "\x00"}
    if os.altsep:
        separators.add(os.altsep)

    if test_name in {".", ".."} or any(sep in test_name for sep in separators):
        raise ValidationError(f"test name {test_name!r} must be a single directory name")
