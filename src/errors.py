"""Exception hierarchy for fixture generation.

Every failure raised by the pipeline derives from FixtureGenerationError so
callers (the CLI, the batch driver) can catch one type. Stage-specific errors
are raised by the component that failed and wrapped once, by the case driver,
in a CaseGenerationError that names the test case and the failing stage.
"""
from pathlib import Path


class FixtureGenerationError(Exception):
    """Base class for all fixture generation failures."""


class UsageError(FixtureGenerationError):
    """Command line arguments are missing, extra, or empty."""


class ValidationError(FixtureGenerationError):
    """Input (source URL, test name) is syntactically invalid."""


class FetchError(FixtureGenerationError):
    """Transport-level failure while downloading a source document."""


class ParseError(FixtureGenerationError):
    """Source document could not be opened or parsed."""


class ExtractionError(FixtureGenerationError):
    """Extraction engine declined or failed to produce an article."""


class SerializationError(FixtureGenerationError):
    """An expected output file could not be written or synced."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class CaseGenerationError(FixtureGenerationError):
    """
    A stage failure annotated with the identity of the test case.

    Attributes:
        test_name: Name of the test case that failed
        stage: Pipeline stage that failed ("acquire", "extract", "serialize")
        error: The original stage error (also chained as __cause__)
    """

    def __init__(self, test_name: str, stage: str, error: Exception):
        super().__init__(f"failed to generate test for {test_name} ({stage}): {error}")
        self.test_name = test_name
        self.stage = stage
        self.error = error
