"""Base protocol for fixture generation orchestrators."""
from typing import Protocol

from .models import CaseResult


class FixtureGenerator(Protocol):
    """
    Protocol for regenerating expected outputs of test cases.

    The CLI depends only on this protocol, so it can be exercised with a
    mock generator.

    Example:
        class MyGenerator:  # No inheritance needed!
            def generate_test_case(self, test_name, source_url=None) -> CaseResult:
                ...

            def generate_all(self) -> list[CaseResult]:
                ...
    """

    def generate_test_case(self, test_name: str, source_url: str | None = None) -> CaseResult:
        """
        Generate expected outputs for one test case.

        Raises:
            ValidationError: If test_name is empty or not a single path segment
            CaseGenerationError: If any stage fails
        """
        ...

    def generate_all(self) -> list[CaseResult]:
        """
        Regenerate every test case that already has a source document.

        Raises:
            FixtureGenerationError: If the test pages root cannot be read
            CaseGenerationError: For the first case that fails
        """
        ...
