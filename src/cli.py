"""
Command line entry point for the readability fixture generator.

Usage:
    # Regenerate one case, reusing test-pages/<name>/source.html if present
    generate-test <test-name>

    # Regenerate one case, forcing a fresh download of its source
    generate-test <test-name> <source-url>

    # Regenerate every case under test-pages that has a source.html
    generate-test all

Exit status: 0 on success, 1 when generation fails, 2 on usage errors.
"""
import argparse
import sys

import requests
from dotenv import load_dotenv
from loguru import logger

from config.generator_config import GeneratorConfig
from config.log_config import configure_logging
from src.errors import CaseGenerationError, FixtureGenerationError, UsageError, ValidationError
from src.orchestration.base import FixtureGenerator
from src.orchestration.service import FixtureGenerationService
from src.source_acquisition.service import DefaultSourceAcquirer, validate_source_url


ALL_TESTS = "all"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-test",
        description="Generate expected readability output for test pages.",
    )
    parser.add_argument(
        "test_name",
        help=f"test case directory name, or '{ALL_TESTS}' to regenerate every case",
    )
    parser.add_argument(
        "source_url",
        nargs="?",
        default=None,
        help="URL to (re)download source.html from",
    )
    parser.add_argument(
        "--test-pages-dir",
        default=None,
        help="root directory of test cases (default: $TEST_PAGES_DIR or test-pages)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="download timeout in seconds (default: $FETCH_TIMEOUT_SECONDS or 60)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="log level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="emit JSON structured logs",
    )
    return parser


def validate_arguments(test_name: str, source_url: str | None) -> tuple[str, str | None]:
    """
    Check positional arguments before any I/O.

    Returns:
        Tuple of (test_name, source_url) with an empty URL normalized to None

    Raises:
        UsageError: If test_name is empty
        ValidationError: If source_url is given but not a valid absolute URL
    """
    if not test_name:
        raise UsageError("test name must be defined")

    if not source_url:
        return test_name, None

    validate_source_url(source_url)
    return test_name, source_url


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        test_name, source_url = validate_arguments(args.test_name, args.source_url)
    except UsageError as e:
        parser.error(str(e))
    except ValidationError as e:
        logger.error(f"{e}")
        return EXIT_FAILURE

    try:
        config = GeneratorConfig(
            test_pages_dir=args.test_pages_dir,
            fetch_timeout=args.timeout,
            log_level=args.log_level,
            log_json=args.log_json,
        )
    except ValueError as e:
        parser.error(str(e))

    configure_logging(log_level=config.log_level, enable_json=config.log_json)

    if test_name == ALL_TESTS and source_url:
        logger.warning(f"Ignoring source URL {source_url}: '{ALL_TESTS}' reuses existing sources")

    with requests.Session() as session:
        service: FixtureGenerator = FixtureGenerationService(
            test_pages_dir=config.test_pages_dir,
            acquirer=DefaultSourceAcquirer(session=session, timeout=config.fetch_timeout),
        )
        try:
            if test_name == ALL_TESTS:
                results = service.generate_all()
                logger.success(f"Generated {len(results)} test cases")
            else:
                result = service.generate_test_case(test_name, source_url)
                logger.success(f"Generated test for {result.test_name} in {result.test_dir}")
        except CaseGenerationError as e:
            logger.error(
                f"failed to generate test for {e.test_name} during {e.stage}: {e.error}"
            )
            return EXIT_FAILURE
        except FixtureGenerationError as e:
            logger.error(f"failed to generate test for {test_name}: {e}")
            return EXIT_FAILURE

    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
