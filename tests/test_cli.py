"""Tests for the generate-test command line."""
from pathlib import Path
from unittest.mock import patch

import pytest

from src.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main, validate_arguments
from src.errors import CaseGenerationError, FetchError, UsageError, ValidationError
from src.orchestration.models import CaseResult


SOURCE_URL = "https://example.com/articles/1"


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring global logging during tests."""
    with patch("src.cli.configure_logging"), patch("src.cli.load_dotenv"):
        yield


@pytest.fixture
def mock_service_class():
    with patch("src.cli.FixtureGenerationService") as service_class:
        service = service_class.return_value
        service.generate_test_case.return_value = CaseResult(
            test_name="sample", test_dir=Path("test-pages/sample"), downloaded=False, readerable=True
        )
        service.generate_all.return_value = []
        yield service_class


class TestArgumentCount:
    def test_no_arguments_is_a_usage_error(self, mock_service_class):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == EXIT_USAGE
        mock_service_class.assert_not_called()

    def test_more_than_two_arguments_is_a_usage_error(self, mock_service_class):
        with pytest.raises(SystemExit) as exc_info:
            main(["sample", SOURCE_URL, "extra"])

        assert exc_info.value.code == EXIT_USAGE
        mock_service_class.assert_not_called()

    def test_empty_test_name_is_a_usage_error(self, mock_service_class):
        with pytest.raises(SystemExit) as exc_info:
            main([""])

        assert exc_info.value.code == EXIT_USAGE
        mock_service_class.assert_not_called()


class TestValidateArguments:
    def test_empty_test_name_raises_usage_error(self):
        with pytest.raises(UsageError):
            validate_arguments("", None)

    def test_empty_url_is_treated_as_absent(self):
        assert validate_arguments("sample", "") == ("sample", None)

    def test_invalid_url_raises_validation_error(self):
        with pytest.raises(ValidationError):
            validate_arguments("sample", "not-a-url")


class TestSingleCase:
    def test_generates_named_case(self, mock_service_class):
        assert main(["sample"]) == EXIT_OK

        mock_service_class.return_value.generate_test_case.assert_called_once_with("sample", None)

    def test_passes_source_url(self, mock_service_class):
        assert main(["sample", SOURCE_URL]) == EXIT_OK

        mock_service_class.return_value.generate_test_case.assert_called_once_with("sample", SOURCE_URL)

    def test_invalid_url_fails_before_any_io(self, mock_service_class, tmp_path: Path):
        exit_code = main(["sample", "not-a-url", "--test-pages-dir", str(tmp_path / "pages")])

        assert exit_code == EXIT_FAILURE
        mock_service_class.assert_not_called()
        assert not (tmp_path / "pages").exists()

    def test_case_failure_exits_non_zero(self, mock_service_class):
        mock_service_class.return_value.generate_test_case.side_effect = CaseGenerationError(
            "sample", "acquire", FetchError("timed out")
        )

        assert main(["sample", SOURCE_URL]) == EXIT_FAILURE

    def test_options_configure_service(self, mock_service_class, tmp_path: Path):
        main(["sample", "--test-pages-dir", str(tmp_path), "--timeout", "5"])

        kwargs = mock_service_class.call_args.kwargs
        assert kwargs["test_pages_dir"] == tmp_path
        assert kwargs["acquirer"].timeout == 5.0

    def test_non_positive_timeout_is_a_usage_error(self, mock_service_class):
        with pytest.raises(SystemExit) as exc_info:
            main(["sample", "--timeout", "0"])

        assert exc_info.value.code == EXIT_USAGE


class TestAllCases:
    def test_all_regenerates_every_case(self, mock_service_class):
        assert main(["all"]) == EXIT_OK

        service = mock_service_class.return_value
        service.generate_all.assert_called_once_with()
        service.generate_test_case.assert_not_called()

    def test_source_url_is_ignored_for_all(self, mock_service_class):
        assert main(["all", SOURCE_URL]) == EXIT_OK

        mock_service_class.return_value.generate_all.assert_called_once_with()

    def test_batch_failure_exits_non_zero(self, mock_service_class):
        mock_service_class.return_value.generate_all.side_effect = CaseGenerationError(
            "b", "extract", FetchError("boom")
        )

        assert main(["all"]) == EXIT_FAILURE
