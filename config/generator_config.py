"""Fixture generator configuration."""
import os
from pathlib import Path


DEFAULT_TEST_PAGES_DIR = "test-pages"
DEFAULT_FETCH_TIMEOUT_SECONDS = 60.0


class GeneratorConfig:
    """
    Runtime settings for the fixture generator.

    Explicit arguments win over environment variables, which win over the
    defaults. Call load_dotenv() before constructing to pick up a .env file.

    Environment:
        TEST_PAGES_DIR: Root directory of test cases (default: test-pages)
        FETCH_TIMEOUT_SECONDS: HTTP timeout for source downloads (default: 60)
        LOG_LEVEL: Log level name (default: INFO)
        LOG_JSON: "1"/"true" to emit JSON logs (default: off)
    """

    def __init__(
        self,
        test_pages_dir: str | Path | None = None,
        fetch_timeout: float | None = None,
        log_level: str | None = None,
        log_json: bool | None = None,
    ):
        self.test_pages_dir: Path = Path(
            test_pages_dir or os.getenv("TEST_PAGES_DIR", DEFAULT_TEST_PAGES_DIR)
        )
        self.fetch_timeout: float = (
            fetch_timeout
            if fetch_timeout is not None
            else _env_float("FETCH_TIMEOUT_SECONDS", DEFAULT_FETCH_TIMEOUT_SECONDS)
        )
        self.log_level: str = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
        self.log_json: bool = (
            log_json if log_json is not None else _env_bool("LOG_JSON", False)
        )

        if self.fetch_timeout <= 0:
            raise ValueError(f"Fetch timeout must be positive, got {self.fetch_timeout}")


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}
