"""Source acquisition service: reuse or download a test case's source.html."""
import logging
from pathlib import Path
from urllib.parse import urlparse

import requests

from src.atomic_files import atomic_writer
from src.errors import FetchError, ValidationError
from .models import (
    SOURCE_FILENAME,
    AcquisitionDecision,
    SourceDocument,
    decide_acquisition,
)


logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 60.0
DOWNLOAD_CHUNK_SIZE = 64 * 1024


class DefaultSourceAcquirer:
    """
    Resolve a test case to its source document, downloading when required.

    The HTTP session is injected rather than shared process-wide, so callers
    decide its lifetime and tests can pass a mock.

    Example:
        with requests.Session() as session:
            acquirer = DefaultSourceAcquirer(session=session, timeout=60)
            source = acquirer.acquire(Path("test-pages/sample"), "https://example.com/a")
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
    ):
        """
        Initialize acquirer.

        Args:
            session: HTTP session used for downloads (default: new requests.Session)
            timeout: Request timeout in seconds (default: one minute)
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def acquire(self, test_dir: Path, source_url: str | None = None) -> SourceDocument:
        """
        Return the source document for a test case.

        Reuses test_dir/source.html when it exists and no URL is given;
        otherwise downloads source_url over it.

        Args:
            test_dir: Directory of the test case
            source_url: Optional URL forcing a (re)download

        Returns:
            SourceDocument for test_dir/source.html

        Raises:
            ValidationError: If source_url is not a valid absolute URL
            FetchError: If there is no URL to download from or the transport fails
        """
        if source_url:
            validate_source_url(source_url)

        source_path = Path(test_dir) / SOURCE_FILENAME
        decision = decide_acquisition(
            source_exists=file_exists(source_path),
            url_supplied=bool(source_url),
        )

        if decision is AcquisitionDecision.REUSE:
            logger.info(f"Reusing existing source {source_path}", extra={"path": str(source_path)})
            return SourceDocument(path=source_path, downloaded=False)

        if not source_url:
            raise FetchError(
                f"{source_path} does not exist and no source URL was supplied to download it from"
            )

        logger.info(
            f"Downloading source from {source_url}",
            extra={"url": source_url, "path": str(source_path)},
        )
        status_code = self._download_web_page(source_url, source_path)
        return SourceDocument(path=source_path, downloaded=True, status_code=status_code)

    def _download_web_page(self, url: str, dst_path: Path) -> int:
        """
        Stream url into dst_path, replacing it only once the body is complete.

        The response body is saved whatever the status code; only transport
        failures are errors.

        Returns:
            HTTP status code of the response

        Raises:
            FetchError: On connection, DNS, timeout or streaming failures,
                or when the file cannot be saved
        """
        try:
            with self.session.get(url, timeout=self.timeout, stream=True) as response:
                if not response.ok:
                    logger.warning(
                        f"Saving body of non-success response {response.status_code} from {url}",
                        extra={"url": url, "status_code": response.status_code},
                    )
                try:
                    dst_path.parent.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise FetchError(f"failed to create directory {dst_path.parent}: {e}") from e
                with atomic_writer(dst_path) as dst:
                    for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        dst.write(chunk)
                return response.status_code
        except requests.RequestException as e:
            raise FetchError(f"failed to fetch {url}: {e}") from e
        except OSError as e:
            raise FetchError(f"failed to save {dst_path}: {e}") from e


def validate_source_url(url: str) -> str:
    """
    Check that url is a syntactically valid absolute URL.

    Args:
        url: Candidate source URL

    Returns:
        The URL, unchanged

    Raises:
        ValidationError: If the URL is empty, padded with whitespace, or lacks
            a scheme or host
    """
    if not url or not url.strip():
        raise ValidationError("URL cannot be empty")

    if url != url.strip():
        raise ValidationError(f"URL {url!r} is not valid: surrounding whitespace")

    try:
        parsed_url = urlparse(url)
    except ValueError as e:
        raise ValidationError(f"URL {url} is not valid: {e}") from e

    if not parsed_url.scheme or not parsed_url.netloc:
        raise ValidationError(f"URL {url} is not valid: must include scheme and domain")

    return url


def file_exists(path: Path) -> bool:
    """Return True if path exists and is not a directory."""
    return path.exists() and not path.is_dir()
