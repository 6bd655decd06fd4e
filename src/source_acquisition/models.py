"""Source acquisition models."""
from enum import Enum
from pathlib import Path

from pydantic import BaseModel


SOURCE_FILENAME = "source.html"


class AcquisitionDecision(str, Enum):
    """What the acquirer does with a test case's source document."""

    REUSE = "reuse"
    DOWNLOAD = "download"


class SourceDocument(BaseModel):
    """
    Raw HTML source of a test case, stored on disk.

    Attributes:
        path: Location of source.html
        downloaded: True if this run fetched the file, False if it was reused
        status_code: HTTP status of the download (None when reused)
    """

    path: Path
    downloaded: bool = False
    status_code: int | None = None


def decide_acquisition(source_exists: bool, url_supplied: bool) -> AcquisitionDecision:
    """
    Decide whether to reuse the on-disk source or download a fresh copy.

    | source_exists | url_supplied | decision |
    |---------------|--------------|----------|
    | True          | False        | REUSE    |
    | True          | True         | DOWNLOAD |
    | False         | True         | DOWNLOAD |
    | False         | False        | DOWNLOAD |

    The last row has nothing to download from; the download step reports it.
    """
    if source_exists and not url_supplied:
        return AcquisitionDecision.REUSE
    return AcquisitionDecision.DOWNLOAD
