"""Write-then-rename helpers for files other processes read back."""
import logging
import os
import stat
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO


logger = logging.getLogger(__name__)


@contextmanager
def atomic_writer(target_path: Path) -> Iterator[BinaryIO]:
    """
    Open a temporary sibling of target_path for binary writing.

    On normal exit the data is flushed, fsynced and renamed over target_path.
    If the block raises, the temporary file is removed and target_path is left
    exactly as it was.

    Usage:
        with atomic_writer(path) as dst:
            dst.write(data)

    Raises:
        OSError: If the temporary file cannot be created, synced or renamed
    """
    target_path = Path(target_path)
    temp_file = tempfile.NamedTemporaryFile(
        mode="wb",
        dir=target_path.parent,
        prefix=f".{target_path.name}.",
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(temp_file.name)

    try:
        with temp_file:
            yield temp_file
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.chmod(temp_path, _replacement_mode(target_path))
        os.replace(temp_path, target_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {target_path}", extra={"path": str(target_path)})


def atomic_write_bytes(target_path: Path, content: bytes) -> None:
    """Atomically replace target_path with content."""
    with atomic_writer(target_path) as dst:
        dst.write(content)


def _replacement_mode(target_path: Path) -> int:
    """Permission bits for the replacement: the target's own, or 0o666 less the umask."""
    try:
        return stat.S_IMODE(os.stat(target_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
