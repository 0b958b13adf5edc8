"""Probe file naming, content and creation."""

import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from bucket_tester.core import get_logger
from bucket_tester.core.exceptions import LocalIOError

logger = get_logger(__name__)

PROBE_PREFIX = "test_"
PROBE_SUFFIX = ".txt"
DOWNLOAD_PREFIX = "download_"


@dataclass(frozen=True)
class ProbeFile:
    """A transient local file used to exercise a bucket.

    The probe's base name doubles as the object key, both for the upload and
    for the download. Only the local download destination differs.
    """

    name: str
    content: str
    directory: Path

    @property
    def path(self) -> Path:
        return self.directory / self.name

    @property
    def download_path(self) -> Path:
        return self.directory / f"{DOWNLOAD_PREFIX}{self.name}"

    @property
    def payload(self) -> bytes:
        return self.content.encode("utf-8")


def probe_file_name(epoch_millis: int) -> str:
    """Build the probe name for a millisecond timestamp.

    Two runs in the same directory within the same millisecond get the same
    name; exclusive creation makes the second one fail rather than overwrite.
    """
    return f"{PROBE_PREFIX}{epoch_millis}{PROBE_SUFFIX}"


def new_probe_file(
    directory: Optional[Path] = None,
    clock: Optional[Callable[[], float]] = None,
) -> ProbeFile:
    """Describe a new probe file without touching the filesystem.

    Args:
        directory: Where the probe and its download live, defaults to the
            current working directory
        clock: Source of seconds since the epoch, defaults to time.time

    Returns:
        ProbeFile named after the current time in milliseconds
    """
    epoch_millis = int((clock or time.time)() * 1000)
    created_at = datetime.fromtimestamp(epoch_millis / 1000)
    return ProbeFile(
        name=probe_file_name(epoch_millis),
        content=f"This test file was created at {created_at.isoformat()}.",
        directory=Path() if directory is None else Path(directory),
    )


def create_probe_file(probe: ProbeFile) -> None:
    """Write the probe file, refusing to replace an existing file.

    Raises:
        LocalIOError: If the file already exists or cannot be written
    """
    try:
        with open(probe.path, "xb") as f:
            f.write(probe.payload)
    except OSError as e:
        raise LocalIOError(f"The probe file could not be created: {e}") from e

    logger.info("Probe file created", path=str(probe.path), size=len(probe.payload))
