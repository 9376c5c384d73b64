"""Atomic manifest output.

The manifest only becomes visible at its final path once it has been written
completely, so an aborted build never leaves a truncated libby.json behind.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from typing import TYPE_CHECKING

import structlog

from libby_manifest.errors import OutputWriteError

if TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger()

# Mode a plain open() would create, before the umask is applied.
_DEFAULT_FILE_MODE = 0o666


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_atomic(path: Path, content: str) -> None:
    """Write text to path through a temporary file and a rename.

    Args:
        path: Final destination.
        content: Complete document to write (UTF-8).

    Raises:
        OutputWriteError: If the destination cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=path.parent,
        )
    except OSError as err:
        raise OutputWriteError(path, err) from err

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates the file owner-only; publish it with regular permissions.
        os.chmod(tmp_name, _DEFAULT_FILE_MODE & ~_current_umask())
        os.replace(tmp_name, path)
    except OSError as err:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise OutputWriteError(path, err) from err

    logger.debug("manifest_written", path=str(path), size=len(content))
