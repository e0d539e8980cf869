"""Filesystem helpers shared by the cache and writer adapters."""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


def atomic_write_bytes(target: Path, content: bytes) -> None:
    """Replace target's contents in one rename.

    The bytes go to a temporary file in the same directory, which is then
    renamed over target, so readers see either the old or the new file.
    A symlinked target is followed and the file it points to is replaced.
    An existing file keeps its permission bits.

    Raises:
        OSError: If any step fails. The temporary file is removed.
    """
    target = target.resolve()
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        if target.exists():
            shutil.copymode(target, tmp_name)
        else:
            # mkstemp creates 0600 files
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp_name, 0o666 & ~umask)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
