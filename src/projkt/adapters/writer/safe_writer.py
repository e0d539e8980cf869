"""Filesystem writer that refuses to clobber existing files by default."""

from __future__ import annotations

from typing import TYPE_CHECKING

from projkt.adapters.fs import atomic_write_bytes
from projkt.core.exceptions import WriteError
from projkt.core.models import WriteMode


if TYPE_CHECKING:
    from projkt.core.models import WriteRequest


class SafeWriter:
    """Writes output files according to their WriteMode.

    Implements WriterPort.

    - Missing target: created exclusively, whatever the mode. A dangling
      symlink counts as existing.
    - Existing target, OVERWRITE: content replaced through any symlink,
      permission bits kept.
    - Existing target, APPEND: content added at the end.
    - Existing target, CREATE_ONLY: left untouched.
    """

    def write(self, request: WriteRequest) -> bool:
        """Apply the write policy.

        Args:
            request: Target, content and mode.

        Returns:
            True if the file on disk was created or modified.

        Raises:
            WriteError: If the filesystem rejects the write.
        """
        target = request.target
        try:
            # "xb" refuses any existing entry, dangling symlinks included
            try:
                with target.open("xb") as f:
                    f.write(request.content)
                return True
            except FileExistsError:
                pass

            if request.mode is WriteMode.OVERWRITE:
                atomic_write_bytes(target, request.content)
                return True

            if request.mode is WriteMode.APPEND:
                with target.open("ab") as f:
                    f.write(request.content)
                return True
        except OSError as e:
            raise WriteError(
                f"Cannot write {target}: {e.strerror or e}",
                path=target,
                cause=e,
            ) from e

        return False
