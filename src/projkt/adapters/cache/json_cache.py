"""File-based cache adapter implementing CachePort."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path

from projkt.adapters.fs import atomic_write_bytes
from projkt.config import CACHE_TTL
from projkt.core.exceptions import CacheIOError


def is_expired(age: timedelta | None, ttl: timedelta = CACHE_TTL) -> bool:
    """Decide expiry from an entry's age.

    A missing entry (``age is None``) is expired, as is one whose age
    reaches the TTL exactly. A negative age means the timestamp lies in
    the future and cannot be trusted, so it is expired too.
    """
    return age is None or age < timedelta(0) or age >= ttl


class JsonCacheStore:
    """Stores one raw JSON payload at a fixed path.

    The entry's creation time is the file's modification time: every
    write replaces the whole file through a rename, so the two coincide.

    Attributes:
        cache_path: The JSON file backing the cache.
    """

    def __init__(
        self,
        cache_path: Path,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the store.

        Args:
            cache_path: Location of the JSON file.
            clock: Returns the current time as a POSIX timestamp.
        """
        self.cache_path = cache_path
        self._clock = clock

    def path(self) -> Path:
        """Get the path of the cache file."""
        return self.cache_path

    def age(self) -> timedelta:
        """Time elapsed since the entry was written.

        Raises:
            CacheIOError: If the file is missing or cannot be stat'ed.
        """
        try:
            created = self.cache_path.stat().st_mtime
        except OSError as e:
            raise CacheIOError(
                f"Cannot stat cache file {self.cache_path}",
                source=str(self.cache_path),
                cause=e,
            ) from e
        return timedelta(seconds=self._clock() - created)

    def is_expired(self) -> bool:
        """True when the file is missing or is_expired() rejects its age.

        Raises:
            CacheIOError: If the file exists but its metadata is unreadable.
        """
        try:
            age = self.age()
        except CacheIOError as e:
            if isinstance(e.cause, FileNotFoundError):
                return True
            raise
        return is_expired(age)

    def read(self) -> bytes:
        """Load the raw payload.

        Raises:
            CacheIOError: If the file is missing or unreadable.
        """
        try:
            return self.cache_path.read_bytes()
        except OSError as e:
            raise CacheIOError(
                f"Cannot read cache file {self.cache_path}",
                source=str(self.cache_path),
                cause=e,
            ) from e

    def write(self, payload: bytes) -> None:
        """Replace the cache file's contents with payload.

        Parent directories are created as needed.

        Raises:
            CacheIOError: If any filesystem step fails.
        """
        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write_bytes(self.cache_path, payload)
        except OSError as e:
            raise CacheIOError(
                f"Cannot write cache file {self.cache_path}",
                source=str(self.cache_path),
                cause=e,
            ) from e
