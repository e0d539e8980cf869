"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from datetime import timedelta
    from pathlib import Path

    from projkt.core.models import WriteRequest

Candidate = tuple[str, bytes]


@runtime_checkable
class CachePort(Protocol):
    """Single-blob local cache for a raw catalog payload."""

    def path(self) -> Path:
        """Location of the cache file."""
        ...

    def age(self) -> timedelta:
        """Time since the cached entry was created.

        Raises:
            CacheIOError: If the file is missing or cannot be stat'ed.
        """
        ...

    def is_expired(self) -> bool:
        """True when the entry is missing or older than the TTL."""
        ...

    def read(self) -> bytes:
        """Load the raw payload.

        Raises:
            CacheIOError: If the file is missing or unreadable.
        """
        ...

    def write(self, payload: bytes) -> None:
        """Atomically replace the cached payload.

        Raises:
            CacheIOError: If the file cannot be written.
        """
        ...


@runtime_checkable
class RemoteCatalogPort(Protocol):
    """Remote source of a raw catalog payload."""

    @property
    def url(self) -> str:
        """Where the catalog is fetched from."""
        ...

    def fetch(self) -> bytes:
        """Download the raw catalog body.

        Raises:
            NetworkError: If the endpoint is unreachable or answers non-2xx.
        """
        ...


@runtime_checkable
class WriterPort(Protocol):
    """Writes output files according to a WriteMode."""

    def write(self, request: WriteRequest) -> bool:
        """Perform the write and report whether the file changed."""
        ...


@runtime_checkable
class PickerPort(Protocol):
    """Interactive selection of catalog entries.

    The picker enforces arity: with ``multi=False`` it returns at most one
    candidate. Returning an empty list means the user picked nothing.
    """

    def pick(self, candidates: Sequence[Candidate], multi: bool) -> list[Candidate]:
        """Let the user choose from candidates, preserving their pick order."""
        ...
