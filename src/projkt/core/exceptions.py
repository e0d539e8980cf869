"""Domain exceptions for projkt.

All library errors inherit from ProjktError, allowing callers to catch
any projkt failure with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class ProjktError(Exception):
    """Base class for all projkt exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class FetchError(ProjktError):
    """Base class for errors raised while obtaining a template catalog.

    Attributes:
        source: URL or cache path the catalog was being read from.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        source: str,
        cause: Exception | None = None,
    ) -> None:
        self.source = source
        self.cause = cause
        super().__init__(message)


class NetworkError(FetchError):
    """Raised when the remote catalog is unreachable or answers non-2xx.

    Attributes:
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, source=source, cause=cause)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking connectivity."""
        return f"Check your network connection and that {self.source} is reachable"


class CacheIOError(FetchError):
    """Raised when the catalog cache file cannot be read, written or stat'ed."""

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the cache location."""
        return f"Check permissions on {self.source} or set PROJKT_CACHE_DIR"


class ParseError(FetchError):
    """Raised when a remote or cached catalog payload is not valid catalog JSON."""

    @property
    def recovery_hint(self) -> str:
        """Suggest discarding the bad payload."""
        if self.source.startswith(("http://", "https://")):
            return "The remote catalog returned unexpected data, try again later"
        return f"Delete {self.source} to force a fresh download"


class TemplateNotFoundError(ProjktError):
    """Raised when a requested template doesn't exist in the catalog.

    Attributes:
        name: The template name that was not found.
        available: List of available template names.
    """

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available if available is not None else []
        message = f"Template '{name}' not found"
        if self.available:
            message += f", available: {', '.join(self.available)}"
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest listing the catalog."""
        return "Run 'projkt list' to see available names (names are case-sensitive)"


class WriteError(ProjktError):
    """Raised when an output file cannot be written.

    Attributes:
        path: The target file.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the destination."""
        return f"Check that {self.path.parent} exists and is writable"


class ConflictingModesError(ProjktError, ValueError):
    """Raised when both overwrite and append are requested for one write."""

    def __init__(self) -> None:
        super().__init__("--overwrite and --append are mutually exclusive")

    @property
    def recovery_hint(self) -> str:
        """Suggest picking one mode."""
        return "Pass either --overwrite or --append, not both"
