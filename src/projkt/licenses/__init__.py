"""Embedded license catalog.

The table is built on first access and shared for the rest of the process.
Construction happens under a lock, so concurrent first calls build it once
and every caller sees the same read-only mapping.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from projkt.core.models import TemplateCatalog
from projkt.licenses.texts import LICENSE_TEXTS


T = TypeVar("T")


class InitOnce(Generic[T]):
    """Lazily computes a value exactly once, guarded by a lock.

    Example:
        >>> cell = InitOnce(lambda: 42)
        >>> cell.get()
        42
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: T | None = None
        self._ready = False

    def get(self) -> T:
        """Return the value, computing it on the first call."""
        if not self._ready:
            with self._lock:
                if not self._ready:
                    self._value = self._factory()
                    self._ready = True
        return self._value  # type: ignore[return-value]

    @property
    def initialized(self) -> bool:
        return self._ready


def _build_table() -> Mapping[str, str]:
    return MappingProxyType(dict(LICENSE_TEXTS))


_TABLE: InitOnce[Mapping[str, str]] = InitOnce(_build_table)


def license_table() -> Mapping[str, str]:
    """SPDX id to full license text."""
    return _TABLE.get()


def license_ids() -> list[str]:
    """All embedded license identifiers."""
    return list(license_table())


def license_catalog() -> TemplateCatalog:
    """The embedded table as a TemplateCatalog."""
    return TemplateCatalog(
        [(lid, text.encode("utf-8")) for lid, text in license_table().items()]
    )


__all__ = ["InitOnce", "license_catalog", "license_ids", "license_table"]
