"""Core domain models for projkt.

These models are pure Python with no I/O dependencies. They represent
templates, the catalog they live in, and the requests used to write them.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Self

from projkt.core.exceptions import ConflictingModesError, ParseError


@dataclass(frozen=True, slots=True)
class Template:
    """A named template body, as produced by a catalog or a picker.

    Attributes:
        name: Catalog key (e.g. "Python" or "MIT").
        content: Raw template bytes.
    """

    name: str
    content: bytes

    def as_pair(self) -> tuple[str, bytes]:
        """Return the (name, content) pair handed to pickers."""
        return self.name, self.content


class TemplateCatalog(Mapping[str, bytes]):
    """Read-only mapping from template name to template body.

    Iteration follows insertion order. When the source contains a name
    twice, the last value wins.

    Example:
        >>> catalog = TemplateCatalog([("A", b"a"), ("B", b"b")])
        >>> catalog.names()
        ['A', 'B']
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, bytes] | list[tuple[str, bytes]] = ()) -> None:
        self._entries: Mapping[str, bytes] = MappingProxyType(dict(entries))

    @classmethod
    def from_raw(cls, raw: Any, source: str = "<memory>") -> Self:
        """Build a catalog from the decoded upstream representation.

        The representation maps a name to an object carrying a ``contents``
        string. Entries without one are skipped.

        Raises:
            ParseError: If the top level is not a JSON object.
        """
        if not isinstance(raw, dict):
            raise ParseError(
                f"Expected a JSON object, got {type(raw).__name__}",
                source=source,
            )

        entries: dict[str, bytes] = {}
        for name, item in raw.items():
            if not isinstance(item, dict):
                continue
            contents = item.get("contents")
            if isinstance(contents, str):
                entries[name] = contents.encode("utf-8")
        return cls(entries)

    @classmethod
    def from_json(cls, payload: bytes, source: str = "<memory>") -> Self:
        """Decode a JSON payload and build a catalog from it.

        Raises:
            ParseError: If the payload is not valid JSON or not an object.
        """
        try:
            raw = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(
                f"Malformed catalog JSON from {source}",
                source=source,
                cause=e,
            ) from e
        return cls.from_raw(raw, source=source)

    def __getitem__(self, name: str) -> bytes:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TemplateCatalog({len(self)} templates)"

    def names(self) -> list[str]:
        """List template names in catalog order."""
        return list(self._entries)

    def templates(self) -> list[Template]:
        """List every entry as a Template."""
        return [Template(name, content) for name, content in self._entries.items()]


class WriteMode(Enum):
    """How an existing target file may be altered."""

    CREATE_ONLY = "create-only"
    OVERWRITE = "overwrite"
    APPEND = "append"

    @classmethod
    def from_flags(cls, overwrite: bool = False, append: bool = False) -> WriteMode:
        """Map CLI-style flags to a mode.

        Raises:
            ConflictingModesError: If both flags are set.
        """
        if overwrite and append:
            raise ConflictingModesError()
        if overwrite:
            return cls.OVERWRITE
        if append:
            return cls.APPEND
        return cls.CREATE_ONLY


@dataclass(frozen=True, slots=True)
class WriteRequest:
    """A single file write.

    Attributes:
        target: File to create or modify.
        content: Bytes to write.
        mode: What to do when the target already exists.
    """

    target: Path
    content: bytes
    mode: WriteMode = WriteMode.CREATE_ONLY


@dataclass(frozen=True, slots=True)
class WriteOutcome:
    """Result of a write as reported back to the caller.

    Attributes:
        path: The target file.
        changed: Whether the file on disk was created or modified.
    """

    path: Path
    changed: bool


def combine(templates: list[Template]) -> bytes:
    """Concatenate template bodies in selection order."""
    return b"".join(t.content for t in templates)
