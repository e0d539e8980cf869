"""Core domain services for projkt.

Each service performs one fetch-or-load, select, write cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from projkt.core.models import (
    TemplateCatalog,
    WriteMode,
    WriteOutcome,
    WriteRequest,
    combine,
)
from projkt.core.selection import selection_for


if TYPE_CHECKING:
    from collections.abc import Callable

    from projkt.core.fetcher import CatalogFetcher
    from projkt.core.ports import PickerPort, WriterPort


GITIGNORE_FILE = ".gitignore"
LICENSE_PREFIX = "LICENSE-"


@dataclass(frozen=True, slots=True)
class GitIgnoreOptions:
    """Options for generating a .gitignore.

    Attributes:
        dest: Directory the .gitignore is written to.
        name: Exact template name; None opens the interactive picker.
        overwrite: Replace an existing file.
        append: Add to the end of an existing file.
    """

    dest: Path = field(default_factory=Path.cwd)
    name: str | None = None
    overwrite: bool = False
    append: bool = False


@dataclass(frozen=True, slots=True)
class LicenseOptions:
    """Options for generating LICENSE-<id> files.

    Attributes:
        names: SPDX ids to write; empty opens the interactive picker.
        overwrite: Replace existing license files.
        author: Shown in the post-write advisory only.
        email: Shown in the post-write advisory only.
        dest: Directory the files are written to.
    """

    names: tuple[str, ...] = ()
    overwrite: bool = False
    author: str | None = None
    email: str | None = None
    dest: Path = field(default_factory=Path.cwd)


class GitIgnore:
    """Builds a .gitignore from one or more remote templates."""

    def __init__(
        self,
        fetcher: CatalogFetcher,
        writer: WriterPort,
        picker: PickerPort,
    ) -> None:
        self._fetcher = fetcher
        self._writer = writer
        self._picker = picker

    @classmethod
    def default(cls, picker: PickerPort | None = None) -> GitIgnore:
        """Create GitIgnore wired to the platform cache and remote catalog.

        Args:
            picker: Interactive picker; defaults to RichPicker.

        Returns:
            GitIgnore with JsonCacheStore, HttpCatalogSource and SafeWriter.
        """
        from projkt.adapters.cache import JsonCacheStore
        from projkt.adapters.picker import RichPicker
        from projkt.adapters.remote import HttpCatalogSource
        from projkt.adapters.writer import SafeWriter
        from projkt.config import gitignore_cache_path, gitignore_catalog_url
        from projkt.core.fetcher import CatalogFetcher

        fetcher = CatalogFetcher(
            cache=JsonCacheStore(gitignore_cache_path()),
            remote=HttpCatalogSource(gitignore_catalog_url()),
        )
        return cls(fetcher=fetcher, writer=SafeWriter(), picker=picker or RichPicker())

    def catalog(self) -> TemplateCatalog:
        """The gitignore catalog, from cache or network."""
        return self._fetcher.get()

    def exec(self, opts: GitIgnoreOptions) -> WriteOutcome | None:
        """Fetch, select and write.

        Returns:
            The outcome of the write, or None if nothing was selected.

        Raises:
            ConflictingModesError: If both overwrite and append are set.
            FetchError: If the catalog cannot be obtained.
            TemplateNotFoundError: If an explicit name is not in the catalog.
            WriteError: If the .gitignore cannot be written.
        """
        # Reject bad flags before touching the network
        mode = WriteMode.from_flags(overwrite=opts.overwrite, append=opts.append)

        catalog = self.catalog()
        names = [opts.name] if opts.name is not None else None
        selected = selection_for(names, self._picker, multi=True).resolve(catalog)
        if not selected:
            return None

        target = Path(opts.dest) / GITIGNORE_FILE
        changed = self._writer.write(
            WriteRequest(target=target, content=combine(selected), mode=mode)
        )
        return WriteOutcome(path=target, changed=changed)


class License:
    """Writes one LICENSE-<id> file per selected embedded license."""

    def __init__(
        self,
        writer: WriterPort,
        picker: PickerPort,
        catalog_loader: Callable[[], TemplateCatalog] | None = None,
    ) -> None:
        if catalog_loader is None:
            from projkt.licenses import license_catalog

            catalog_loader = license_catalog
        self._writer = writer
        self._picker = picker
        self._load_catalog = catalog_loader

    @classmethod
    def default(cls, picker: PickerPort | None = None) -> License:
        """Create License with SafeWriter and the embedded license table."""
        from projkt.adapters.picker import RichPicker
        from projkt.adapters.writer import SafeWriter

        return cls(writer=SafeWriter(), picker=picker or RichPicker())

    def catalog(self) -> TemplateCatalog:
        """The embedded license catalog."""
        return self._load_catalog()

    def exec(self, opts: LicenseOptions) -> list[WriteOutcome]:
        """Select and write license files.

        Files are written one after another; a failure leaves earlier
        files in place.

        Raises:
            TemplateNotFoundError: If a requested id is not embedded.
            WriteError: If a license file cannot be written.
        """
        mode = WriteMode.OVERWRITE if opts.overwrite else WriteMode.CREATE_ONLY
        catalog = self.catalog()
        selected = selection_for(list(opts.names), self._picker, multi=True).resolve(
            catalog
        )

        outcomes = []
        for template in selected:
            target = Path(opts.dest) / f"{LICENSE_PREFIX}{template.name}"
            changed = self._writer.write(
                WriteRequest(target=target, content=template.content, mode=mode)
            )
            outcomes.append(WriteOutcome(path=target, changed=changed))
        return outcomes


def license_advisory(author: str | None = None, email: str | None = None) -> str:
    """One-line reminder to fill in license placeholders by hand."""
    fields = ["year", f"author ({author})" if author else "author"]
    fields.append(f"email ({email})" if email else "email")
    return (
        "Note: license file(s) were created/modified. Please check them manually "
        f"and make sure placeholders such as {', '.join(fields)} are filled in."
    )
