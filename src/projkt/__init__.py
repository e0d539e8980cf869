"""projkt - scaffold .gitignore and LICENSE files.

Gitignore templates come from a remote catalog that is cached locally for
a week; license texts are embedded. Existing files are never modified
unless overwrite or append is requested explicitly.

Example:
    >>> from projkt import GitIgnore, GitIgnoreOptions
    >>> outcome = GitIgnore.default().exec(GitIgnoreOptions(name="Python"))
    >>> outcome.changed
    True
"""

from projkt.adapters.cache import JsonCacheStore
from projkt.adapters.picker import RichPicker
from projkt.adapters.remote import HttpCatalogSource
from projkt.adapters.writer import SafeWriter
from projkt.core.exceptions import (
    CacheIOError,
    ConflictingModesError,
    FetchError,
    NetworkError,
    ParseError,
    ProjktError,
    TemplateNotFoundError,
    WriteError,
)
from projkt.core.fetcher import CatalogFetcher
from projkt.core.models import (
    Template,
    TemplateCatalog,
    WriteMode,
    WriteOutcome,
    WriteRequest,
)
from projkt.core.ports import CachePort, PickerPort, RemoteCatalogPort, WriterPort
from projkt.core.selection import ExactLookup, InteractivePick
from projkt.core.services import GitIgnore, GitIgnoreOptions, License, LicenseOptions
from projkt.licenses import license_catalog, license_ids


__version__ = "0.1.0"

__all__ = [
    "CacheIOError",
    "CachePort",
    "CatalogFetcher",
    "ConflictingModesError",
    "ExactLookup",
    "FetchError",
    "GitIgnore",
    "GitIgnoreOptions",
    "HttpCatalogSource",
    "InteractivePick",
    "JsonCacheStore",
    "License",
    "LicenseOptions",
    "NetworkError",
    "ParseError",
    "PickerPort",
    "ProjktError",
    "RemoteCatalogPort",
    "RichPicker",
    "SafeWriter",
    "Template",
    "TemplateCatalog",
    "TemplateNotFoundError",
    "WriteError",
    "WriteMode",
    "WriteOutcome",
    "WriteRequest",
    "WriterPort",
    "__version__",
    "license_catalog",
    "license_ids",
]
