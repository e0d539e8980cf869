"""Core domain module for projkt.

This module contains domain models, port definitions and the services
that orchestrate them. Filesystem and network access live in adapters.
"""

from projkt.core.models import (
    Template,
    TemplateCatalog,
    WriteMode,
    WriteOutcome,
    WriteRequest,
)
from projkt.core.ports import CachePort, PickerPort, RemoteCatalogPort, WriterPort


__all__ = [
    "CachePort",
    "PickerPort",
    "RemoteCatalogPort",
    "Template",
    "TemplateCatalog",
    "WriteMode",
    "WriteOutcome",
    "WriteRequest",
    "WriterPort",
]
