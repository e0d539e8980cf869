"""Remote catalog adapters."""

from projkt.adapters.remote.http import HttpCatalogSource


__all__ = ["HttpCatalogSource"]
