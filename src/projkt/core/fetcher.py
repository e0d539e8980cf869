"""Cache-or-network retrieval of the gitignore template catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from projkt.core.exceptions import CacheIOError
from projkt.core.models import TemplateCatalog


if TYPE_CHECKING:
    from projkt.core.ports import CachePort, RemoteCatalogPort


logger = logging.getLogger(__name__)


class CatalogFetcher:
    """Returns the catalog from cache while fresh, from the network otherwise.

    An expired or missing cache triggers exactly one remote fetch. The
    verbatim response body is then stored back into the cache on a
    best-effort basis: a failure to persist is logged and the freshly
    fetched catalog is still returned.

    Example:
        >>> fetcher = CatalogFetcher(cache=store, remote=source)
        >>> catalog = fetcher.get()
        >>> catalog["Python"]
        b'...'
    """

    def __init__(self, cache: CachePort, remote: RemoteCatalogPort) -> None:
        self._cache = cache
        self._remote = remote

    def get(self) -> TemplateCatalog:
        """Obtain the catalog.

        Raises:
            NetworkError: If the remote fetch fails.
            CacheIOError: If a fresh cache file cannot be read.
            ParseError: If the remote or cached payload is malformed.
        """
        if self._cache.is_expired():
            return self._refresh()

        logger.debug("Using cached catalog at %s", self._cache.path())
        payload = self._cache.read()
        return TemplateCatalog.from_json(payload, source=str(self._cache.path()))

    def _refresh(self) -> TemplateCatalog:
        logger.debug("Cache expired or missing, fetching %s", self._remote.url)
        payload = self._remote.fetch()
        catalog = TemplateCatalog.from_json(payload, source=self._remote.url)

        try:
            self._cache.write(payload)
        except CacheIOError as e:
            logger.warning("Could not save catalog cache: %s", e)

        return catalog
