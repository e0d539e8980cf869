"""HTTP adapter for the remote gitignore catalog."""

from __future__ import annotations

import requests

from projkt.config import HTTP_TIMEOUT
from projkt.core.exceptions import NetworkError


class HttpCatalogSource:
    """Downloads the raw catalog body with a single GET request.

    Implements RemoteCatalogPort. A requests.Session can be injected for
    connection reuse or testing.
    """

    def __init__(
        self,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float = HTTP_TIMEOUT,
    ) -> None:
        self._url = url
        self._http = session or requests.Session()
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> bytes:
        """GET the catalog and return the response body verbatim.

        Raises:
            NetworkError: On connection failure or a non-2xx status.
        """
        try:
            res = self._http.get(self._url, timeout=self._timeout)
        except requests.RequestException as e:
            raise NetworkError(
                f"Cannot reach {self._url}: {e}",
                source=self._url,
                cause=e,
            ) from e

        if not 200 <= res.status_code < 300:
            raise NetworkError(
                f"HTTP {res.status_code} from {self._url}",
                source=self._url,
                status_code=res.status_code,
            )
        return res.content
