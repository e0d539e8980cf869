"""Unit tests for HttpCatalogSource."""

import pytest
import requests

from projkt.adapters.remote import HttpCatalogSource
from projkt.core.exceptions import NetworkError


URL = "https://catalog.example/list?format=json"


class _Resp:
    def __init__(self, status_code: int, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content


class _Sess:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.mark.remote
def test_fetch_returns_body_verbatim() -> None:
    """The raw body is returned untouched for caching."""
    body = b'{"A": {"contents": "x"}}'
    s = _Sess(_Resp(200, body))

    source = HttpCatalogSource(URL, session=s)

    assert source.fetch() == body
    assert source.url == URL


@pytest.mark.remote
def test_fetch_issues_single_get_with_timeout() -> None:
    """Exactly one GET per fetch, using the configured timeout."""
    s = _Sess(_Resp(200, b"{}"))

    HttpCatalogSource(URL, session=s, timeout=5).fetch()

    assert s.calls == [(URL, 5)]


@pytest.mark.remote
@pytest.mark.parametrize("status", [301, 404, 500, 503])
def test_non_2xx_raises_network_error(status: int) -> None:
    """Any status outside 2xx is a NetworkError with the status recorded."""
    s = _Sess(_Resp(status, b"nope"))

    with pytest.raises(NetworkError) as exc_info:
        HttpCatalogSource(URL, session=s).fetch()

    assert exc_info.value.status_code == status
    assert exc_info.value.source == URL


@pytest.mark.remote
def test_connection_error_wrapped() -> None:
    """requests exceptions are wrapped, not leaked."""
    cause = requests.ConnectionError("refused")
    s = _Sess(error=cause)

    with pytest.raises(NetworkError) as exc_info:
        HttpCatalogSource(URL, session=s).fetch()

    assert exc_info.value.cause is cause
    assert exc_info.value.status_code is None
