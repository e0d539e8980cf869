"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
fake adapters so tests never touch the network or a terminal.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, selection and services")
    config.addinivalue_line("markers", "cache: Catalog cache adapter")
    config.addinivalue_line("markers", "remote: HTTP catalog adapter")
    config.addinivalue_line("markers", "writer: Safe file writer")
    config.addinivalue_line("markers", "picker: Interactive picker")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "property: Hypothesis property tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow)",
    )


def catalog_payload(entries: dict[str, str]) -> bytes:
    """Encode name -> contents the way the remote catalog does."""
    return json.dumps(
        {name: {"name": name, "contents": contents} for name, contents in entries.items()}
    ).encode()


class FakeRemote:
    """RemoteCatalogPort returning a fixed body and counting calls."""

    def __init__(self, payload: bytes = b"{}", error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls = 0

    @property
    def url(self) -> str:
        return "https://catalog.example/list?format=json"

    def fetch(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


class FakePicker:
    """PickerPort choosing candidates by name, in the order given."""

    def __init__(self, choose: Sequence[str] = ()) -> None:
        self.choose = list(choose)
        self.seen: list[tuple[str, bytes]] = []
        self.multi: bool | None = None

    def pick(
        self, candidates: Sequence[tuple[str, bytes]], multi: bool
    ) -> list[tuple[str, bytes]]:
        self.seen = list(candidates)
        self.multi = multi
        by_name = dict(candidates)
        return [(name, by_name[name]) for name in self.choose]


@pytest.fixture
def payload() -> Callable[[dict[str, str]], bytes]:
    """Factory encoding name -> contents as a catalog payload."""
    return catalog_payload


@pytest.fixture
def fake_remote() -> FakeRemote:
    """Remote serving a two-entry catalog."""
    return FakeRemote(catalog_payload({"A": "a-body\n", "B": "b-body\n"}))


@pytest.fixture
def make_remote() -> Callable[..., FakeRemote]:
    """Factory for remotes with a custom payload or error."""
    return FakeRemote


@pytest.fixture
def make_picker() -> Callable[..., FakePicker]:
    """Factory for pickers choosing the given names."""
    return FakePicker
