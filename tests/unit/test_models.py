"""Unit tests for core domain models."""

import json
from pathlib import Path

import pytest

from projkt.core.models import (
    Template,
    TemplateCatalog,
    WriteMode,
    WriteRequest,
    combine,
)


@pytest.mark.core
@pytest.mark.tier(0)
class TestTemplateCatalogParse:
    """Tests for building a catalog from the upstream representation."""

    def test_entry_missing_contents_is_dropped(self) -> None:
        """Entries without a contents field are skipped silently."""
        raw = json.dumps({"A": {"contents": "x"}, "B": {}}).encode()

        catalog = TemplateCatalog.from_json(raw)

        assert dict(catalog) == {"A": b"x"}

    def test_non_object_entries_are_dropped(self) -> None:
        """Entries that are not objects are skipped too."""
        catalog = TemplateCatalog.from_raw({"A": "oops", "B": {"contents": "b"}})

        assert catalog.names() == ["B"]

    def test_non_string_contents_are_dropped(self) -> None:
        """A contents value that is not a string is treated as missing."""
        catalog = TemplateCatalog.from_raw({"A": {"contents": 3}})

        assert len(catalog) == 0

    def test_preserves_source_order(self) -> None:
        """Names keep the order of the upstream object."""
        raw = json.dumps(
            {"zig": {"contents": "z"}, "ada": {"contents": "a"}, "go": {"contents": "g"}}
        ).encode()

        assert TemplateCatalog.from_json(raw).names() == ["zig", "ada", "go"]

    def test_duplicate_names_last_wins(self) -> None:
        """When a name repeats in the payload, the last value is kept."""
        raw = b'{"A": {"contents": "first"}, "A": {"contents": "second"}}'

        assert TemplateCatalog.from_json(raw)["A"] == b"second"

    def test_contents_encoded_as_utf8(self) -> None:
        """Template bodies are stored as UTF-8 bytes."""
        catalog = TemplateCatalog.from_raw({"A": {"contents": "# café\n"}})

        assert catalog["A"] == "# café\n".encode()

    def test_malformed_json_raises_parse_error(self) -> None:
        """Invalid JSON surfaces as ParseError carrying the source."""
        from projkt.core.exceptions import ParseError

        with pytest.raises(ParseError) as exc_info:
            TemplateCatalog.from_json(b"{not json", source="/c/gitignore.json")

        assert exc_info.value.source == "/c/gitignore.json"
        assert exc_info.value.cause is not None

    def test_top_level_array_raises_parse_error(self) -> None:
        """The top level must be an object."""
        from projkt.core.exceptions import ParseError

        with pytest.raises(ParseError, match="Expected a JSON object"):
            TemplateCatalog.from_json(b"[1, 2]")


@pytest.mark.core
@pytest.mark.tier(0)
class TestTemplateCatalogMapping:
    """Tests for the read-only mapping behaviour."""

    def test_is_read_only(self) -> None:
        """Items cannot be assigned after construction."""
        catalog = TemplateCatalog([("A", b"a")])

        with pytest.raises(TypeError):
            catalog["B"] = b"b"  # type: ignore[index]

    def test_source_mapping_mutation_does_not_leak(self) -> None:
        """Mutating the dict passed in does not change the catalog."""
        source = {"A": b"a"}
        catalog = TemplateCatalog(source)
        source["B"] = b"b"

        assert "B" not in catalog

    def test_templates_returns_pairs_in_order(self) -> None:
        """templates() yields Template objects in catalog order."""
        catalog = TemplateCatalog([("A", b"a"), ("B", b"b")])

        assert catalog.templates() == [Template("A", b"a"), Template("B", b"b")]

    def test_missing_key_raises_key_error(self) -> None:
        """Lookup of an absent name behaves like a dict."""
        with pytest.raises(KeyError):
            TemplateCatalog()["nope"]


@pytest.mark.core
@pytest.mark.tier(0)
class TestWriteMode:
    """Tests for mapping flags to write modes."""

    @pytest.mark.parametrize(
        ("overwrite", "append", "expected"),
        [
            (False, False, WriteMode.CREATE_ONLY),
            (True, False, WriteMode.OVERWRITE),
            (False, True, WriteMode.APPEND),
        ],
    )
    def test_from_flags(self, overwrite: bool, append: bool, expected: WriteMode) -> None:
        """Each flag combination maps to one mode."""
        assert WriteMode.from_flags(overwrite=overwrite, append=append) is expected

    def test_both_flags_rejected(self) -> None:
        """overwrite and append together are refused."""
        from projkt.core.exceptions import ConflictingModesError

        with pytest.raises(ConflictingModesError):
            WriteMode.from_flags(overwrite=True, append=True)

    def test_write_request_defaults_to_create_only(self) -> None:
        """A request without a mode never clobbers."""
        assert WriteRequest(Path("x"), b"").mode is WriteMode.CREATE_ONLY


@pytest.mark.core
@pytest.mark.tier(0)
def test_combine_keeps_selection_order() -> None:
    """Bodies are concatenated in the order selected, without sorting."""
    selected = [Template("B", b"b\n"), Template("A", b"a\n")]

    assert combine(selected) == b"b\na\n"
