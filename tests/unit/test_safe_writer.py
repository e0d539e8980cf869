"""Unit tests for SafeWriter write policy."""

import stat
import sys
import uuid
from pathlib import Path

import pytest

from projkt.adapters.writer import SafeWriter
from projkt.core.models import WriteMode, WriteRequest


@pytest.mark.writer
@pytest.mark.tier(1)
class TestMissingTarget:
    """A missing target is always created."""

    @pytest.mark.parametrize("mode", list(WriteMode))
    def test_creates_file_in_any_mode(self, tmp_path: Path, mode: WriteMode) -> None:
        """Mode is irrelevant when the file does not exist yet."""
        target = tmp_path / ".gitignore"

        changed = SafeWriter().write(WriteRequest(target, b"*.pyc\n", mode))

        assert changed is True
        assert target.read_bytes() == b"*.pyc\n"

    def test_missing_directory_raises_write_error(self, tmp_path: Path) -> None:
        """Filesystem failures are wrapped in WriteError."""
        from projkt.core.exceptions import WriteError

        target = tmp_path / "nope" / ".gitignore"

        with pytest.raises(WriteError) as exc_info:
            SafeWriter().write(WriteRequest(target, b"x"))

        assert exc_info.value.path == target
        assert isinstance(exc_info.value.cause, OSError)


@pytest.mark.writer
@pytest.mark.tier(1)
class TestExistingTarget:
    """Existing files change only when explicitly asked."""

    def test_create_only_leaves_file_untouched(self, tmp_path: Path) -> None:
        """Default mode reports no change and keeps the content."""
        target = tmp_path / ".gitignore"
        target.write_text("node_modules")

        changed = SafeWriter().write(WriteRequest(target, b"*.log\n"))

        assert changed is False
        assert target.read_text() == "node_modules"

    def test_overwrite_replaces_content(self, tmp_path: Path) -> None:
        """Overwrite leaves exactly the new content."""
        target = tmp_path / ".gitignore"
        target.write_text("node_modules")

        changed = SafeWriter().write(
            WriteRequest(target, b"*.log\n", WriteMode.OVERWRITE)
        )

        assert changed is True
        assert target.read_bytes() == b"*.log\n"

    def test_append_adds_to_end(self, tmp_path: Path) -> None:
        """Append never truncates."""
        target = tmp_path / ".gitignore"
        target.write_text("node_modules\n")

        changed = SafeWriter().write(WriteRequest(target, b"*.log\n", WriteMode.APPEND))

        assert changed is True
        assert target.read_text() == "node_modules\n*.log\n"

    def test_overwrite_leaves_no_temporary_files(self, tmp_path: Path) -> None:
        """The rename-based replace cleans up after itself."""
        target = tmp_path / ".gitignore"
        target.write_text("old")

        SafeWriter().write(WriteRequest(target, b"new", WriteMode.OVERWRITE))

        assert [p.name for p in tmp_path.iterdir()] == [".gitignore"]

    @pytest.mark.property
    def test_create_only_never_modifies_property(self, tmp_path: Path) -> None:
        """Property: CREATE_ONLY never changes an existing file's bytes."""
        from hypothesis import given
        from hypothesis.strategies import binary

        @given(existing=binary(), new=binary())
        def _check(existing: bytes, new: bytes) -> None:
            target = tmp_path / f"f_{uuid.uuid4().hex[:8]}"
            target.write_bytes(existing)

            changed = SafeWriter().write(WriteRequest(target, new))

            assert changed is False
            assert target.read_bytes() == existing

        _check()

    @pytest.mark.property
    def test_append_preserves_prefix_property(self, tmp_path: Path) -> None:
        """Property: APPEND yields existing + new, byte for byte."""
        from hypothesis import given
        from hypothesis.strategies import binary

        @given(existing=binary(), new=binary())
        def _check(existing: bytes, new: bytes) -> None:
            target = tmp_path / f"f_{uuid.uuid4().hex[:8]}"
            target.write_bytes(existing)

            SafeWriter().write(WriteRequest(target, new, WriteMode.APPEND))

            assert target.read_bytes() == existing + new

        _check()


@pytest.mark.writer
@pytest.mark.tier(1)
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX symlinks and modes")
class TestLinksAndPermissions:
    """Symlinked and restricted targets."""

    def test_overwrite_writes_through_symlink(self, tmp_path: Path) -> None:
        """The link survives and the file it points to gets the content."""
        shared = tmp_path / "shared.gitignore"
        shared.write_text("node_modules")
        link = tmp_path / ".gitignore"
        link.symlink_to(shared)

        changed = SafeWriter().write(WriteRequest(link, b"*.log\n", WriteMode.OVERWRITE))

        assert changed is True
        assert link.is_symlink()
        assert shared.read_bytes() == b"*.log\n"

    def test_create_only_keeps_dangling_symlink(self, tmp_path: Path) -> None:
        """A link to a missing file is an existing entry, not a free name."""
        link = tmp_path / ".gitignore"
        link.symlink_to(tmp_path / "gone.gitignore")

        changed = SafeWriter().write(WriteRequest(link, b"*.log\n"))

        assert changed is False
        assert link.is_symlink()
        assert not (tmp_path / "gone.gitignore").exists()

    def test_overwrite_keeps_permission_bits(self, tmp_path: Path) -> None:
        """A 0600 file stays 0600 after being replaced."""
        target = tmp_path / "LICENSE-MIT"
        target.write_text("old")
        target.chmod(0o600)

        SafeWriter().write(WriteRequest(target, b"new", WriteMode.OVERWRITE))

        assert stat.S_IMODE(target.stat().st_mode) == 0o600
        assert target.read_bytes() == b"new"

    def test_create_only_does_not_rely_on_existence_check(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A file that appears after any existence check is still not clobbered."""
        target = tmp_path / ".gitignore"
        target.write_text("node_modules")
        monkeypatch.setattr(Path, "exists", lambda self, **kwargs: False)

        changed = SafeWriter().write(WriteRequest(target, b"*.log\n"))

        assert changed is False
        assert target.read_text() == "node_modules"
