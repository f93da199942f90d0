"""Unit tests for stripper data models."""

from pathlib import Path

import pytest
from zonestrip.stripper.models import PathKind, PathTarget, StripOutcome, StripReport


class TestPathTarget:
    """Tests for PathTarget resolution and classification."""

    def test_resolves_relative_path(self, tmp_path: Path) -> None:
        """Relative paths are joined with the working directory."""
        (tmp_path / "a.txt").write_text("x")

        target = PathTarget.resolve("a.txt", cwd=str(tmp_path))

        assert target.raw == "a.txt"
        assert target.absolute == str(tmp_path / "a.txt")
        assert target.kind == PathKind.FILE

    def test_absolute_path_is_kept(self, tmp_path: Path) -> None:
        """Absolute paths ignore the working directory."""
        target = PathTarget.resolve(str(tmp_path), cwd="/somewhere/else")

        assert target.absolute == str(tmp_path)
        assert target.kind == PathKind.DIRECTORY

    def test_defaults_to_current_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without cwd, the process working directory is used."""
        monkeypatch.chdir(tmp_path)

        target = PathTarget.resolve("sub")

        assert target.absolute == str(tmp_path / "sub")
        assert target.kind == PathKind.MISSING

    def test_normalizes_dot_segments(self, tmp_path: Path) -> None:
        """Dot segments are collapsed."""
        (tmp_path / "d").mkdir()

        target = PathTarget.resolve("d/../d/.", cwd=str(tmp_path))

        assert target.absolute == str(tmp_path / "d")

    def test_empty_path_rejected(self) -> None:
        """Empty paths are invalid."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            PathTarget.resolve("")

    def test_direct_construction_validates(self) -> None:
        """The dataclass itself rejects an empty raw path."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            PathTarget(raw="", absolute="/x", kind=PathKind.MISSING)


class TestStripReport:
    """Tests for StripReport counters."""

    def test_record_counts_outcomes(self) -> None:
        """Each recorded outcome increments files_seen and its own counter."""
        report = StripReport()
        report.record(StripOutcome.STRIPPED)
        report.record(StripOutcome.STRIPPED)
        report.record(StripOutcome.NO_MARKER)
        report.record(StripOutcome.DECLINED)
        report.record(StripOutcome.FAILED)

        assert report.files_seen == 5
        assert report.stripped == 2
        assert report.declined == 1
        assert report.failed == 1

    def test_merge_adds_counters(self) -> None:
        """Merging sums every counter."""
        first = StripReport(files_seen=2, stripped=1, missing=1)
        second = StripReport(files_seen=3, stripped=2, failed=1, unreadable_directories=1)

        first.merge(second)

        assert first.files_seen == 5
        assert first.stripped == 3
        assert first.failed == 1
        assert first.missing == 1
        assert first.unreadable_directories == 1

    def test_has_errors(self) -> None:
        """Failures and missing paths count as errors."""
        assert StripReport().has_errors is False
        assert StripReport(failed=1).has_errors is True
        assert StripReport(missing=1).has_errors is True
        assert StripReport(restore_failures=1).has_errors is False

    def test_has_warnings(self) -> None:
        """Restore failures and unreadable directories count as warnings."""
        assert StripReport().has_warnings is False
        assert StripReport(restore_failures=1).has_warnings is True
        assert StripReport(unreadable_directories=1).has_warnings is True
