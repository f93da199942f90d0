"""Unit tests for the scan command."""

import json
from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner
from zonestrip.cli.main import app

runner = CliRunner()


class TestScanCommand:
    """Tests for zonestrip scan."""

    def test_table_output(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Marked files are listed and counted."""
        make_file(tmp_path / "a.exe")
        make_file(tmp_path / "sub" / "b.exe")
        make_file(tmp_path / "plain.txt", marked=False)

        result = runner.invoke(app, ["scan", str(tmp_path)])

        assert result.exit_code == 0
        assert "Files with Zone.Identifier" in result.output
        assert "Found 2 marked file(s)" in result.output

    def test_json_output(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """JSON output lists absolute paths in traversal order."""
        first = make_file(tmp_path / "a.exe")
        second = make_file(tmp_path / "sub" / "b.exe")

        result = runner.invoke(app, ["scan", str(tmp_path), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["root"] == str(tmp_path)
        assert data["files"] == [str(first), str(second)]

    def test_scan_changes_nothing(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Scanning leaves markers in place."""
        target = make_file(tmp_path / "a.exe")

        runner.invoke(app, ["scan", str(tmp_path)])

        assert Path(f"{target}:Zone.Identifier").exists()

    def test_no_recurse(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """--no-recurse limits the scan to the top directory."""
        top = make_file(tmp_path / "a.exe")
        make_file(tmp_path / "sub" / "b.exe")

        result = runner.invoke(app, ["scan", str(tmp_path), "--no-recurse", "-f", "json"])

        assert json.loads(result.stdout)["files"] == [str(top)]

    def test_clean_tree(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """A tree without markers reports so."""
        make_file(tmp_path / "plain.txt", marked=False)

        result = runner.invoke(app, ["scan", str(tmp_path)])

        assert result.exit_code == 0
        assert "No files with a Zone.Identifier marker found." in result.output

    def test_missing_path(self, tmp_path: Path) -> None:
        """A missing path exits with an error."""
        result = runner.invoke(app, ["scan", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Path not found" in result.output

    def test_empty_path_rejected(self) -> None:
        """An empty path is a usage error, not a crash."""
        result = runner.invoke(app, ["scan", ""])

        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)
        assert "Path cannot be empty" in result.output
