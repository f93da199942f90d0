"""Unit tests for console colors."""

import logging
from pathlib import Path

import pytest
from rich.theme import Theme
from zonestrip.core.theme import ThemeColors, get_theme, load_colors, read_colors


def _write_user_theme(config_home: Path, body: str) -> None:
    theme_dir = config_home / "zonestrip"
    theme_dir.mkdir(exist_ok=True)
    (theme_dir / "theme.toml").write_text(body)


class TestThemeColors:
    """Tests for the ThemeColors model."""

    def test_accepts_short_and_long_hex(self) -> None:
        """#RGB and #RRGGBB are both valid."""
        colors = ThemeColors(path="#abc", verbose="#A1B2C3")

        assert colors.path == "#abc"
        assert colors.verbose == "#A1B2C3"

    def test_strips_whitespace(self) -> None:
        """Surrounding whitespace is ignored."""
        assert ThemeColors(success=" #00ff00 ").success == "#00ff00"

    @pytest.mark.parametrize("value", ["00ff00", "#ff", "#fffffff", "#gggggg", "green"])
    def test_rejects_invalid_colors(self, value: str) -> None:
        """Anything but a hex color is rejected."""
        with pytest.raises(ValueError):
            ThemeColors(error=value)

    def test_extra_fields_forbidden(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]

    def test_styles_cover_output_levels(self) -> None:
        """Every style the reporter and tables use is defined."""
        styles = ThemeColors().styles()

        for name in ("success", "warning", "error", "info", "verbose", "path", "muted"):
            assert name in styles
        assert styles["error"] == "bold #f53263"
        assert styles["bold_header"] == "bold #69B9A1"


class TestReadColors:
    """Tests for read_colors function."""

    def test_reads_colors_table(self, tmp_path: Path) -> None:
        """The [colors] table is returned as-is."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\npath = "#aabbcc"\n')

        assert read_colors(theme_file) == {"path": "#aabbcc"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file gives an empty table."""
        assert read_colors(tmp_path / "missing.toml") == {}

    def test_malformed_toml_is_logged(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Malformed TOML gives an empty table and a warning."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml")

        with caplog.at_level(logging.WARNING, logger="zonestrip"):
            assert read_colors(theme_file) == {}

        assert "Ignoring theme file" in caplog.text

    def test_colors_not_a_table(self, tmp_path: Path) -> None:
        """A scalar colors key is ignored."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert read_colors(theme_file) == {}


class TestLoadColors:
    """Tests for load_colors function."""

    def test_bundled_colors(self) -> None:
        """Without a user file, the bundled colors are used."""
        colors = load_colors()

        assert colors.path == "#c1ff62"
        assert colors.verbose == "#0e8ac8"

    def test_user_override(self, isolated_config: Path) -> None:
        """User colors replace bundled ones; the rest are kept."""
        _write_user_theme(isolated_config, '[colors]\nsuccess = "#00ff00"\n')

        colors = load_colors()

        assert colors.success == "#00ff00"
        assert colors.warning == "#f5b332"

    def test_invalid_user_color_uses_defaults(self, isolated_config: Path) -> None:
        """An invalid user color falls back to the defaults."""
        _write_user_theme(isolated_config, '[colors]\nerror = "red"\n')

        assert load_colors() == ThemeColors()


class TestGetTheme:
    """Tests for get_theme function."""

    def test_returns_cached_theme(self) -> None:
        """The theme is built once and reused."""
        theme = get_theme()

        assert isinstance(theme, Theme)
        assert get_theme() is theme
        assert "verbose" in theme.styles
