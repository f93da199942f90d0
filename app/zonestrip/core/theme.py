"""Console colors for zonestrip.

Colors come from the bundled data/theme.toml. Any of them can be replaced
in ~/.config/zonestrip/theme.toml under a ``[colors]`` table:

    [colors]
    success = "#00ff00"
    path = "#ffffff"
"""

import functools
import logging
import tomllib
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from rich.theme import Theme

from zonestrip.core.paths import get_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$"),
]


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for each kind of output."""

    model_config = ConfigDict(extra="forbid")

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    verbose: HexColor = "#0e8ac8"
    path: HexColor = "#c1ff62"

    def styles(self) -> dict[str, str]:
        """Rich style names used by the reporter and the CLI tables."""
        return {
            "text": self.text,
            "muted": self.muted,
            "dim": self.muted,
            "border": self.border,
            "bold_header": f"bold {self.header}",
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
            "info": self.info,
            "verbose": self.verbose,
            "path": self.path,
        }


def read_colors(source: Traversable) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file.

    A missing file gives an empty table. Unreadable files and malformed
    tables are logged and also give an empty table.
    """
    try:
        with source.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", source, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", source)
        return {}
    return colors


def load_colors() -> ThemeColors:
    """Merge the user's overrides onto the bundled colors.

    Falls back to the built-in defaults if the merged colors are invalid.
    """
    bundled = read_colors(resources.files("zonestrip.data").joinpath("theme.toml"))
    user = read_colors(get_theme_path())
    try:
        return ThemeColors.model_validate({**bundled, **user})
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


@functools.cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, built once per process."""
    return Theme(load_colors().styles())
