"""User defaults for the strip command.

Settings are stored in ~/.config/zonestrip/config.toml:

    [strip]
    force = false
    no_recurse = false
    suppress_success = false
    confirm = false

Command-line flags always win; these values only fill in flags the user
did not pass.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from zonestrip.core.paths import get_settings_path
from zonestrip.stripper.errors import ZonestripError

logger = logging.getLogger(__name__)


class StripDefaults(BaseModel):
    """Default flag values for `zonestrip strip`.

    Attributes:
        force: Temporarily clear the read-only attribute to allow stripping.
        no_recurse: Only process the immediate children of a directory.
        suppress_success: Do not print a line for every stripped file.
        confirm: Ask before stripping each file.
    """

    model_config = ConfigDict(extra="forbid")

    force: Annotated[bool, Field(description="Clear read-only attribute when needed")] = False
    no_recurse: Annotated[bool, Field(description="Do not descend into subdirectories")] = False
    suppress_success: Annotated[bool, Field(description="Hide per-file success lines")] = False
    confirm: Annotated[bool, Field(description="Prompt before each file")] = False


class Settings(BaseModel):
    """Top-level zonestrip settings document."""

    model_config = ConfigDict(extra="forbid")

    strip: StripDefaults = Field(default_factory=StripDefaults)


class SettingsError(ZonestripError):
    """Raised when the settings file cannot be read, parsed or written."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default location.

    Returns:
        Validated Settings object.

    Raises:
        SettingsError: If the file cannot be read, is not valid TOML, or
            doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {settings_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        settings: The Settings object to save.
        path: Destination path. If None, uses the default location.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(settings.model_dump(), f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings {settings_path}: {e}") from e

    return settings_path
