"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

ZONE_IDENTIFIER_CONTENT = "[ZoneTransfer]\nZoneId=3\nHostUrl=https://example.com/setup.exe\n"


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file, optionally with a Zone.Identifier marker.

    The marker is created under its composite name ``<file>:Zone.Identifier``.
    """

    def _make(path: Path, content: str = "payload", marked: bool = True) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        if marked:
            Path(f"{path}:Zone.Identifier").write_text(ZONE_IDENTIFIER_CONTENT)
        return path

    return _make
