"""Fixtures shared by the CLI tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from cachedecimate.core.log import teardown_logging


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty directory for every CLI test."""
    config_home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home
    teardown_logging()
