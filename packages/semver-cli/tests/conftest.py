# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from semver_cli.config import CONFIG_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by --verbose so later tests stay quiet."""
    yield
    for name in ("semver_core", "semver_cli"):
        package_logger = logging.getLogger(name)
        package_logger.handlers = []
        package_logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration lookup at an empty pyproject.toml."""
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[project]\nname = "demo"\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
    return config_file


@pytest.fixture
def write_config(isolated_config: Path):
    """Write a [tool.semver] table into the isolated configuration file."""

    def _write(body: str) -> Path:
        isolated_config.write_text(f"[tool.semver]\n{body}")
        return isolated_config

    return _write
