# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .display import DisplayOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SEMVER_CLI_CONFIG"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """Display defaults read from the ``[tool.semver]`` table.

    Attributes:
        source: File the configuration was read from, if any
        prefix: Default text prepended to rendered versions
        remove_v_prefix: Default for --remove-v-prefix
        single_line: Default for --single-line
    """

    source: Optional[Path] = None
    prefix: str = ""
    remove_v_prefix: bool = False
    single_line: bool = False

    @classmethod
    def from_file(cls, path: str | Path) -> "CLIConfig":
        """Load configuration from a TOML file.

        Args:
            path: pyproject.toml, or any TOML file with a [tool.semver] table

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds values of the wrong type
            FileNotFoundError: If the file doesn't exist
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e

        return cls.from_dict(data, config_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: Optional[Path] = None) -> "CLIConfig":
        """Create CLIConfig from a parsed TOML dictionary."""
        tool_semver = data.get("tool", {}).get("semver", {})
        if not isinstance(tool_semver, dict):
            raise ConfigError("[tool.semver] must be a table")

        prefix = tool_semver.get("prefix", "")
        if not isinstance(prefix, str):
            raise ConfigError("[tool.semver].prefix must be a string")

        flags: dict[str, bool] = {}
        for key in ("remove-v-prefix", "single-line"):
            value = tool_semver.get(key, False)
            if not isinstance(value, bool):
                raise ConfigError(f"[tool.semver].{key} must be a boolean")
            flags[key.replace("-", "_")] = value

        return cls(source=source, prefix=prefix, **flags)

    def display_options(
        self,
        prefix: Optional[str] = None,
        remove_v_prefix: Optional[bool] = None,
        single_line: Optional[bool] = None,
    ) -> DisplayOptions:
        """Build DisplayOptions, letting explicit values override the defaults."""
        return DisplayOptions(
            prefix=self.prefix if prefix is None else prefix,
            remove_v_prefix=self.remove_v_prefix if remove_v_prefix is None else remove_v_prefix,
            single_line=self.single_line if single_line is None else single_line,
        )


def find_config_file(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest pyproject.toml, searching upward.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to pyproject.toml, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(start_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration.

    ``$SEMVER_CLI_CONFIG`` names an explicit file; otherwise the nearest
    pyproject.toml is used. Without either, defaults apply.

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If $SEMVER_CLI_CONFIG names a missing file
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    path = Path(explicit) if explicit else find_config_file(start_dir)

    if path is None:
        return CLIConfig()

    logger.debug("Loading configuration from %s", path)
    return CLIConfig.from_file(path)
