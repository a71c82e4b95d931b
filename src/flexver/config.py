"""Loading of flexver settings from TOML files."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import ConfigError
from .types import LogLevel

CONFIG_FILENAME = "flexver.toml"
PYPROJECT_FILENAME = "pyproject.toml"


class ParserSettings(BaseModel):
    """Settings shared by the CLI and other callers of the parser.

    Attributes:
        has_bignum: Whether arbitrary-precision integers may be used to measure
            overflow. When False, overflow is approximated with floats.
        log_level: Level for the ``flexver`` logger.
        require_exact: Treat any inexact parse as a failure.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    has_bignum: bool = True
    log_level: LogLevel = "WARNING"
    require_exact: bool = False


def find_config_file(config_path: Path | None = None) -> Path | None:
    """Locate the configuration file.

    Args:
        config_path: Explicit path. Takes precedence over discovery.

    Returns:
        The file to read, or None if no configuration exists.

    Raises:
        ConfigError: If an explicit path does not exist.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        return config_path

    cwd = Path.cwd()
    for name in (CONFIG_FILENAME, PYPROJECT_FILENAME):
        candidate = cwd / name
        if candidate.is_file():
            return candidate
    return None


def _read_section(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if path.name == PYPROJECT_FILENAME:
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool] in {path} must be a table")
        section = tool.get("flexver", {})
    else:
        section = data.get("flexver", {})

    if not isinstance(section, dict):
        raise ConfigError(f"[flexver] in {path} must be a table")
    return section


def load_settings(config_path: Path | None = None) -> ParserSettings:
    """Load settings from ``flexver.toml`` or ``pyproject.toml``.

    ``flexver.toml`` uses a ``[flexver]`` table; ``pyproject.toml`` uses
    ``[tool.flexver]``. Defaults are returned when no file is found.

    Args:
        config_path: Optional explicit path to a config file.

    Returns:
        The loaded settings.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.

    Example:
        ```toml
        [tool.flexver]
        has_bignum = false
        log_level = "DEBUG"
        ```
    """
    path = find_config_file(config_path)
    if path is None:
        return ParserSettings()

    section = _read_section(path)
    try:
        return ParserSettings.model_validate(section)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid settings in {path}: {errors}") from e
