# topmark:header:start
#
#   project      : GenBelt
#   file         : loaders.py
#   file_relpath : src/genbelt/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load GenBelt configuration from TOML sources.

Configuration lives either in a dedicated ``genbelt.toml`` (top-level keys) or
in ``pyproject.toml`` under ``[tool.genbelt]``. Parsing is done with `tomlkit`
and returned as plain `dict` structures before validation by
[`GeneratorConfig.from_mapping`][genbelt.config.model.GeneratorConfig.from_mapping].

The ``GENBELT_INDENTATION`` environment variable overrides the indentation
found in files.
"""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from genbelt.config.logging import get_logger
from genbelt.config.model import KEY_INDENTATION, ConfigError, GeneratorConfig
from genbelt.constants import (
    CONFIG_FILE_NAME,
    ENV_INDENTATION,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from genbelt.config.logging import GenbeltLogger

logger: GenbeltLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content.

    Raises:
        ConfigError: If the document is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}


def extract_table(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    """Return the GenBelt table of a parsed document, or None if it has none.

    ``pyproject.toml`` keeps the settings under ``[tool.genbelt]``; any other
    file is read as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table = cast("dict[str, Any]", tool).get(PYPROJECT_TOOL_SECTION)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
    return cast("dict[str, Any]", table)


def load_config_file(path: Path) -> GeneratorConfig:
    """Load a configuration from a single TOML file.

    A ``pyproject.toml`` without a ``[tool.genbelt]`` table yields the defaults.

    Args:
        path (Path): ``genbelt.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        GeneratorConfig: The validated configuration.
    """
    table = extract_table(path, load_toml_dict(path))
    if table is None:
        logger.debug("No [tool.%s] table in %s, using defaults", PYPROJECT_TOOL_SECTION, path)
        return GeneratorConfig()
    logger.debug("Loaded configuration from %s: %s", path, table)
    return GeneratorConfig.from_mapping(table)


def discover_config(start: Path | None = None) -> Path | None:
    """Find the nearest configuration file, walking up from ``start``.

    In each directory ``genbelt.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.genbelt]`` table.

    Args:
        start (Path | None): Directory to start from (defaults to the current directory).

    Returns:
        Path | None: The configuration file, or None when nothing was found.
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_table(pyproject, load_toml_dict(pyproject)) is not None:
            return pyproject
    return None


def apply_env_overrides(config: GeneratorConfig) -> GeneratorConfig:
    """Apply environment overrides (``GENBELT_INDENTATION``) to ``config``."""
    raw = os.environ.get(ENV_INDENTATION)
    if raw is None or not raw.strip():
        return config
    try:
        indentation = int(raw.strip())
    except ValueError as exc:
        raise ConfigError(
            f"{ENV_INDENTATION} must be an integer, got {raw!r}", key=KEY_INDENTATION
        ) from exc
    logger.debug("Indentation overridden by %s=%d", ENV_INDENTATION, indentation)
    return replace(config, indentation=indentation)


def load_config(path: Path | None = None, *, start: Path | None = None) -> GeneratorConfig:
    """Resolve the effective configuration.

    Args:
        path (Path | None): Explicit configuration file; skips discovery when given.
        start (Path | None): Directory where discovery starts.

    Returns:
        GeneratorConfig: File settings (or defaults) with environment overrides applied.
    """
    source = path if path is not None else discover_config(start)
    if source is None:
        logger.debug("No configuration file found, using defaults")
        config = GeneratorConfig()
    else:
        config = load_config_file(source)
    return apply_env_overrides(config)
