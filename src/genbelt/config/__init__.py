# topmark:header:start
#
#   project      : GenBelt
#   file         : __init__.py
#   file_relpath : src/genbelt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for GenBelt.

Re-exports the immutable `GeneratorConfig`, its `ConfigError`, and the TOML
loaders that resolve it from ``genbelt.toml`` or ``pyproject.toml``.
"""

from __future__ import annotations

from genbelt.config.loaders import discover_config, load_config, load_config_file
from genbelt.config.model import ConfigError, GeneratorConfig

__all__ = [
    "ConfigError",
    "GeneratorConfig",
    "discover_config",
    "load_config",
    "load_config_file",
]
