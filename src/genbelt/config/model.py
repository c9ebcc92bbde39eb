# topmark:header:start
#
#   project      : GenBelt
#   file         : model.py
#   file_relpath : src/genbelt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable generator configuration.

`GeneratorConfig` carries the settings the formatting and emission helpers
read: the indentation unit, the default lint flags for typed-source banners,
and whether header banners drop the API version. It is built once (from
defaults, a TOML table or a plain mapping) and passed explicitly to the
helpers that need it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from genbelt.config.logging import get_logger
from genbelt.constants import DEFAULT_INDENTATION

if TYPE_CHECKING:
    from collections.abc import Mapping

    from genbelt.config.logging import GenbeltLogger

logger: GenbeltLogger = get_logger(__name__)

KEY_INDENTATION = "indentation"
KEY_DISABLE_FLAGS = "disable_flags"
KEY_OMIT_VERSION = "omit_version"

KNOWN_KEYS = frozenset({KEY_INDENTATION, KEY_DISABLE_FLAGS, KEY_OMIT_VERSION})


class ConfigError(ValueError):
    """Raised when a configuration source is malformed or holds invalid values.

    Attributes:
        key (str | None): The offending configuration key, when known.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings shared by the text formatting and file emission helpers.

    Attributes:
        indentation (int): Number of spaces that make up one indentation level.
        disable_flags (tuple[str, ...]): Extra lint rules disabled in typed-source banners.
        omit_version (bool): Whether header banners leave out ``info.version``.
    """

    indentation: int = DEFAULT_INDENTATION
    disable_flags: tuple[str, ...] = field(default_factory=tuple)
    omit_version: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indentation, bool) or not isinstance(self.indentation, int):
            raise ConfigError(
                f"'{KEY_INDENTATION}' must be an integer, got {self.indentation!r}",
                key=KEY_INDENTATION,
            )
        if self.indentation < 0:
            raise ConfigError(
                f"'{KEY_INDENTATION}' must not be negative, got {self.indentation}",
                key=KEY_INDENTATION,
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GeneratorConfig:
        """Build a config from a plain mapping (e.g. an unwrapped TOML table).

        Unknown keys are logged and ignored.

        Args:
            data (Mapping[str, Any]): Raw key/value pairs.

        Returns:
            GeneratorConfig: The validated configuration.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        for key in data:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown configuration key: %s", key)

        kwargs: dict[str, Any] = {}
        if KEY_INDENTATION in data:
            kwargs[KEY_INDENTATION] = data[KEY_INDENTATION]

        if KEY_DISABLE_FLAGS in data:
            flags = data[KEY_DISABLE_FLAGS]
            if not isinstance(flags, (list, tuple)) or not all(isinstance(f, str) for f in flags):
                raise ConfigError(
                    f"'{KEY_DISABLE_FLAGS}' must be a list of strings, got {flags!r}",
                    key=KEY_DISABLE_FLAGS,
                )
            kwargs[KEY_DISABLE_FLAGS] = tuple(flags)

        if KEY_OMIT_VERSION in data:
            omit = data[KEY_OMIT_VERSION]
            if not isinstance(omit, bool):
                raise ConfigError(
                    f"'{KEY_OMIT_VERSION}' must be a boolean, got {omit!r}",
                    key=KEY_OMIT_VERSION,
                )
            kwargs[KEY_OMIT_VERSION] = omit

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML-compatible representation of this config."""
        return {
            KEY_INDENTATION: self.indentation,
            KEY_DISABLE_FLAGS: list(self.disable_flags),
            KEY_OMIT_VERSION: self.omit_version,
        }
