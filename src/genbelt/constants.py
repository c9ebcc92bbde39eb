# topmark:header:start
#
#   project      : GenBelt
#   file         : constants.py
#   file_relpath : src/genbelt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

GENBELT_VERSION: str = get_version("genbelt")

# Configuration discovery
CONFIG_FILE_NAME: str = "genbelt.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "genbelt"

# Environment overrides
ENV_LOG_LEVEL: str = "GENBELT_LOG_LEVEL"
ENV_INDENTATION: str = "GENBELT_INDENTATION"

# Number of spaces per indentation level
DEFAULT_INDENTATION: int = 2

# Typed-source lint banner
TSLINT_DISABLE_PREFIX: str = "tslint:disable:"
MAX_LINE_LENGTH_FLAG: str = "max-line-length"
