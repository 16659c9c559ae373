# SPDX-License-Identifier: MIT
"""Version parsing and precedence with Unicode identifiers.

This package parses MAJOR.MINOR.PATCH[-prerelease][+build] version strings
and orders them with semver precedence rules. Pre-release and build
identifiers may contain any Unicode letter, which semver.org does not allow.

Example:
    >>> from unisemver import parse_version, less, equal
    >>>
    >>> version = parse_version("3.24.3-β+20150115102400")
    >>> version.prerelease
    ('β',)
    >>>
    >>> less("1.0.0-alpha", "1.0.0")
    True
    >>>
    >>> equal("1.0.0+001", "1.0.0+002")
    True
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_CONFIG,
    ParserConfig,
)
from .semver import (
    Version,
    parse_version,
    format_version,
    is_valid_version,
    InvalidVersionError,
)
from .compare import (
    compare_identifiers,
    sequence_less,
    sequence_equal,
    less,
    equal,
    compare_versions,
    version_key,
)

__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "ParserConfig",
    # Version parsing
    "Version",
    "parse_version",
    "format_version",
    "is_valid_version",
    "InvalidVersionError",
    # Version comparison
    "compare_identifiers",
    "sequence_less",
    "sequence_equal",
    "less",
    "equal",
    "compare_versions",
    "version_key",
]
