# SPDX-License-Identifier: MIT
"""Version parsing and formatting.

Supports MAJOR.MINOR.PATCH with optional pre-release and build identifiers:
- Pre-release: -alpha, -alpha.1, -0.3.7, -β
- Build metadata: +build, +build.123, +20150115102400

Identifiers may contain any Unicode letter, not just ASCII, so
``3.24.3-β+20150115102400`` parses. This makes the grammar a superset of
semver.org.
"""

from __future__ import annotations

import re
import string
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .config import DEFAULT_CONFIG, ParserConfig

_ASCII_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")


class InvalidVersionError(Exception):
    """Raised when a version string does not match the version grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Dataclass equality is structural and includes build metadata. Use
    :func:`unisemver.compare.equal` for precedence equality.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release identifiers (e.g. ``("alpha", "1")``), or None
        build: Build identifiers (e.g. ``("20150115102400",)``), or None
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[tuple[str, ...]] = None
    build: Optional[tuple[str, ...]] = None

    def __str__(self) -> str:
        return format_version(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries a pre-release tag."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build identifiers."""
        return f"{self.major}.{self.minor}.{self.patch}"


@lru_cache(maxsize=None)
def _version_pattern(max_core_digits: int, unicode_identifiers: bool) -> re.Pattern[str]:
    # Identifier characters are checked separately in _valid_identifier;
    # here an identifier is any run without a separator.
    digit = r"\d" if unicode_identifiers else "[0-9]"
    core = rf"({digit}{{1,{max_core_digits}}})"
    ids = r"[^.+]+(?:\.[^.+]+)*"
    return re.compile(
        rf"{core}\.{core}\.{core}"
        rf"(?:-(?P<prerelease>{ids}))?"
        rf"(?:\+(?P<build>{ids}))?"
    )


def _is_identifier_char(char: str, unicode_identifiers: bool) -> bool:
    if not unicode_identifiers:
        return char in _ASCII_IDENTIFIER_CHARS
    if char == "-":
        return True
    category = unicodedata.category(char)
    return category == "Nd" or category.startswith("L")


def _valid_identifier(identifier: str, unicode_identifiers: bool) -> bool:
    return bool(identifier) and all(
        _is_identifier_char(char, unicode_identifiers) for char in identifier
    )


def _split_identifiers(
    section: Optional[str], unicode_identifiers: bool
) -> Optional[tuple[str, ...]]:
    if section is None:
        return None
    identifiers = tuple(section.split("."))
    if not all(_valid_identifier(i, unicode_identifiers) for i in identifiers):
        raise ValueError(section)
    return identifiers


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form
            MAJOR.MINOR.PATCH[-prerelease][+build]
        config: Parser limits; defaults to :data:`DEFAULT_CONFIG`

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the whole string does not match the grammar

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=None)

        >>> parse_version("3.24.3-β+20150115102400")
        Version(major=3, minor=24, patch=3, prerelease=('β',), build=('20150115102400',))
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    config = config or DEFAULT_CONFIG
    pattern = _version_pattern(config.max_core_digits, config.unicode_identifiers)
    match = pattern.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    try:
        prerelease = _split_identifiers(match.group("prerelease"), config.unicode_identifiers)
        build = _split_identifiers(match.group("build"), config.unicode_identifiers)
    except ValueError:
        raise InvalidVersionError(version_string) from None

    return Version(
        major=int(match.group(1)),
        minor=int(match.group(2)),
        patch=int(match.group(3)),
        prerelease=prerelease,
        build=build,
    )


def format_version(version: Version) -> str:
    """Render a Version back into its string form.

    Absent pre-release or build sections contribute neither a separator nor
    a segment, so ``parse_version(format_version(v)) == v``.

    Examples:
        >>> format_version(Version(1, 0, 0, prerelease=("rc", "1")))
        '1.0.0-rc.1'
    """
    text = version.base_version
    if version.prerelease is not None:
        text += "-" + ".".join(version.prerelease)
    if version.build is not None:
        text += "+" + ".".join(version.build)
    return text


def is_valid_version(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        False
        >>> is_valid_version("3.24.3-β")
        True
    """
    try:
        parse_version(version_string, config)
    except InvalidVersionError:
        return False
    return True
