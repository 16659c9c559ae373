# SPDX-License-Identifier: MIT
"""Version precedence.

Identifiers made only of ASCII digits compare numerically, everything else
compares by code point, and numeric identifiers sort before non-numeric
ones. A release outranks any pre-release of the same MAJOR.MINOR.PATCH.

Unlike semver.org, build metadata is the final tiebreak in :func:`less`
while :func:`equal` ignores it. Two versions differing only in build are
therefore ``equal`` and yet one is ``less`` than the other.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Optional, Sequence, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _is_numeric(identifier: str) -> bool:
    return all("0" <= char <= "9" for char in identifier)


def _compare_numeric(a: str, b: str) -> int:
    # No int() conversion so arbitrarily long digit runs stay correct.
    a = a.lstrip("0")
    b = b.lstrip("0")
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a != b:
        return -1 if a < b else 1
    return 0


def compare_identifiers(a: str, b: str) -> int:
    """Compare two single pre-release or build identifiers.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b

    Examples:
        >>> compare_identifiers("007", "7")
        0
        >>> compare_identifiers("10", "a")
        -1
        >>> compare_identifiers("beta", "alpha")
        1
    """
    numeric_a = _is_numeric(a)
    numeric_b = _is_numeric(b)

    if numeric_a and numeric_b:
        return _compare_numeric(a, b)
    if numeric_a:
        return -1
    if numeric_b:
        return 1
    if a != b:
        return -1 if a < b else 1
    return 0


def sequence_less(a: Optional[Sequence[str]], b: Optional[Sequence[str]]) -> bool:
    """Return True if identifier sequence a has lower precedence than b.

    The first differing identifier decides. When one sequence is a prefix
    of the other, the shorter one is less. None counts as empty.
    """
    a = a or ()
    b = b or ()
    for id_a, id_b in zip(a, b):
        result = compare_identifiers(id_a, id_b)
        if result != 0:
            return result < 0
    return len(a) < len(b)


def sequence_equal(a: Optional[Sequence[str]], b: Optional[Sequence[str]]) -> bool:
    """Return True if both sequences have the same length and equal identifiers."""
    a = a or ()
    b = b or ()
    if len(a) != len(b):
        return False
    return all(compare_identifiers(id_a, id_b) == 0 for id_a, id_b in zip(a, b))


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def less(v: VersionLike, w: VersionLike) -> bool:
    """Return True if v precedes w.

    Args:
        v: First version (string or Version object)
        w: Second version (string or Version object)

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> less("1.0.0-alpha", "1.0.0")
        True
        >>> less("1.0.0-beta.2", "1.0.0-beta.11")
        True
        >>> less("1.0.0+001", "1.0.0+002")
        True
    """
    v = _coerce(v)
    w = _coerce(w)

    for attr in ("major", "minor", "patch"):
        val_v = getattr(v, attr)
        val_w = getattr(w, attr)
        if val_v != val_w:
            return val_v < val_w

    if not sequence_equal(v.prerelease, w.prerelease):
        # Release > pre-release
        if v.prerelease is None or w.prerelease is None:
            return v.prerelease is not None
        return sequence_less(v.prerelease, w.prerelease)

    if not sequence_equal(v.build, w.build):
        return sequence_less(v.build, w.build)

    return False


def equal(v: VersionLike, w: VersionLike) -> bool:
    """Return True if v and w have the same precedence, ignoring build metadata.

    Pre-release identifiers are matched with :func:`compare_identifiers`
    rather than as plain strings, so ``rc.01`` equals ``rc.1``. This keeps
    equal() true whenever neither version is less than the other.

    Examples:
        >>> equal("1.0.0+001", "1.0.0+002")
        True
        >>> equal("1.0.0-alpha", "1.0.0")
        False
    """
    v = _coerce(v)
    w = _coerce(w)
    return (
        v.major == w.major
        and v.minor == w.minor
        and v.patch == w.patch
        and sequence_equal(v.prerelease, w.prerelease)
    )


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions using the ordering of :func:`less`.

    Returns:
        -1 if version1 < version2
        0 if neither precedes the other
        1 if version1 > version2

    Note:
        Build metadata takes part as the last tiebreak, so a 0 result
        implies :func:`equal` but not the other way round.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+002", "1.0.0+001")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)
    if less(v1, v2):
        return -1
    if less(v2, v1):
        return 1
    return 0


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _VersionKey(_coerce(version))
