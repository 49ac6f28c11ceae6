"""Version parsing and comparison.

Parsing is strict: the string must already be a complete semantic version
(see :mod:`next_semver.coerce` for the tolerant pre-pass). Grammar matching
and precedence are delegated to the ``semver`` library; this module converts
between its string-based prerelease and our typed identifier tuples.
"""

from __future__ import annotations

import semver

from .errors import ParseError
from .models import MAX_LENGTH, Ordering, Version


def _is_numeric(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _split_identifiers(text: str | None, *, numeric: bool) -> tuple[int | str, ...]:
    if not text:
        return ()
    if not numeric:
        return tuple(text.split("."))
    parts = text.split(".")
    return tuple(int(part) if _is_numeric(part) else part for part in parts)


def _join_identifiers(identifiers: tuple[int | str, ...]) -> str | None:
    return ".".join(str(i) for i in identifiers) or None


def parse_version(version_str: str) -> Version:
    """Parse a strict semantic version string into a Version.

    Examples:
        "1.2.3" → Version(major=1, minor=2, patch=3)
        "1.2.3-beta.1+exp.sha" → prerelease ("beta", 1), build ("exp", "sha")

    Raises:
        ParseError: If the string is not a valid semantic version.
    """
    # semver's pattern accepts non-ASCII digits and a trailing newline
    if not version_str.isascii() or version_str != version_str.rstrip("\n"):
        raise ParseError(version_str)
    if len(version_str) > MAX_LENGTH:
        raise ParseError(version_str, f"longer than {MAX_LENGTH} characters")
    try:
        parsed = semver.Version.parse(version_str)
    except (TypeError, ValueError) as exc:
        raise ParseError(version_str) from exc
    return Version(
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        prerelease=_split_identifiers(parsed.prerelease, numeric=True),
        build=_split_identifiers(parsed.build, numeric=False),
    )


def to_semver(version: Version) -> semver.Version:
    """Convert a Version into the equivalent semver.Version."""
    return semver.Version(
        version.major,
        version.minor,
        version.patch,
        prerelease=_join_identifiers(version.prerelease),
        build=_join_identifiers(version.build),
    )


def compare(a: Version, b: Version) -> Ordering:
    """Compare two versions by precedence. Build metadata is ignored."""
    return Ordering(to_semver(a).compare(to_semver(b)))


def compare_identifiers(a: int | str, b: int | str) -> Ordering:
    """Compare two single prerelease identifiers.

    Numeric identifiers compare by value and sort before alphanumeric ones;
    alphanumeric identifiers compare by code point.
    """
    a = int(a) if isinstance(a, str) and _is_numeric(a) else a
    b = int(b) if isinstance(b, str) and _is_numeric(b) else b
    if isinstance(a, int) and not isinstance(b, int):
        return Ordering.LESS
    if isinstance(b, int) and not isinstance(a, int):
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    return Ordering.LESS if a < b else Ordering.GREATER
