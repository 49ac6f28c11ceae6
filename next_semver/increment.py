"""Increment engine: derive the next version for a release type.

Every function here is pure. The source Version is never modified; each call
returns a freshly built Version with build metadata dropped.

Prerelease handling follows the usual CI conventions:
    1.2.3          prerelease → 1.2.4-0
    1.2.4-0        prerelease → 1.2.4-1
    1.2.3-beta.1   prerelease → 1.2.3-beta.2
    1.2.3-beta     prerelease → 1.2.3-beta.0
    1.2.3-alpha.4  prerelease (identifier "beta") → 1.2.3-beta.0
"""

from __future__ import annotations

import re

from .errors import InvalidIdentifierError, InvalidReleaseTypeError
from .models import IdentifierBase, ReleaseType, Version
from .versions import compare_identifiers

Identifier = int | str

IDENTIFIER_PATTERN = re.compile(r"0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*", re.ASCII)


def _release_type(release_type: ReleaseType | str) -> ReleaseType:
    try:
        return ReleaseType(release_type)
    except ValueError:
        raise InvalidReleaseTypeError(release_type) from None


def _identifier(identifier: str | None) -> Identifier | None:
    """Validate a user-supplied prerelease identifier.

    An empty string counts as "not given", which is how unset action inputs
    arrive.
    """
    if identifier is None or identifier == "":
        return None
    if not isinstance(identifier, str) or not IDENTIFIER_PATTERN.fullmatch(
        identifier
    ):
        raise InvalidIdentifierError(identifier)
    if identifier.isascii() and identifier.isdigit():
        return int(identifier)
    return identifier


def _seed(identifier: Identifier | None, base: int) -> tuple[Identifier, ...]:
    if identifier is None:
        return (base,)
    return (identifier, base)


def _bump_prerelease(
    prerelease: tuple[Identifier, ...], identifier: Identifier | None, base: int
) -> tuple[Identifier, ...]:
    """Advance an existing prerelease sequence, or seed a new one."""
    if not prerelease:
        return _seed(identifier, base)
    if identifier is not None and compare_identifiers(prerelease[0], identifier):
        return _seed(identifier, base)
    # Increment the rightmost numeric identifier
    for index in range(len(prerelease) - 1, -1, -1):
        if isinstance(prerelease[index], int):
            bumped = prerelease[index] + 1
            return prerelease[:index] + (bumped,) + prerelease[index + 1 :]
    return prerelease + (base,)


def increment(
    version: Version,
    release_type: ReleaseType | str,
    identifier: str | None = None,
    identifier_base: IdentifierBase = IdentifierBase.UNSPECIFIED,
) -> Version:
    """Return the version that follows ``version`` for ``release_type``.

    Args:
        version: The source version.
        release_type: A ReleaseType or its string value (e.g. "minor").
        identifier: Optional prerelease identifier such as "beta" or "rc".
        identifier_base: Starting value for new numeric identifiers.

    Raises:
        InvalidReleaseTypeError: If release_type is not a ReleaseType.
        InvalidIdentifierError: If identifier is not a valid identifier.
    """
    release = _release_type(release_type)
    ident = _identifier(identifier)
    base = IdentifierBase.resolve(identifier_base).start

    major, minor, patch = version.major, version.minor, version.patch
    has_pre = version.is_prerelease
    prerelease: tuple[Identifier, ...] = ()

    if release is ReleaseType.MAJOR:
        # 1.0.0-5 → 1.0.0, but 1.1.0-5 → 2.0.0
        if not (has_pre and minor == 0 and patch == 0):
            major, minor, patch = major + 1, 0, 0
    elif release is ReleaseType.MINOR:
        if not (has_pre and patch == 0):
            minor, patch = minor + 1, 0
    elif release is ReleaseType.PATCH:
        if not has_pre:
            patch += 1
    elif release is ReleaseType.PREMAJOR:
        major, minor, patch = major + 1, 0, 0
        prerelease = _seed(ident, base)
    elif release is ReleaseType.PREMINOR:
        minor, patch = minor + 1, 0
        prerelease = _seed(ident, base)
    elif release is ReleaseType.PREPATCH:
        patch += 1
        prerelease = _seed(ident, base)
    elif release is ReleaseType.PRERELEASE:
        if not has_pre:
            patch += 1
        prerelease = _bump_prerelease(version.prerelease, ident, base)
    elif release is ReleaseType.PRE:
        prerelease = _bump_prerelease(version.prerelease, ident, base)

    return Version(major=major, minor=minor, patch=patch, prerelease=prerelease)
