"""Error types raised by next-semver.

Every error carries a user-readable message naming the offending value, so
the CLI layer can surface it as-is.
"""

from __future__ import annotations


class NextSemverError(ValueError):
    """Base class for all next-semver errors."""


class ParseError(NextSemverError):
    """The input (after coercion) is not a valid semantic version."""

    def __init__(self, value: str, reason: str | None = None) -> None:
        message = f'Value "{value}" is not a valid semver version'
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.value = value
        self.reason = reason


class InvalidIdentifierError(NextSemverError):
    """A prerelease identifier violates the identifier grammar."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f'Invalid prerelease identifier "{identifier}"')
        self.identifier = identifier


class InvalidReleaseTypeError(NextSemverError):
    """The requested release type is not one of ReleaseType."""

    def __init__(self, release_type: object) -> None:
        super().__init__(f'Invalid release type "{release_type}"')
        self.release_type = release_type


class InvalidInputError(NextSemverError):
    """An action or CLI input could not be interpreted."""

    def __init__(self, name: str, value: object, expected: str) -> None:
        super().__init__(f'Input "{name}" has invalid value "{value}": {expected}')
        self.name = name
        self.value = value
