"""Result assembly: parse a raw value and compute all next versions."""

from __future__ import annotations

import json

from pydantic import BaseModel

from .coerce import normalize
from .errors import ParseError
from .increment import increment
from .models import IdentifierBase, ReleaseType, Version
from .versions import parse_version

OUTPUT_NAMES = (
    "version",
    "major",
    "minor",
    "patch",
    "prerelease",
    "build",
    *(f"next.{release.value}" for release in ReleaseType),
    "json",
)


def _to_output(value: object) -> str:
    """Serialize a value the way the Actions toolkit does for setOutput."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


class NextVersions(BaseModel):
    """The version produced by each release type."""

    premajor: Version
    preminor: Version
    prepatch: Version
    major: Version
    minor: Version
    patch: Version
    pre: Version
    prerelease: Version

    def __getitem__(self, release: ReleaseType | str) -> Version:
        return getattr(self, ReleaseType(release).value)


class Result(BaseModel):
    """A parsed version together with its eight successors."""

    version: Version
    next: NextVersions

    def to_json(self) -> dict[str, object]:
        """Aggregate object emitted as the ``json`` output."""
        data = self.version.to_json()
        data["next"] = {
            release.value: self.next[release].to_json() for release in ReleaseType
        }
        return data

    def outputs(self) -> dict[str, str]:
        """Map every output name to its string value, in OUTPUT_NAMES order."""
        values: dict[str, object] = {
            "version": self.version.version,
            "major": self.version.major,
            "minor": self.version.minor,
            "patch": self.version.patch,
            "prerelease": list(self.version.prerelease),
            "build": list(self.version.build),
        }
        for release in ReleaseType:
            values[f"next.{release.value}"] = self.next[release].version
        values["json"] = self.to_json()
        return {name: _to_output(values[name]) for name in OUTPUT_NAMES}


def next_versions(
    version: Version,
    identifier: str | None = None,
    identifier_base: IdentifierBase = IdentifierBase.UNSPECIFIED,
) -> NextVersions:
    """Apply every release type to ``version``."""
    return NextVersions(
        **{
            release.value: increment(version, release, identifier, identifier_base)
            for release in ReleaseType
        }
    )


def describe(
    value: str,
    identifier: str | None = None,
    identifier_base: IdentifierBase = IdentifierBase.UNSPECIFIED,
) -> Result:
    """Coerce and parse ``value``, then compute its next versions.

    Raises:
        ParseError: If value is not a version even after coercion.
        InvalidIdentifierError: If identifier is malformed.
    """
    try:
        version = parse_version(normalize(value))
    except ParseError as exc:
        # Report what the user passed, not the coerced string
        raise ParseError(value, exc.reason) from None
    return Result(
        version=version,
        next=next_versions(version, identifier, identifier_base),
    )
