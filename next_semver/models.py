"""Data models for next-semver.

These Pydantic models are the immutable value types passed between the
parser, the increment engine and the result assembler.
"""

from __future__ import annotations

import re
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator

from .errors import InvalidInputError

# Alphanumeric identifier: at least one character, any of [0-9A-Za-z-]
IDENTIFIER_CHARS = re.compile(r"[0-9A-Za-z-]+", re.ASCII)

# Longest version string accepted by the parser. Numerals are bounded by it too,
# which keeps them well under the interpreter's int/str conversion limit.
MAX_LENGTH = 256
_NUMERIC_LIMIT = 10**MAX_LENGTH

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


class ReleaseType(str, Enum):
    """Named increment operations, in output order."""

    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE = "pre"
    PRERELEASE = "prerelease"


class IdentifierBase(Enum):
    """Starting value for newly created numeric prerelease identifiers."""

    ZERO = "0"
    ONE = "1"
    UNSPECIFIED = ""

    @property
    def start(self) -> int:
        """The numeral to seed with; UNSPECIFIED behaves like ZERO."""
        return 1 if self is IdentifierBase.ONE else 0

    @classmethod
    def resolve(cls, raw: str | bool | int | None) -> IdentifierBase:
        """Convert a raw input value into an IdentifierBase.

        Boolean spellings are tried first (``true`` -> ONE, ``false`` -> ZERO),
        then the literal ``"1"``/``"0"``. An empty or missing value is
        UNSPECIFIED.

        Raises:
            InvalidInputError: If the value is none of the above.
        """
        if raw is None:
            return cls.UNSPECIFIED
        if isinstance(raw, IdentifierBase):
            return raw
        if isinstance(raw, bool):
            return cls.ONE if raw else cls.ZERO
        if isinstance(raw, int) and raw in (0, 1):
            return cls.ONE if raw else cls.ZERO
        if isinstance(raw, str):
            if raw in _TRUE_VALUES:
                return cls.ONE
            if raw in _FALSE_VALUES:
                return cls.ZERO
            for member in cls:
                if member.value == raw:
                    return member
        raise InvalidInputError(
            "identifier-base", raw, 'expected "0", "1", "true", "false" or empty'
        )


class Ordering(IntEnum):
    """Result of comparing two versions or identifiers."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Version(BaseModel):
    """A decomposed semantic version.

    Attributes:
        major: Major component.
        minor: Minor component.
        patch: Patch component.
        prerelease: Prerelease identifiers; numeric identifiers are ints.
        build: Build metadata identifiers, kept as strings.
    """

    model_config = ConfigDict(frozen=True)

    major: NonNegativeInt
    minor: NonNegativeInt
    patch: NonNegativeInt
    prerelease: tuple[NonNegativeInt | str, ...] = ()
    build: tuple[str, ...] = ()

    @field_validator("major", "minor", "patch")
    @classmethod
    def _check_numeral(cls, value: int) -> int:
        if value >= _NUMERIC_LIMIT:
            raise ValueError(f"numeral longer than {MAX_LENGTH} digits")
        return value

    @field_validator("prerelease")
    @classmethod
    def _check_prerelease(
        cls, value: tuple[int | str, ...]
    ) -> tuple[int | str, ...]:
        for ident in value:
            if isinstance(ident, int) and ident >= _NUMERIC_LIMIT:
                raise ValueError(f"numeral longer than {MAX_LENGTH} digits")
            if isinstance(ident, str) and (
                not IDENTIFIER_CHARS.fullmatch(ident) or ident.isdecimal()
            ):
                raise ValueError(f"invalid prerelease identifier: {ident!r}")
        return value

    @field_validator("build")
    @classmethod
    def _check_build(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for ident in value:
            if not IDENTIFIER_CHARS.fullmatch(ident):
                raise ValueError(f"invalid build identifier: {ident!r}")
        return value

    @property
    def version(self) -> str:
        """Canonical ``MAJOR.MINOR.PATCH[-PRERELEASE]`` string (no build)."""
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(i) for i in self.prerelease)
        return text

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        if self.build:
            return f"{self.version}+{'.'.join(self.build)}"
        return self.version

    def to_json(self) -> dict[str, object]:
        """JSON-ready mapping using the action's output field names."""
        return {
            "version": self.version,
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": list(self.prerelease),
            "isPrerelease": self.is_prerelease,
            "build": list(self.build),
        }
