"""Parse a version string and compute its next semantic versions."""

from __future__ import annotations

from .coerce import normalize
from .errors import (
    InvalidIdentifierError,
    InvalidInputError,
    InvalidReleaseTypeError,
    NextSemverError,
    ParseError,
)
from .increment import increment
from .models import IdentifierBase, Ordering, ReleaseType, Version
from .result import NextVersions, Result, describe, next_versions
from .versions import compare, compare_identifiers, parse_version

__all__ = [
    "IdentifierBase",
    "InvalidIdentifierError",
    "InvalidInputError",
    "InvalidReleaseTypeError",
    "NextSemverError",
    "NextVersions",
    "Ordering",
    "ParseError",
    "ReleaseType",
    "Result",
    "Version",
    "compare",
    "compare_identifiers",
    "describe",
    "increment",
    "next_versions",
    "normalize",
    "parse_version",
]
