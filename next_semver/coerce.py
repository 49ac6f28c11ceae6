"""Coercion of loose version strings.

CI tags are often written as ``v1``, ``1.2`` or ``01.02.03``. Before strict
parsing, the leading numeric part is rewritten into a full
``MAJOR.MINOR.PATCH`` triple:

- "1" → "1.0.0"
- "v1.2-beta" → "1.2.0-beta"
- "01.02.03" → "1.2.3"
"""

from __future__ import annotations

import re

PATTERN = re.compile(
    r"^v?(?P<major>\d+)(?:\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?)?", re.ASCII
)


def _rewrite(match: re.Match[str]) -> str:
    # Missing parts default to 0; leading zeros are dropped without an int
    # round-trip so numerals of any length survive
    parts = (match.group(name) or "0" for name in ("major", "minor", "patch"))
    return ".".join(part.lstrip("0") or "0" for part in parts)


def normalize(raw: str) -> str:
    """Rewrite the leading ``v?MAJOR[.MINOR[.PATCH]]`` of raw into canonical form.

    Text after the matched prefix is kept as-is. Strings that do not start
    with a version number are returned unchanged and left for the parser
    to reject.
    """
    return PATTERN.sub(_rewrite, raw, count=1)
