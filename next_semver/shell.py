"""GitHub Actions workflow command helpers.

Provides thin wrappers for the runner's stdout protocol (groups, debug and
error annotations) and for appending step outputs to $GITHUB_OUTPUT.
"""

from __future__ import annotations

import sys
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager


def _escape(data: str) -> str:
    """Escape command data so it stays on one line."""
    return data.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def info(msg: str) -> None:
    """Print a plain log line."""
    print(msg)


def debug(msg: str) -> None:
    """Print a debug message, shown only when step debug logging is enabled."""
    print(f"::debug::{_escape(msg)}")


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold everything printed inside the block under a collapsible header."""
    print(f"::group::{_escape(title)}")
    try:
        yield
    finally:
        print("::endgroup::")


def fatal(msg: str) -> None:
    """Annotate the step with an error and exit with code 1.

    Use for unrecoverable errors; the runner marks the step as failed.
    """
    print(f"::error::{_escape(msg)}")
    sys.exit(1)


def format_output(name: str, value: str) -> str:
    """Render one step output line for the $GITHUB_OUTPUT file.

    Single-line values use ``name=value``. Multi-line values use the
    heredoc form with a random delimiter.
    """
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_outputs(output_path: str | None, outputs: Mapping[str, str]) -> None:
    """Append outputs to the step output file, or print them if there is none."""
    lines = "".join(format_output(name, value) for name, value in outputs.items())
    if output_path is None:
        sys.stdout.write(lines)
        return
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(lines)
