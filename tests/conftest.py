"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from next_semver.models import Version
from next_semver.versions import parse_version


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def action_env(tmp_path: Path) -> dict[str, str | None]:
    """Environment for the action command, isolated from the real runner."""
    return {
        "INPUT_VALUE": None,
        "INPUT_IDENTIFIER": None,
        "INPUT_IDENTIFIER-BASE": None,
        "INPUT_IDENTIFIER_BASE": None,
        "GITHUB_OUTPUT": str(tmp_path / "github_output.txt"),
    }


@pytest.fixture
def beta_version() -> Version:
    """1.2.3-beta.1 with build metadata attached."""
    return parse_version("1.2.3-beta.1+build.7")
