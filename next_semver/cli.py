"""CLI entry point for next-semver."""

from __future__ import annotations

import json

import click

from .errors import NextSemverError
from .models import IdentifierBase
from .result import Result, describe
from .shell import debug, fatal, group, info, set_outputs


def _pretty(result: Result) -> str:
    return json.dumps(result.to_json(), indent=2)


@click.group()
@click.version_option(package_name="next-semver")
def cli() -> None:
    """Compute the next semantic versions for a version string."""


@cli.command()
@click.argument("value")
@click.option(
    "-i", "--identifier", default=None, help="Prerelease identifier, e.g. rc."
)
@click.option(
    "-b",
    "--identifier-base",
    default=None,
    help='Start new numeric identifiers at "0" or "1" (also true/false).',
)
@click.option("--json", "as_json", is_flag=True, help="Print the JSON object.")
def show(
    value: str, identifier: str | None, identifier_base: str | None, as_json: bool
) -> None:
    """Show the parsed VALUE and every next version."""
    try:
        base = IdentifierBase.resolve(identifier_base)
        result = describe(value.strip(), identifier, base)
    except NextSemverError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(_pretty(result))
        return

    outputs = result.outputs()
    del outputs["json"]
    width = max(len(name) for name in outputs)
    for name, text in outputs.items():
        click.echo(f"{name.ljust(width)}  {text}")


@cli.command()
@click.option("--value", envvar="INPUT_VALUE", default="", help="Version to parse.")
@click.option("--identifier", envvar="INPUT_IDENTIFIER", default="")
@click.option(
    "--identifier-base",
    envvar=["INPUT_IDENTIFIER-BASE", "INPUT_IDENTIFIER_BASE"],
    default="",
)
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    default=None,
    type=click.Path(dir_okay=False),
    help="Step output file; outputs go to stdout when unset.",
)
def action(
    value: str, identifier: str, identifier_base: str, github_output: str | None
) -> None:
    """Run as a GitHub Action step (inputs come from INPUT_* variables)."""
    value, identifier = value.strip(), identifier.strip()
    if not value:
        fatal("Input required and not supplied: value")

    debug(f"value={value!r} identifier={identifier!r} base={identifier_base!r}")
    try:
        base = IdentifierBase.resolve(identifier_base.strip())
        result = describe(value, identifier or None, base)
    except NextSemverError as exc:
        fatal(str(exc))
        return

    set_outputs(github_output, result.outputs())

    with group("Output"):
        info(_pretty(result))
