"""Console script for http-status."""

from __future__ import annotations

import sys
from typing import Final

import click

from . import __version__ as _version
from .config import LookupConfig
from .constants import DEFAULT_COLOR_MODE, NO_MATCH_MESSAGE
from .database import load_database
from .exceptions import StatusLookupError, UsageError
from .lookup import run_lookup
from .model import Outcome
from .util.log import configure_logging

EXIT_CODES: Final[dict[Outcome, int]] = {
    Outcome.SUCCESS: 0,
    Outcome.GENERAL_ERROR: 1,
    Outcome.USAGE_ERROR: 2,
    Outcome.NO_MATCH: 3,
}


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(_version, "-v", "--version")
@click.argument("query", nargs=-1, required=False, type=click.STRING)
@click.option("-a", "--all", "list_all", is_flag=True, help="List all statuses.")
@click.option(
    "-C",
    "--color",
    "color_mode",
    default=DEFAULT_COLOR_MODE,
    show_default=True,
    metavar="MODE",
    help="Color output: auto, always or never.",
)
@click.option("-k", "--codes", "codes_only", is_flag=True, help="Print codes only.")
@click.option("-n", "--names", "names_only", is_flag=True, help="Print names only.")
@click.option(
    "-x",
    "--exact",
    "exact_match",
    is_flag=True,
    help="Exact phrase match (requires full name or alias equality).",
)
@click.pass_context
def main(
    ctx: click.Context,
    query: tuple[str, ...],
    list_all: bool,
    color_mode: str,
    codes_only: bool,
    names_only: bool,
    exact_match: bool,
) -> None:
    """
    Query HTTP status codes from the terminal.

    \b
    Example usages:
      http-status                  # List all statuses
      http-status 404              # Lookup by code
      http-status 4xx              # Lookup by class mask
      http-status 'too large'      # Lookup by phrase
      http-status -n 5xx           # Print only names of 5xx errors
      http-status -x 'Not Found'   # Exact name or alias
    """
    configure_logging()

    config = LookupConfig(
        list_all=list_all,
        color_mode=color_mode,
        codes_only=codes_only,
        names_only=names_only,
        exact_match=exact_match,
        queries=tuple(query),
    )
    try:
        config.validate()
        output_options = config.output_options(sys.stdout)
    except UsageError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc

    try:
        result = run_lookup(load_database(), config.match_options(), output_options)
    except StatusLookupError as exc:
        raise click.ClickException(str(exc)) from exc

    if result.outcome is Outcome.NO_MATCH:
        click.echo(f"Error: {NO_MATCH_MESSAGE}", err=True)
        ctx.exit(EXIT_CODES[Outcome.NO_MATCH])

    click.echo(result.output, color=output_options.color_enabled)
