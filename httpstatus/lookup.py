"""Lookup pass over the status database."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging

from .constants import ENTRY_SEPARATOR
from .matching import matches
from .model import LookupResult, MatchOptions, OutputOptions, StatusRecord
from .render import render_entry
from .util.log import debug_log

LOGGER = logging.getLogger(__name__)


def iter_matches(
    database: Iterable[StatusRecord], match_options: MatchOptions
) -> Iterator[StatusRecord]:
    """Yield matching records in database order."""
    for record in database:
        if matches(record, match_options.queries, match_options.exact_match):
            yield record


def run_lookup(
    database: Iterable[StatusRecord],
    match_options: MatchOptions,
    output_options: OutputOptions,
) -> LookupResult:
    """Match and render every selected record in a single pass."""
    lines: list[str] = []
    match_count = 0

    for record in iter_matches(database, match_options):
        if match_count and output_options.full:
            lines.append(ENTRY_SEPARATOR)
        lines.append(render_entry(record, output_options))
        match_count += 1

    debug_log(
        LOGGER,
        "queries=%r exact=%s matched %d records",
        match_options.queries,
        match_options.exact_match,
        match_count,
    )
    return LookupResult(match_count=match_count, lines=tuple(lines))
