"""Validated lookup configuration built from command-line input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .constants import COLOR_MODES, DEFAULT_COLOR_MODE
from .exceptions import UsageError
from .model import MatchOptions, OutputOptions


class _Stream(Protocol):
    def isatty(self) -> bool: ...


def resolve_color(color_mode: str, stream: _Stream) -> bool:
    """Resolve a color mode to on/off; ``auto`` follows whether stream is a terminal."""
    if color_mode == "always":
        return True
    if color_mode == "never":
        return False
    if color_mode == "auto":
        try:
            return stream.isatty()
        except ValueError:
            return False
    raise UsageError(f"Invalid color mode: {color_mode}")


@dataclass(frozen=True)
class LookupConfig:
    list_all: bool = False
    color_mode: str = DEFAULT_COLOR_MODE
    codes_only: bool = False
    names_only: bool = False
    exact_match: bool = False
    queries: tuple[str, ...] = ()

    def validate(self) -> LookupConfig:
        if self.codes_only and self.names_only:
            raise UsageError("Options -k and -n are mutually exclusive")
        if self.exact_match and not self.queries:
            raise UsageError("Option -x requires at least one query string")
        if self.color_mode not in COLOR_MODES:
            raise UsageError(f"Invalid color mode: {self.color_mode}")
        return self

    def match_options(self) -> MatchOptions:
        # Listing everything ignores any queries given alongside -a.
        queries = () if self.list_all else self.queries
        return MatchOptions(exact_match=self.exact_match, queries=queries)

    def output_options(self, stream: _Stream) -> OutputOptions:
        return OutputOptions(
            codes_only=self.codes_only,
            names_only=self.names_only,
            color_enabled=resolve_color(self.color_mode, stream),
        )
