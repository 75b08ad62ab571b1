"""Data models for status records and lookup options."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class StatusRecord:
    code: int
    name: str
    aliases: tuple[str, ...]
    flags: tuple[str, ...]
    methods: tuple[str, ...]
    description: str

    @property
    def code_text(self) -> str:
        return f"{self.code:03d}"

    @property
    def status_class(self) -> int:
        return self.code // 100

    @property
    def any_method(self) -> bool:
        """True when the record is not tied to particular HTTP methods."""
        return not self.methods


@dataclass(frozen=True)
class MatchOptions:
    exact_match: bool = False
    queries: tuple[str, ...] = ()


@dataclass(frozen=True)
class OutputOptions:
    codes_only: bool = False
    names_only: bool = False
    color_enabled: bool = False

    @property
    def full(self) -> bool:
        return not (self.codes_only or self.names_only)


class Outcome(Enum):
    """Result kinds of a CLI invocation; exit codes are assigned in the CLI only."""

    SUCCESS = "success"
    GENERAL_ERROR = "general_error"
    USAGE_ERROR = "usage_error"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class LookupResult:
    match_count: int
    lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    @property
    def outcome(self) -> Outcome:
        return Outcome.SUCCESS if self.match_count > 0 else Outcome.NO_MATCH
