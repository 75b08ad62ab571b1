"""Text utility helpers."""

from __future__ import annotations

import re

from ..constants import EMPTY_PLACEHOLDER

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(value: str) -> str:
    """Collapse repeated whitespace and trim ends."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def is_placeholder(value: str) -> bool:
    """Check whether a table field holds the empty-field marker."""
    return not value or value == EMPTY_PLACEHOLDER


def split_field(value: str, separator: str) -> tuple[str, ...]:
    """Split a list-valued table field, honoring the empty-field marker."""
    if is_placeholder(value):
        return ()
    return tuple(item for item in (part.strip() for part in value.split(separator)) if item)
