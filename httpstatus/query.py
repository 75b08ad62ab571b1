"""Query token classification."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
import re

_MASK_RE = re.compile(r"^[0-9xX]{3}$")
_WILDCARD_RE = re.compile(r"[xX]")


class QueryKind(Enum):
    MASK = "mask"
    TEXT = "text"


def is_mask(token: str) -> bool:
    """Return True for three-character digit/wildcard tokens such as 4xx, 50x or 404."""
    return _MASK_RE.fullmatch(token) is not None


def classify(token: str) -> QueryKind:
    return QueryKind.MASK if is_mask(token) else QueryKind.TEXT


@lru_cache(maxsize=256)
def mask_pattern(token: str) -> re.Pattern[str]:
    """Compile a mask into a pattern matching whole three-digit codes."""
    if not is_mask(token):
        raise ValueError(f"Not a status code mask: {token!r}")
    return re.compile(_WILDCARD_RE.sub("[0-9]", token))
