"""Record matching for mask, fuzzy and exact queries.

A token is always eligible for text matching. When it also has the mask
shape it is additionally tested against the status code, so ``404`` is
checked both as a mask and as text.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import ALIAS_SEPARATOR
from .model import StatusRecord
from .query import QueryKind, classify, mask_pattern


def _mask_matches(record: StatusRecord, token: str) -> bool:
    return mask_pattern(token).fullmatch(record.code_text) is not None


def _exact_matches(record: StatusRecord, query_lower: str) -> bool:
    if record.name.lower() == query_lower:
        return True
    return any(alias.lower() == query_lower for alias in record.aliases)


def _fuzzy_matches(record: StatusRecord, query_lower: str) -> bool:
    if query_lower in record.name.lower():
        return True
    if not record.aliases:
        return False
    return query_lower in ALIAS_SEPARATOR.join(record.aliases).lower()


def token_matches(record: StatusRecord, token: str, exact_match: bool) -> bool:
    """Check a single query token against a record."""
    if classify(token) is QueryKind.MASK and _mask_matches(record, token):
        return True

    query_lower = token.lower()
    if exact_match:
        return _exact_matches(record, query_lower)
    return _fuzzy_matches(record, query_lower)


def matches(record: StatusRecord, queries: Sequence[str], exact_match: bool = False) -> bool:
    """Return True when any query selects the record; no queries selects everything."""
    if not queries:
        return True
    return any(token_matches(record, token, exact_match) for token in queries)
