"""Status table parser and loader."""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
import logging
import re

from .constants import (
    ALIAS_SEPARATOR,
    ANY_METHODS,
    COMMENT_PREFIX,
    FIELD_COUNT,
    FIELD_SEPARATOR,
    LIST_SEPARATOR,
    MAX_STATUS_CODE,
    MIN_STATUS_CODE,
)
from .data import STATUS_TABLE
from .exceptions import DatabaseError
from .model import StatusRecord
from .util.log import debug_log
from .util.text import is_placeholder, normalize_whitespace, split_field

LOGGER = logging.getLogger(__name__)

_CODE_RE = re.compile(r"^[0-9]{3}$")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def _data_lines(text: str) -> Iterator[tuple[int, str]]:
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield line_number, line


def _parse_methods(value: str) -> tuple[str, ...]:
    if is_placeholder(value) or value.lower() == ANY_METHODS.lower():
        return ()
    return split_field(value, LIST_SEPARATOR)


def parse_row(line: str, line_number: int) -> StatusRecord:
    """Parse one ``CODE | NAME | ALIASES | FLAGS | METHODS | DESCRIPTION`` row."""
    fields = [part.strip() for part in line.split(FIELD_SEPARATOR, maxsplit=FIELD_COUNT - 1)]
    if len(fields) != FIELD_COUNT:
        raise DatabaseError(line_number, f"expected {FIELD_COUNT} fields, got {len(fields)}")
    for value in fields:
        if _CONTROL_RE.search(value):
            raise DatabaseError(line_number, f"control character in field {value!r}")

    raw_code, name, raw_aliases, raw_flags, raw_methods, description = fields

    if not _CODE_RE.fullmatch(raw_code):
        raise DatabaseError(line_number, f"status code {raw_code!r} is not three digits")
    code = int(raw_code)
    if not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE:
        raise DatabaseError(
            line_number,
            f"status code {code} outside {MIN_STATUS_CODE}-{MAX_STATUS_CODE}",
        )
    if is_placeholder(name):
        raise DatabaseError(line_number, f"status {code} has no name")
    if is_placeholder(description):
        raise DatabaseError(line_number, f"status {code} has no description")

    return StatusRecord(
        code=code,
        name=normalize_whitespace(name),
        aliases=split_field(raw_aliases, ALIAS_SEPARATOR),
        flags=split_field(raw_flags, LIST_SEPARATOR),
        methods=_parse_methods(raw_methods),
        description=description,
    )


def parse_database(text: str) -> tuple[StatusRecord, ...]:
    """Parse a status table, failing on the first malformed or out-of-order row."""
    records: list[StatusRecord] = []
    previous_code: int | None = None

    for line_number, line in _data_lines(text):
        record = parse_row(line, line_number)
        if previous_code is not None:
            if record.code == previous_code:
                raise DatabaseError(line_number, f"duplicate status code {record.code}")
            if record.code < previous_code:
                raise DatabaseError(
                    line_number,
                    f"status code {record.code} listed after {previous_code}",
                )
        previous_code = record.code
        records.append(record)

    return tuple(records)


@lru_cache(maxsize=1)
def load_database() -> tuple[StatusRecord, ...]:
    """Load the embedded status table once per process."""
    records = parse_database(STATUS_TABLE)
    debug_log(LOGGER, "loaded %d status records", len(records))
    return records
