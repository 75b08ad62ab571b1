"""Constants used across pyhttpstatus."""

from __future__ import annotations

from typing import Final

FIELD_SEPARATOR: Final[str] = "|"
ALIAS_SEPARATOR: Final[str] = ";"
LIST_SEPARATOR: Final[str] = ","
EMPTY_PLACEHOLDER: Final[str] = "-"
COMMENT_PREFIX: Final[str] = "#"
FIELD_COUNT: Final[int] = 6

ANY_METHODS: Final[str] = "Any"
ALIAS_DISPLAY_SEPARATOR: Final[str] = ", "
FLAG_DISPLAY_SEPARATOR: Final[str] = ","
METHOD_DISPLAY_SEPARATOR: Final[str] = ","

MIN_STATUS_CODE: Final[int] = 100
MAX_STATUS_CODE: Final[int] = 599

STATUS_CLASS_STYLES: Final[dict[int, str]] = {
    1: "cyan",
    2: "green",
    3: "yellow",
    4: "red",
    5: "magenta",
}
DIM_STYLE: Final[str] = "dim"

DETAIL_INDENT: Final[str] = " " * 5
ENTRY_SEPARATOR: Final[str] = ""

COLOR_MODES: Final[tuple[str, ...]] = ("auto", "always", "never")
DEFAULT_COLOR_MODE: Final[str] = "auto"

DEBUG_ENV_VAR: Final[str] = "HTTPSTATUS_DEBUG"

NO_MATCH_MESSAGE: Final[str] = "No match found for the given query"
