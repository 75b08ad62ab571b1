from __future__ import annotations

import pytest

from httpstatus.config import LookupConfig, resolve_color
from httpstatus.exceptions import DatabaseError, StatusLookupError, UsageError
from httpstatus.model import MatchOptions, OutputOptions
from httpstatus.util import log as log_utils
from httpstatus.util import text as text_utils


class _FakeStream:
    def __init__(self, is_tty: bool) -> None:
        self._is_tty = is_tty

    def isatty(self) -> bool:
        return self._is_tty


class _ClosedStream:
    def isatty(self) -> bool:
        raise ValueError("I/O operation on closed file")


def test_resolve_color_modes() -> None:
    assert resolve_color("always", _FakeStream(is_tty=False)) is True
    assert resolve_color("never", _FakeStream(is_tty=True)) is False
    assert resolve_color("auto", _FakeStream(is_tty=True)) is True
    assert resolve_color("auto", _FakeStream(is_tty=False)) is False
    assert resolve_color("auto", _ClosedStream()) is False
    with pytest.raises(UsageError, match="Invalid color mode: rainbow"):
        resolve_color("rainbow", _FakeStream(is_tty=True))


@pytest.mark.parametrize(
    ("config", "message"),
    [
        (LookupConfig(codes_only=True, names_only=True), "mutually exclusive"),
        (LookupConfig(exact_match=True), "requires at least one query"),
        (LookupConfig(exact_match=True, list_all=True), "requires at least one query"),
        (LookupConfig(color_mode="sometimes"), "Invalid color mode"),
    ],
)
def test_validate_rejects_bad_combinations(config: LookupConfig, message: str) -> None:
    with pytest.raises(UsageError, match=message):
        config.validate()


def test_validate_returns_config() -> None:
    config = LookupConfig(exact_match=True, queries=("Not Found",))
    assert config.validate() is config


def test_match_options() -> None:
    config = LookupConfig(exact_match=True, queries=("teapot", "5xx"))
    assert config.match_options() == MatchOptions(exact_match=True, queries=("teapot", "5xx"))

    listing = LookupConfig(list_all=True, queries=("teapot",))
    assert listing.match_options() == MatchOptions(queries=())


def test_output_options_resolve_color() -> None:
    config = LookupConfig(codes_only=True)
    assert config.output_options(_FakeStream(is_tty=True)) == OutputOptions(
        codes_only=True, names_only=False, color_enabled=True
    )
    assert config.output_options(_FakeStream(is_tty=False)).color_enabled is False
    assert OutputOptions(codes_only=True).full is False
    assert OutputOptions().full is True


def test_exception_messages() -> None:
    error = DatabaseError(4, "duplicate status code 200")
    assert isinstance(error, StatusLookupError)
    assert str(error) == "Malformed status database row at line 4: duplicate status code 200"
    assert issubclass(UsageError, StatusLookupError)


def test_text_utils() -> None:
    assert text_utils.normalize_whitespace("  Not   Found ") == "Not Found"
    assert text_utils.is_placeholder("-") is True
    assert text_utils.is_placeholder("") is True
    assert text_utils.is_placeholder("GET") is False
    assert text_utils.split_field("-", ";") == ()
    assert text_utils.split_field("A; B ;;C", ";") == ("A", "B", "C")


def test_debug_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    assert log_utils.debug_enabled() is False
    monkeypatch.setenv("HTTPSTATUS_DEBUG", "1")
    assert log_utils.debug_enabled() is True
    monkeypatch.setenv("HTTPSTATUS_DEBUG", "0")
    assert log_utils.debug_enabled() is False
    log_utils.debug_log(log_utils.LOGGER, "not logged %s", "here")
