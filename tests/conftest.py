from __future__ import annotations

import pytest

from httpstatus.database import load_database
from httpstatus.model import StatusRecord


@pytest.fixture(scope="session")
def database() -> tuple[StatusRecord, ...]:
    return load_database()


@pytest.fixture
def by_code(database: tuple[StatusRecord, ...]) -> dict[int, StatusRecord]:
    return {record.code: record for record in database}


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HTTPSTATUS_DEBUG", raising=False)
