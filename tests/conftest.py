"""Shared test fixtures."""

from collections.abc import Sequence

import pytest

from csvtable import create_service
from csvtable.errors import FetchFailedError
from csvtable.fetch import CsvFetcher
from csvtable.sql.executor import DatabaseSqlExecutor, SqlExecutor, SqlResult


class RecordingExecutor(SqlExecutor):
    """Records every statement; fails the calls listed in ``fail_on`` (1-based)."""

    def __init__(self, fail_on: Sequence[int] = (), detail: str = "constraint failed"):
        self.calls: list[tuple[str, list[str]]] = []
        self._fail_on = set(fail_on)
        self._detail = detail

    def run_sql(self, sql, params=()):
        self.calls.append((sql, list(params)))
        if len(self.calls) in self._fail_on:
            return SqlResult(success=False, detail=self._detail)
        return SqlResult(success=True)


class StaticFetcher(CsvFetcher):
    """Serves a fixed body, or raises FetchFailedError when given one."""

    def __init__(self, text: str = "", error: FetchFailedError | None = None):
        self._text = text
        self._error = error
        self.urls: list[str] = []

    def fetch(self, url):
        self.urls.append(url)
        if self._error is not None:
            raise self._error
        return self._text


@pytest.fixture
def db_service(tmp_path):
    """Provide a fresh SQLite DatabaseService for each test."""
    db_path = tmp_path / "test.db"
    service = create_service(f"sqlite:///{db_path}")
    service.connect()
    yield service
    service.close()


@pytest.fixture
def db_executor(db_service):
    return DatabaseSqlExecutor(db_service)


@pytest.fixture
def recording_executor():
    return RecordingExecutor()
