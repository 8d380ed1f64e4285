"""Tests for the row loader."""

import threading

import pytest

from csvtable.errors import IngestionCancelledError, RowInsertError
from csvtable.ingestion.loader import (
    MAX_BIND_PARAMS,
    build_insert_sql,
    insert_rows,
    normalize_row,
)
from csvtable.sql.executor import SqlResult

from conftest import RecordingExecutor


class TestNormalizeRow:
    def test_pads_short_rows(self):
        assert normalize_row(["1"], 3) == ["1", "", ""]

    def test_truncates_long_rows(self):
        assert normalize_row(["1", "2", "3", "4"], 2) == ["1", "2"]

    def test_does_not_mutate_input(self):
        row = ["1"]
        normalize_row(row, 3)
        assert row == ["1"]


class TestBuildInsertSql:
    def test_single_row(self):
        assert (
            build_insert_sql("t", ["a", "b"])
            == 'INSERT INTO "t" ("a", "b") VALUES (?, ?)'
        )

    def test_multi_row_with_placeholder(self):
        assert (
            build_insert_sql("t", ["a", "b"], row_count=2, placeholder="%s")
            == 'INSERT INTO "t" ("a", "b") VALUES (%s, %s), (%s, %s)'
        )


class TestInsertRows:
    def test_one_statement_per_row_in_order(self, recording_executor):
        rows = [["1", "a"], ["2", "b"], ["3", "c"]]
        assert insert_rows(recording_executor, "t", ["id", "name"], rows) == 3
        assert [params for _, params in recording_executor.calls] == rows

    def test_values_are_bound_not_interpolated(self, recording_executor):
        insert_rows(recording_executor, "t", ["v"], [["'); DROP TABLE t; --"]])
        sql, params = recording_executor.calls[0]
        assert "DROP" not in sql
        assert params == ["'); DROP TABLE t; --"]

    def test_arity_normalized(self, recording_executor):
        insert_rows(recording_executor, "t", ["a", "b"], [["1"], ["1", "2", "3"]])
        assert [params for _, params in recording_executor.calls] == [["1", ""], ["1", "2"]]

    def test_stops_at_first_failure(self):
        executor = RecordingExecutor(fail_on=[3], detail="UNIQUE constraint failed")
        rows = [[str(i)] for i in range(1, 6)]

        with pytest.raises(RowInsertError) as exc_info:
            insert_rows(executor, "t", ["id"], rows)

        assert exc_info.value.row_number == 3
        assert exc_info.value.rows_inserted == 2
        assert exc_info.value.detail == "UNIQUE constraint failed"
        assert len(executor.calls) == 3

    def test_chunked_inserts(self, recording_executor):
        rows = [[str(i)] for i in range(1, 6)]
        assert insert_rows(recording_executor, "t", ["id"], rows, chunk_size=2) == 5
        assert [params for _, params in recording_executor.calls] == [
            ["1", "2"],
            ["3", "4"],
            ["5"],
        ]
        assert recording_executor.calls[0][0].endswith("VALUES (?), (?)")
        assert recording_executor.calls[2][0].endswith("VALUES (?)")

    def test_executor_exception_becomes_row_error(self):
        class RaisingExecutor(RecordingExecutor):
            def run_sql(self, sql, params=()):
                super().run_sql(sql, params)
                if len(self.calls) == 2:
                    raise ValueError("A string literal cannot contain NUL (0x00) characters.")
                return SqlResult(success=True)

        executor = RaisingExecutor()
        with pytest.raises(RowInsertError) as exc_info:
            insert_rows(executor, "t", ["id"], [["1"], ["2\x00"], ["3"]])

        assert exc_info.value.row_number == 2
        assert exc_info.value.rows_inserted == 1
        assert "NUL" in exc_info.value.detail
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert len(executor.calls) == 2

    def test_chunk_size_capped_by_bind_parameter_limit(self, recording_executor):
        columns = [f"c{i}" for i in range(MAX_BIND_PARAMS // 2)]
        rows = [["x"] * len(columns) for _ in range(3)]

        assert insert_rows(recording_executor, "t", columns, rows, chunk_size=500) == 3
        assert len(recording_executor.calls) == 2
        assert all(len(params) <= MAX_BIND_PARAMS for _, params in recording_executor.calls)

    def test_chunk_failure_reports_first_row_of_chunk(self):
        executor = RecordingExecutor(fail_on=[2])
        rows = [[str(i)] for i in range(1, 6)]

        with pytest.raises(RowInsertError) as exc_info:
            insert_rows(executor, "t", ["id"], rows, chunk_size=2)

        assert exc_info.value.row_number == 3
        assert exc_info.value.rows_inserted == 2

    def test_invalid_chunk_size(self, recording_executor):
        with pytest.raises(ValueError):
            insert_rows(recording_executor, "t", ["id"], [["1"]], chunk_size=0)

    def test_cancel_before_first_row(self, recording_executor):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(IngestionCancelledError) as exc_info:
            insert_rows(recording_executor, "t", ["id"], [["1"]], cancel_event=cancel)
        assert exc_info.value.rows_inserted == 0
        assert recording_executor.calls == []

    def test_cancel_between_rows(self):
        cancel = threading.Event()

        class CancellingExecutor(RecordingExecutor):
            def run_sql(self, sql, params=()):
                result = super().run_sql(sql, params)
                if len(self.calls) == 2:
                    cancel.set()
                return result

        executor = CancellingExecutor()
        with pytest.raises(IngestionCancelledError) as exc_info:
            insert_rows(executor, "t", ["id"], [["1"], ["2"], ["3"]], cancel_event=cancel)
        assert exc_info.value.rows_inserted == 2
        assert len(executor.calls) == 2

    def test_partial_commit_against_sqlite(self, db_executor, db_service):
        with db_service.transaction():
            db_service.execute('CREATE TABLE "t" ("id" TEXT PRIMARY KEY, "v" TEXT)')

        rows = [["1", "a"], ["2", "b"], ["1", "dup"], ["3", "c"]]
        with pytest.raises(RowInsertError) as exc_info:
            insert_rows(db_executor, "t", ["id", "v"], rows)

        assert exc_info.value.row_number == 3
        assert exc_info.value.rows_inserted == 2
        assert "UNIQUE" in exc_info.value.detail
        with db_service.transaction():
            stored = db_service.execute('SELECT "id", "v" FROM "t" ORDER BY "id"')
        assert stored == [{"id": "1", "v": "a"}, {"id": "2", "v": "b"}]
