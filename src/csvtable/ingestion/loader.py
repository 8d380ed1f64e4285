"""Sequential row loading with partial-failure accounting."""

import logging
import threading
from collections.abc import Iterator

from csvtable.errors import IngestionCancelledError, RowInsertError
from csvtable.sql.executor import SqlExecutor

logger = logging.getLogger(__name__)

# SQLite's default SQLITE_MAX_VARIABLE_NUMBER; PostgreSQL allows 65535.
MAX_BIND_PARAMS = 32766


def normalize_row(row: list[str], width: int) -> list[str]:
    """Truncate or pad ``row`` with empty strings to exactly ``width`` values."""
    values = row[:width]
    values.extend([""] * (width - len(values)))
    return values


def build_insert_sql(
    table_name: str, columns: list[str], row_count: int = 1, placeholder: str = "?"
) -> str:
    """Parameterized INSERT for ``row_count`` rows. Identifiers are not escaped."""
    cols = ", ".join(f'"{column}"' for column in columns)
    group = "(" + ", ".join(placeholder for _ in columns) + ")"
    values = ", ".join(group for _ in range(row_count))
    return f'INSERT INTO "{table_name}" ({cols}) VALUES {values}'


def chunked(rows: list[list[str]], chunk_size: int) -> Iterator[tuple[int, list[list[str]]]]:
    """Yield ``(first_row_number, chunk)`` pairs; row numbers are 1-based."""
    for start in range(0, len(rows), chunk_size):
        yield start + 1, rows[start : start + chunk_size]


def insert_rows(
    executor: SqlExecutor,
    table_name: str,
    columns: list[str],
    rows: list[list[str]],
    chunk_size: int = 1,
    cancel_event: threading.Event | None = None,
) -> int:
    """Insert ``rows`` in document order, one statement per chunk.

    With the default ``chunk_size`` of 1 each row is its own statement, so a
    failure pinpoints the exact row. Larger chunks use multi-row INSERTs and
    report the first row of the failing chunk; chunks are capped so a statement
    binds at most ``MAX_BIND_PARAMS`` values. Loading stops at the first
    failure; later rows are never attempted.

    Returns the number of rows inserted.

    Raises:
        RowInsertError: The backend rejected a statement or the executor raised.
        IngestionCancelledError: ``cancel_event`` was set between statements.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")

    width = len(columns)
    max_chunk = max(1, MAX_BIND_PARAMS // max(width, 1))
    if chunk_size > max_chunk:
        logger.warning(
            "chunk_size %d exceeds %d bind parameters for %d columns; using %d",
            chunk_size,
            MAX_BIND_PARAMS,
            width,
            max_chunk,
        )
        chunk_size = max_chunk

    inserted = 0
    for row_number, chunk in chunked(rows, chunk_size):
        if cancel_event is not None and cancel_event.is_set():
            logger.warning("Cancelled before row %d (%d rows inserted)", row_number, inserted)
            raise IngestionCancelledError(inserted)

        sql = build_insert_sql(table_name, columns, len(chunk), executor.placeholder)
        params = [value for row in chunk for value in normalize_row(row, width)]
        logger.debug("Row %d: %s", row_number, sql)

        try:
            result = executor.run_sql(sql, params)
        except Exception as e:
            logger.warning("Insert into %r raised at row %d: %s", table_name, row_number, e)
            raise RowInsertError(row_number, inserted, str(e)) from e

        if not result.success:
            logger.warning(
                "Insert into %r failed at row %d after %d rows: %s",
                table_name,
                row_number,
                inserted,
                result.detail,
            )
            raise RowInsertError(row_number, inserted, result.detail)

        inserted += len(chunk)
        if chunk_size > 1:
            logger.info(
                "Chunk at row %d: inserted %d rows (total: %d)", row_number, len(chunk), inserted
            )

    return inserted
