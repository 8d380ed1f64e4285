"""csvtable exception hierarchy.

Each ingestion stage raises its own error type. The orchestrator catches
all of them and turns them into a failed IngestionResult.
"""


class CsvTableError(Exception):
    """Base exception for all ingestion failures."""

    #: Rows committed before the failure.
    rows_inserted: int = 0


class FetchFailedError(CsvTableError):
    """Raised when the CSV document cannot be downloaded."""


class MalformedInputError(CsvTableError):
    """Raised when the CSV body is empty or has no data rows."""


class SchemaCreationError(CsvTableError):
    """Raised when the backend rejects the CREATE TABLE statement."""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        message = "Failed to create table"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RowInsertError(CsvTableError):
    """Raised when the backend rejects an INSERT.

    ``row_number`` is the 1-based data row that failed (the first row of the
    chunk when inserting in chunks).
    """

    def __init__(self, row_number: int, rows_inserted: int, detail: str | None = None):
        self.row_number = row_number
        self.rows_inserted = rows_inserted
        self.detail = detail
        super().__init__(
            f"Row insert failed at row {row_number} after {rows_inserted} rows inserted: "
            f"{detail or 'no detail from backend'}"
        )


class IngestionCancelledError(CsvTableError):
    """Raised when the caller's cancel event is set between rows."""

    def __init__(self, rows_inserted: int):
        self.rows_inserted = rows_inserted
        super().__init__(f"Ingestion cancelled after {rows_inserted} rows inserted")
