"""End-to-end CSV ingestion: fetch, parse, provision, load."""

import logging
import threading

from csvtable.errors import CsvTableError, MalformedInputError
from csvtable.fetch import CsvFetcher, HttpCsvFetcher
from csvtable.ingestion.identifiers import sanitize_identifiers
from csvtable.ingestion.loader import insert_rows
from csvtable.ingestion.result import IngestionResult
from csvtable.ingestion.schema import create_table_if_requested
from csvtable.ingestion.tokenizer import parse_csv
from csvtable.sql.executor import SqlExecutor

logger = logging.getLogger(__name__)


def ingest_csv(
    executor: SqlExecutor,
    csv_url: str,
    table_name: str,
    create_table: bool = False,
    *,
    fetcher: CsvFetcher | None = None,
    chunk_size: int = 1,
    cancel_event: threading.Event | None = None,
) -> IngestionResult:
    """Load the CSV at ``csv_url`` into ``table_name``.

    Each row commits on its own, so a failure part-way leaves the earlier
    rows in place; ``rows_inserted`` on the result says how many.

    Never raises. Every failure is returned as ``success=False`` with a
    message prefixed ``"Error: "``.
    """
    fetcher = fetcher or HttpCsvFetcher()
    try:
        text = fetcher.fetch(csv_url)
        if not text.strip():
            raise MalformedInputError("CSV file is empty")

        header, rows = parse_csv(text)
        columns = sanitize_identifiers(header)
        logger.info("Parsed %d columns and %d data rows from %s", len(columns), len(rows), csv_url)

        table_created = create_table_if_requested(executor, table_name, columns, create_table)
        inserted = insert_rows(
            executor, table_name, columns, rows, chunk_size=chunk_size, cancel_event=cancel_event
        )
    except CsvTableError as e:
        logger.warning("Ingestion into %r failed: %s", table_name, e)
        return IngestionResult(success=False, rows_inserted=e.rows_inserted, message=f"Error: {e}")
    except Exception as e:
        logger.exception("Unexpected error ingesting %s into %r", csv_url, table_name)
        return IngestionResult(success=False, rows_inserted=0, message=f"Error: {e}")

    logger.info("Ingestion complete: %d rows into %r", inserted, table_name)
    return IngestionResult(
        success=True,
        rows_inserted=inserted,
        message=f"Successfully inserted {inserted} rows into table '{table_name}'",
        table_created=table_created,
    )
