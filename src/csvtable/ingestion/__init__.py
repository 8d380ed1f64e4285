"""CSV ingestion: tokenizer, identifier sanitizer, schema, loader, orchestrator."""

from csvtable.ingestion.identifiers import sanitize_identifier, sanitize_identifiers
from csvtable.ingestion.loader import insert_rows, normalize_row
from csvtable.ingestion.orchestrator import ingest_csv
from csvtable.ingestion.result import IngestionResult
from csvtable.ingestion.schema import create_table_if_requested
from csvtable.ingestion.tokenizer import parse_csv

__all__ = [
    "IngestionResult",
    "create_table_if_requested",
    "ingest_csv",
    "insert_rows",
    "normalize_row",
    "parse_csv",
    "sanitize_identifier",
    "sanitize_identifiers",
]
