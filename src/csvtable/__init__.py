"""csvtable: load CSV documents from a URL into a SQL table."""

from csvtable.database import create_service
from csvtable.ingestion import IngestionResult, ingest_csv
from csvtable.sql import DatabaseSqlExecutor, HttpSqlExecutor, SqlExecutor, SqlResult

__all__ = [
    "DatabaseSqlExecutor",
    "HttpSqlExecutor",
    "IngestionResult",
    "SqlExecutor",
    "SqlResult",
    "create_service",
    "ingest_csv",
]
