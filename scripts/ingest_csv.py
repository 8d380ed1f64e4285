"""CLI entry point for CSV ingestion.

Usage:
    python -m scripts.ingest_csv --csv-url https://example.com/data.csv --table people \
        --db-url sqlite:///data.db [--create-table] [--chunk-size 1]
    python -m scripts.ingest_csv --csv-url https://example.com/data.csv --table people \
        --sql-api-url https://api.example.com/databases/run-sql

Defaults are read from CSVTABLE_DB_URL and CSVTABLE_SQL_API_URL. The API token
is read from CSVTABLE_SQL_API_TOKEN only.
"""

import argparse
import json
import logging
import os
import sys

from csvtable import DatabaseSqlExecutor, HttpSqlExecutor, create_service, ingest_csv
from csvtable.fetch import HttpCsvFetcher

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load a CSV file from a URL into a database table")
    parser.add_argument("--csv-url", required=True, help="URL of the CSV file")
    parser.add_argument("--table", required=True, help="Target table name")
    parser.add_argument(
        "--create-table", action="store_true", help="Create the table if it doesn't exist"
    )
    parser.add_argument(
        "--db-url",
        default=os.environ.get("CSVTABLE_DB_URL"),
        help="Database URL (sqlite:/// or postgresql://)",
    )
    parser.add_argument(
        "--sql-api-url",
        default=os.environ.get("CSVTABLE_SQL_API_URL"),
        help="Remote run-SQL API endpoint",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=1,
        help="Rows per INSERT statement (capped at 32766 bound values per statement)",
    )
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if bool(args.db_url) == bool(args.sql_api_url):
        logger.error("Provide exactly one of --db-url or --sql-api-url.")
        return 1

    fetcher = HttpCsvFetcher(timeout=args.timeout)

    if args.sql_api_url:
        executor = HttpSqlExecutor(
            args.sql_api_url,
            token=os.environ.get("CSVTABLE_SQL_API_TOKEN"),
            timeout=args.timeout,
        )
        result = ingest_csv(
            executor,
            args.csv_url,
            args.table,
            args.create_table,
            fetcher=fetcher,
            chunk_size=args.chunk_size,
        )
    else:
        service = create_service(args.db_url)
        service.connect()
        try:
            result = ingest_csv(
                DatabaseSqlExecutor(service),
                args.csv_url,
                args.table,
                args.create_table,
                fetcher=fetcher,
                chunk_size=args.chunk_size,
            )
        finally:
            service.close()

    print(json.dumps(result.to_dict()))
    if result.success:
        logger.info("Done. %d rows ingested.", result.rows_inserted)
        return 0
    logger.error(result.message)
    return 1


if __name__ == "__main__":
    sys.exit(main())
