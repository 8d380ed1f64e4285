"""SQL execution capability and its implementations."""

from csvtable.sql.executor import DatabaseSqlExecutor, SqlExecutor, SqlResult
from csvtable.sql.remote import HttpSqlExecutor

__all__ = ["SqlExecutor", "SqlResult", "DatabaseSqlExecutor", "HttpSqlExecutor"]
