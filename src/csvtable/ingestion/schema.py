"""Target table provisioning."""

import logging

from csvtable.errors import SchemaCreationError
from csvtable.sql.executor import SqlExecutor

logger = logging.getLogger(__name__)


def build_create_table_sql(table_name: str, columns: list[str]) -> str:
    """CREATE TABLE IF NOT EXISTS with every column typed TEXT.

    The table name is interpolated unescaped; callers must trust it.
    """
    column_defs = ", ".join(f'"{column}" TEXT' for column in columns)
    return f'CREATE TABLE IF NOT EXISTS "{table_name}" ({column_defs})'


def create_table_if_requested(
    executor: SqlExecutor,
    table_name: str,
    columns: list[str],
    create_table: bool,
) -> bool:
    """Create the target table when asked to.

    Returns True if the CREATE statement ran, False if it was not requested.

    Raises:
        SchemaCreationError: The backend rejected the statement.
    """
    if not create_table:
        return False

    result = executor.run_sql(build_create_table_sql(table_name, columns))
    if not result.success:
        raise SchemaCreationError(result.detail)

    logger.info("Ensured table %r with %d TEXT columns", table_name, len(columns))
    return True
