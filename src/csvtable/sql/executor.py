"""SQL execution capability: the seam between ingestion and a backend."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from csvtable.database.service import DatabaseService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SqlResult:
    """Outcome of one statement. ``detail`` carries the backend's explanation."""

    success: bool
    detail: str | None = None


class SqlExecutor(ABC):
    """Runs one SQL statement with bound parameters.

    Implementations report backend rejections as a failed SqlResult rather
    than raising.
    """

    placeholder: str = "?"

    @abstractmethod
    def run_sql(self, sql: str, params: Sequence[str] = ()) -> SqlResult:
        """Execute ``sql`` with ``params`` bound positionally."""


class DatabaseSqlExecutor(SqlExecutor):
    """Executor backed by a local DatabaseService.

    Every statement runs in its own transaction, so each inserted row
    commits independently of the rows after it.
    """

    def __init__(self, service: DatabaseService):
        self._service = service
        self.placeholder = service.placeholder

    def run_sql(self, sql: str, params: Sequence[str] = ()) -> SqlResult:
        try:
            with self._service.transaction():
                self._service.execute(sql, tuple(params))
        except self._service.driver_errors as e:
            logger.warning("Statement rejected by database: %s", e)
            return SqlResult(success=False, detail=str(e))
        return SqlResult(success=True)
