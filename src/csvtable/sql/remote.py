"""Executor for a remote "run SQL" HTTP API."""

import json
import logging
from collections.abc import Sequence
from typing import Any

import requests

from csvtable.sql.executor import SqlExecutor, SqlResult

logger = logging.getLogger(__name__)


class HttpSqlExecutor(SqlExecutor):
    """POSTs each statement to a workspace database API.

    Request body: ``{"sql": "...", "params": [...]}``.
    Expected response: ``{"result": [{"success": true, ...}]}``. Only the
    first entry of ``result`` is inspected; a missing or empty result counts
    as a failure. No retries.
    """

    def __init__(self, api_url: str, token: str | None = None, timeout: float = 30.0):
        self._api_url = api_url
        self._token = token
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def run_sql(self, sql: str, params: Sequence[str] = ()) -> SqlResult:
        payload = {"sql": sql, "params": list(params)}
        try:
            resp = requests.post(
                self._api_url, json=payload, headers=self._headers(), timeout=self._timeout
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("SQL API call failed: %s", e)
            return SqlResult(success=False, detail=str(e))

        return parse_run_sql_response(data)


def parse_run_sql_response(data: Any) -> SqlResult:
    """Reduce a run-SQL response body to a SqlResult."""
    results = data.get("result") if isinstance(data, dict) else None
    if not results or not isinstance(results, list):
        return SqlResult(success=False, detail="SQL API returned no result")

    first = results[0]
    if not isinstance(first, dict):
        return SqlResult(success=False, detail=f"Unexpected SQL API result: {first!r}")

    if first.get("success"):
        return SqlResult(success=True)
    return SqlResult(success=False, detail=json.dumps(first, default=str))
