"""Ingestion outcome."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class IngestionResult:
    success: bool
    rows_inserted: int
    message: str
    table_created: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the wire shape: camelCase keys, ``tableCreated`` only when known."""
        data: dict[str, Any] = {
            "success": self.success,
            "rowsInserted": self.rows_inserted,
            "message": self.message,
        }
        if self.table_created is not None:
            data["tableCreated"] = self.table_created
        return data
