"""
CSV summary sink.
"""

from __future__ import annotations

import csv

from .summary import SummarySink

ENTITY_COLUMN = "entity"


class CsvSummarySink(SummarySink):
    """Writes ``entity,ALGO1,ALGO2,...`` then one row per entity."""

    name = "csv-summary"

    def _write(self) -> None:
        with open(self._path, "w", encoding=self._encoding, newline="") as f:
            writer = csv.writer(f)
            writer.writerow([ENTITY_COLUMN, *self._columns])
            for entity, cells in self._rows.values():
                writer.writerow([entity.display_name, *(cells.get(c, "") for c in self._columns)])
