"""
source_rows.py
Around Post Dump — Wide-column row handle.

SourceRow is the decoder's only input: a row key plus the cells that were
present in the row, keyed by (column family, qualifier). An absent cell is
simply not in the mapping.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from pyspark.sql import Row

from src.batch.schemas import ROW_KEY_COLUMN, SOURCE_COLUMNS

CellKey = Tuple[str, str]


@dataclass(frozen=True)
class SourceRow:
    row_key: bytes
    cells: Mapping[CellKey, bytes] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view so a row cannot be changed after it is handed out
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    def __reduce__(self):
        return (self.__class__, (self.row_key, dict(self.cells)))

    def value(self, family: str, qualifier: str) -> Optional[bytes]:
        return self.cells.get((family, qualifier))

    def has_family(self, family: str) -> bool:
        return any(fam == family for fam, _ in self.cells)

    @classmethod
    def from_spark_row(cls, row: Row) -> "SourceRow":
        """
        Convert one Bigtable connector row (binary columns, see
        schemas.bigtable_catalog) into a SourceRow. Null columns are
        cells the Bigtable row does not have.
        """
        values = row.asDict()
        cells = {}
        for column, cell_key in SOURCE_COLUMNS.items():
            raw = values.get(column)
            if raw is not None:
                cells[cell_key] = bytes(raw)
        return cls(row_key=bytes(values[ROW_KEY_COLUMN]), cells=cells)
