"""
Abundance Table (Data Model)
============================
In-memory representation of the weekly bird abundance dataset.

Why is this file needed?
------------------------
1. Loading: It reads the tab-separated export into typed rows once, at startup.
2. Immutability: Rows and their values are read-only after load, so the menu,
   the state store and the renderer can share them without copying.

Classes:
    BirdRow: One bird, its raw name and its weekly abundance values.
    AbundanceTable: Ordered, immutable collection of rows.
"""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class TableLoadError(IOError):
    """Raised when the abundance table cannot be read or parsed."""


@dataclass(frozen=True, eq=False)
class BirdRow:
    """
    A single row of the table.

    `index` is the row's position in the table and is the stable identifier
    the selection menu binds to its options. `name` is kept raw (markup
    included); see `ordering.clean_bird_name` for the display form.
    """
    index: int
    name: str
    values: npt.NDArray[np.float64] = field(repr=False)

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=np.float64)
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    @property
    def cells(self) -> list[str | float]:
        """The full row as loaded: name first, then every value."""
        return [self.name, *self.values.tolist()]

    def get(self, column: int) -> str | float:
        """Cell at `column`, where column 0 is the name."""
        if column == 0:
            return self.name
        return float(self.values[column - 1])

    def __len__(self) -> int:
        return 1 + len(self.values)


class AbundanceTable(Sequence[BirdRow]):
    """Ordered, read-only sequence of `BirdRow`s."""

    def __init__(self, rows: Sequence[BirdRow], header: Sequence[str] | None = None) -> None:
        self._rows: tuple[BirdRow, ...] = tuple(rows)
        self.header: tuple[str, ...] = tuple(header) if header else ()

        for position, row in enumerate(self._rows):
            if row.index != position:
                raise ValueError(f"Row '{row.name}' has index {row.index}, expected {position}.")

    @classmethod
    def from_records(
        cls,
        records: Sequence[Sequence[str | float]],
        header: Sequence[str] | None = None,
    ) -> AbundanceTable:
        """Build a table from (name, value, value, ...) records."""
        rows = [
            BirdRow(index=i, name=str(record[0]), values=np.asarray(record[1:], dtype=np.float64))
            for i, record in enumerate(records)
        ]
        return cls(rows, header=header)

    def __getitem__(self, index):
        return self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[BirdRow]:
        return iter(self._rows)

    def get_row(self, index: int) -> BirdRow:
        return self._rows[index]

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        """Number of cells per row (name included), taken from the widest row."""
        return max((len(row) for row in self._rows), default=len(self.header))


def load_table(filepath: str, delimiter: str = "\t", has_header: bool = True) -> AbundanceTable:
    """
    Read a delimited abundance table.

    Args:
        filepath: Path to the file (tab-separated by default).
        delimiter: Column separator.
        has_header: Skip the first line as column titles.

    Returns:
        The loaded table; row indices follow file order.

    Raises:
        TableLoadError: If the file cannot be read or a value cell is not numeric.
    """
    logger.info(f"Loading abundance table from: {filepath}")

    header: list[str] | None = None
    records: list[list[str | float]] = []

    try:
        with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
            reader = csv.reader(f, delimiter=delimiter, quoting=csv.QUOTE_NONE)
            for row in reader:
                if not row or not any(cell.strip() for cell in row):
                    continue
                if has_header and header is None:
                    header = row
                    continue
                name, *cells = row
                records.append([name, *(float(cell) for cell in cells)])
    except (OSError, ValueError) as e:
        logger.error(f"TSV import failed: {e}")
        raise TableLoadError(f"Failed to read table '{filepath}': {e}") from e

    table = AbundanceTable.from_records(records, header=header)
    logger.info(f"Loaded {table.row_count} rows ({table.column_count} columns).")
    return table
