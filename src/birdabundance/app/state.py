from __future__ import annotations

import logging
from enum import IntEnum

from PySide6.QtCore import QObject, Signal

from birdabundance.config import DEFAULT_BIRD_INDEX
from birdabundance.model.table import AbundanceTable, BirdRow

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    """Lifecycle of the application data."""
    LOADING = 0
    READY = 1


class AppState(QObject):
    """
    Central state store: the loaded table and the selected row.

    The table is set exactly once (LOADING -> READY) and never replaced.
    The selection only changes through `select()`; views read from here and
    react to the signals instead of polling.
    """
    table_loaded = Signal(object)
    selection_changed = Signal(int)
    stage_changed = Signal(int)

    def __init__(self, default_index: int = DEFAULT_BIRD_INDEX) -> None:
        super().__init__()
        self.default_index = default_index

        self._stage = Stage.LOADING
        self._table: AbundanceTable | None = None
        self._selected_index: int | None = None

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def table(self) -> AbundanceTable | None:
        return self._table

    @property
    def selected_index(self) -> int | None:
        return self._selected_index

    def set_table(self, table: AbundanceTable) -> None:
        if self._stage != Stage.LOADING:
            raise RuntimeError("The table has already been loaded.")
        if not 0 <= self.default_index < len(table):
            raise IndexError(
                f"Default row {self.default_index} is outside the table ({len(table)} rows)."
            )

        self._table = table
        self._selected_index = self.default_index
        self._stage = Stage.READY
        logger.info(f"Table ready: {len(table)} birds, default row {self.default_index}.")

        self.table_loaded.emit(table)
        self.stage_changed.emit(int(self._stage))

    def select(self, row_index: int) -> None:
        if self._table is None:
            raise RuntimeError("Cannot select a bird before the table is loaded.")
        if not 0 <= row_index < len(self._table):
            raise IndexError(f"Row index {row_index} is outside the table ({len(self._table)} rows).")
        if row_index == self._selected_index:
            return

        self._selected_index = row_index
        logger.debug(f"Selection changed to row {row_index}.")
        self.selection_changed.emit(row_index)

    def current_row(self) -> BirdRow | None:
        if self._table is None or self._selected_index is None:
            return None
        return self._table.get_row(self._selected_index)
