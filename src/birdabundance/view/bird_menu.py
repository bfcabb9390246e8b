"""Dropdown listing every bird of the table, sorted by name."""
from __future__ import annotations

import logging

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox, QWidget, QSizePolicy

from birdabundance.model.ordering import clean_bird_name, sort_rows
from birdabundance.model.table import AbundanceTable

logger = logging.getLogger(__name__)


class BirdMenu(QComboBox):
    """
    Selection menu bound to table row indices.

    Each option shows the cleaned bird name and carries the row index as its
    item data. The display order is sorted, the bound indices are not: the
    same row index always refers to the same table row.
    """

    # Emitted with the table row index when the user picks another bird
    row_selected = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setSizeAdjustPolicy(QComboBox.SizeAdjustPolicy.AdjustToContents)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        self.currentIndexChanged.connect(self._on_current_index_changed)

    def populate(self, table: AbundanceTable) -> None:
        """Replace all options with the rows of `table`."""
        self.blockSignals(True)
        try:
            self.clear()
            for row in sort_rows(table):
                self.addItem(clean_bird_name(row.name), row.index)
        finally:
            self.blockSignals(False)
        self.adjustSize()
        logger.debug(f"Menu populated with {self.count()} birds.")

    def selected_index(self) -> int | None:
        """Row index bound to the current option, or None when empty."""
        data = self.currentData()
        return None if data is None else int(data)

    def set_selected_index(self, row_index: int) -> None:
        """
        Select the option bound to `row_index`.

        Raises:
            IndexError: If no option carries that row index.
        """
        position = self.findData(row_index)
        if position < 0:
            raise IndexError(f"No menu option for row index {row_index}.")
        self.setCurrentIndex(position)

    def _on_current_index_changed(self, position: int) -> None:
        if position < 0:
            return
        self.row_selected.emit(int(self.itemData(position)))
