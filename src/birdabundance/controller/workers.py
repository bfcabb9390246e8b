"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling blocking tasks.

Why is this file needed?
------------------------
1. Responsiveness: The window and canvas are shown immediately while the
   table is read from disk on a background thread.
2. Signals: Results cross back to the GUI thread through Qt Signals, so the
   state store is only ever written from the main thread.

Classes:
    TableLoadWorker: Reads the abundance table.
"""
import logging
from PySide6.QtCore import QThread, Signal

from birdabundance.model.table import load_table

logger = logging.getLogger(__name__)


class TableLoadWorker(QThread):
    # Signals to update the UI from the background
    loaded = Signal(object)  # AbundanceTable
    error_occurred = Signal(str)

    def __init__(self, filepath: str, has_header: bool = True):
        super().__init__()
        self.filepath = filepath
        self.has_header = has_header

    def run(self):
        try:
            logger.info("Loading table in background thread...")
            table = load_table(self.filepath, has_header=self.has_header)
            self.loaded.emit(table)
        except Exception as e:
            logger.error(f"Error in TableLoadWorker: {e}")
            self.error_occurred.emit(str(e))
