"""
Main Application Window
=======================
Holds the chart canvas, the bird menu floating over it, and the status bar.

Why is this file needed?
------------------------
1. Layout: It sizes the canvas to the screen and places the menu on top of it.
2. Routing: It wires the loader, the state store and the views together:
   table loaded -> menu populated + first render,
   menu choice  -> state selection,
   selection    -> one canvas repaint.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QSize
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import QMainWindow, QMessageBox, QWidget

from birdabundance.app.application import VISIBLE_APP_NAME
from birdabundance.app.state import AppState, Stage
from birdabundance.config import CANVAS_MARGINS, DEFAULT_DATA_PATH, MENU_OFFSET
from birdabundance.controller.workers import TableLoadWorker
from birdabundance.model.ordering import clean_bird_name
from birdabundance.model.table import AbundanceTable
from birdabundance.view.bird_menu import BirdMenu
from birdabundance.view.chart_canvas import ChartCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: AppState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self._worker: TableLoadWorker | None = None

        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- CANVAS ---
        self.canvas = ChartCanvas(self)
        self.canvas.set_preferred_size(self._canvas_size())
        self.setCentralWidget(self.canvas)

        # --- MENU (child of the canvas, pinned to its top-left corner) ---
        self.menu = BirdMenu(self.canvas)
        self.menu.move(*MENU_OFFSET)
        self.menu.setEnabled(False)

        self._create_actions()
        self._create_menus()
        self.statusBar().showMessage("Loading data…")

        # the window wraps the canvas plus its menu and status bars
        self.resize(self.sizeHint())

        # --- SIGNAL CONNECTIONS ---
        self.state.table_loaded.connect(self.on_table_loaded)
        self.state.selection_changed.connect(self.on_selection_changed)
        self.state.stage_changed.connect(self.on_stage_changed)
        self.menu.row_selected.connect(self.state.select)

    @staticmethod
    def _canvas_size() -> QSize:
        """Screen size minus the fixed margins, so the chart does not touch the edges."""
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return QSize(1024, 640)
        available = screen.availableGeometry()
        dx, dy = CANVAS_MARGINS
        return QSize(max(available.width() - dx, 200), max(available.height() - dy, 120))

    def _create_actions(self) -> None:
        self.act_exit = QAction("E&xit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_exit)

    # --- LOADING ---

    def start_loading(self, filepath: str = DEFAULT_DATA_PATH, has_header: bool = True) -> None:
        """Read the table in the background; the state becomes READY when it arrives."""
        logger.info(f"Requesting table load: {filepath}")
        self.statusBar().showMessage(f"Loading {filepath}…")

        self._worker = TableLoadWorker(filepath, has_header=has_header)
        self._worker.loaded.connect(self._on_table_arrived)
        self._worker.error_occurred.connect(self.on_load_error)
        self._worker.finished.connect(self._on_worker_finished)
        self._worker.start()

    def _on_table_arrived(self, table: AbundanceTable) -> None:
        try:
            self.state.set_table(table)
        except (IndexError, RuntimeError) as e:
            self.on_load_error(str(e))

    def _on_worker_finished(self) -> None:
        if self._worker is not None:
            self._worker.deleteLater()
            self._worker = None

    def on_load_error(self, message: str) -> None:
        logger.error(f"Table load failed: {message}")
        self.statusBar().showMessage("Loading failed.")
        QMessageBox.critical(self, "Loading failed", message)

    # --- STATE SLOTS ---

    def on_table_loaded(self, table: AbundanceTable) -> None:
        self.menu.populate(table)
        self.menu.set_selected_index(self.state.selected_index)

        self._show_current_row()

    def on_stage_changed(self, stage: int) -> None:
        ready = stage == Stage.READY
        self.menu.setEnabled(ready)
        if ready and self.state.table is not None:
            self.setWindowTitle(f"{VISIBLE_APP_NAME} - {len(self.state.table)} birds")
        else:
            self.setWindowTitle(VISIBLE_APP_NAME)

    def on_selection_changed(self, row_index: int) -> None:
        if self.menu.selected_index() != row_index:
            self.menu.set_selected_index(row_index)
        self._show_current_row()

    def _show_current_row(self) -> None:
        row = self.state.current_row()
        self.canvas.set_row(row)
        if row is not None:
            self.statusBar().showMessage(clean_bird_name(row.name))

    def closeEvent(self, event) -> None:
        if self._worker is not None and self._worker.isRunning():
            self._worker.wait()
        super().closeEvent(event)
