"""End-to-end tests: loading, menu population and selection routing."""
import pytest
from PySide6.QtCore import QCoreApplication, QSize
from PySide6.QtGui import QGuiApplication

from birdabundance.app.state import AppState, Stage
from birdabundance.app.application import VISIBLE_APP_NAME
from birdabundance.config import CANVAS_MARGINS, MENU_OFFSET
from birdabundance.view.main_window import MainWindow


@pytest.fixture
def window(qapp):
    win = MainWindow(AppState(default_index=2))
    yield win
    win.close()
    win.deleteLater()


class TestStartup:
    def test_menu_disabled_until_loaded(self, window):
        assert not window.menu.isEnabled()
        assert window.canvas.row() is None

    def test_canvas_sized_to_screen_minus_margins(self, window):
        available = QGuiApplication.primaryScreen().availableGeometry()
        dx, dy = CANVAS_MARGINS
        assert window.canvas.sizeHint() == QSize(available.width() - dx, available.height() - dy)
        # menu and status bars come on top of the canvas, not out of it
        assert window.height() > window.canvas.sizeHint().height()

    def test_menu_pinned_to_canvas(self, window):
        assert window.menu.parent() is window.canvas
        assert (window.menu.x(), window.menu.y()) == MENU_OFFSET


class TestTableLoaded:
    def test_default_selection_survives_sorting(self, window, unsorted_table):
        window.state.set_table(unsorted_table)

        assert window.menu.isEnabled()
        assert window.windowTitle() == f"{VISIBLE_APP_NAME} - 5 birds"
        assert window.menu.selected_index() == 2
        assert window.menu.currentText() == "Mallard"
        assert window.canvas.row() is unsorted_table[2]

    def test_menu_choice_updates_state_and_canvas(self, window, unsorted_table):
        window.state.set_table(unsorted_table)

        window.menu.setCurrentIndex(0)  # "Albatross", row 1

        assert window.state.selected_index == 1
        assert window.canvas.row() is unsorted_table[1]
        assert window.statusBar().currentMessage() == "Albatross"

    def test_state_selection_updates_menu(self, window, unsorted_table):
        window.state.set_table(unsorted_table)

        window.state.select(4)

        assert window.menu.selected_index() == 4
        assert window.canvas.row() is unsorted_table[4]


class TestBackgroundLoad:
    def test_loads_file(self, window, tsv_file):
        window.start_loading(str(tsv_file))
        worker = window._worker
        assert worker.wait(5000)
        QCoreApplication.processEvents()

        assert window.state.stage == Stage.READY
        assert window.menu.count() == 3
        assert window.menu.selected_index() == 2

    def test_missing_file_reports_error(self, window, tmp_path, monkeypatch):
        errors = []
        monkeypatch.setattr(
            "birdabundance.view.main_window.QMessageBox.critical",
            lambda parent, title, text: errors.append(text),
        )
        window.start_loading(str(tmp_path / "missing.tsv"))
        assert window._worker.wait(5000)
        QCoreApplication.processEvents()

        assert window.state.stage == Stage.LOADING
        assert len(errors) == 1
        assert "missing.tsv" in errors[0]
