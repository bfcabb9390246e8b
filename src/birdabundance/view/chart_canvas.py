from __future__ import annotations

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget, QSizePolicy

from birdabundance.config import BACKGROUND
from birdabundance.model.table import BirdRow
from birdabundance.view.bar_chart import QPainterSurface, render_bar_chart


class ChartCanvas(QWidget):
    """The drawing area. Repaints the current row whenever Qt asks for it."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._row: BirdRow | None = None
        self._preferred_size = QSize(1024, 640)

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(QSize(200, 120))

    def row(self) -> BirdRow | None:
        return self._row

    def set_row(self, row: BirdRow | None) -> None:
        """Show `row` and schedule a single repaint."""
        self._row = row
        self.update()

    def set_preferred_size(self, size: QSize) -> None:
        """Size the enclosing window should give the canvas itself (menu and status bars excluded)."""
        self._preferred_size = QSize(size)
        self.updateGeometry()

    def sizeHint(self) -> QSize:
        return QSize(self._preferred_size)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            if self._row is None:
                painter.fillRect(self.rect(), QColor(BACKGROUND))
            else:
                surface = QPainterSurface(painter, self.width(), self.height())
                render_bar_chart(self._row, surface)
        finally:
            painter.end()
