"""
Bar Chart Renderer
==================
Issues the draw calls for one bird's chart onto a rendering surface.

Why is this file needed?
------------------------
1. Decoupling: The geometry lives in `model.chart`; this module only knows how
   to talk to a surface, so the same code paints the on-screen widget and an
   off-screen QImage.
2. Qt adapter: `QPainterSurface` converts the HSB percentages used by the
   model into a `QColor`, clamping them like the canvas libraries do.
"""
from __future__ import annotations

import logging
from typing import Protocol

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter

from birdabundance.config import BACKGROUND
from birdabundance.model.chart import compute_bars
from birdabundance.model.table import BirdRow

logger = logging.getLogger(__name__)


class RenderSurface(Protocol):
    """Minimal 2D drawing API the renderer needs."""
    width: float
    height: float

    def background(self, color: str) -> None: ...
    def fill_hsb(self, hue: float, saturation: float, brightness: float) -> None: ...
    def rect(self, x: float, y: float, w: float, h: float) -> None: ...


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class QPainterSurface:
    """`RenderSurface` backed by an active QPainter."""

    def __init__(self, painter: QPainter, width: float, height: float) -> None:
        self.painter = painter
        self.width = width
        self.height = height
        self._brush = QColor("white")

        self.painter.setPen(Qt.PenStyle.NoPen)

    def background(self, color: str) -> None:
        self.painter.fillRect(QRectF(0.0, 0.0, self.width, self.height), QColor(color))

    def fill_hsb(self, hue: float, saturation: float, brightness: float) -> None:
        # QColor takes every component in [0, 1]; hue 360 wraps to 0
        h = (hue % 360.0) / 360.0
        s = _clamp(saturation, 0.0, 100.0) / 100.0
        v = _clamp(brightness, 0.0, 100.0) / 100.0
        self._brush = QColor.fromHsvF(h, s, v)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        # QRectF wants positive sizes; bars arrive with a negative height
        self.painter.fillRect(QRectF(x, y, w, h).normalized(), self._brush)


def render_bar_chart(row: BirdRow, surface: RenderSurface) -> None:
    """
    Clear the surface and draw the chart for `row`.

    The background is reset first, so repeated calls never stack bars on top
    of a previous bird's chart.
    """
    surface.background(BACKGROUND)

    bars = compute_bars(row, surface.width, surface.height)
    for bar in bars:
        surface.fill_hsb(bar.hue, bar.saturation, bar.brightness)
        surface.rect(bar.x, bar.y, bar.width, bar.height)

    logger.debug(f"Rendered {len(bars)} bars for row {row.index}.")
