"""
Bar Chart Geometry
==================
Turns one table row into the list of bars the renderer draws.

Layout (for a full row of 1 name + 48 weekly values):
    - cell 0 is the name and is skipped; the last week is not drawn,
      leaving 47 bars for cells 1..47,
    - each bar is `width / bar_count` wide, minus a fixed gap,
    - the bar for cell i starts at `i * width / bar_count`,
    - bars stand on the bottom edge and grow upwards (negative height),
    - 4 weekly cells share one month, which selects the hue.
"""
from __future__ import annotations

from dataclasses import dataclass

from birdabundance.config import BAR_GAP, BRIGHTNESS, SATURATION_BOOST, WEEKS_PER_MONTH
from birdabundance.model.color import map_range, month_hue
from birdabundance.model.table import BirdRow


@dataclass(frozen=True)
class BarSpec:
    """A single bar, in canvas pixels and HSB color components."""
    column: int  # cell index in the row (1-based, 0 is the name)
    month: int
    value: float
    x: float
    y: float
    width: float
    height: float  # negative: the bar extends upwards from y
    hue: float
    saturation: float  # may exceed 100, the surface clamps
    brightness: float


def bar_count_for(row: BirdRow) -> int:
    """Number of bars drawn for `row`: every cell except the name and the last one."""
    return max(len(row) - 2, 0)


def compute_bars(
    row: BirdRow,
    width: float,
    height: float,
    gap: float = BAR_GAP,
) -> list[BarSpec]:
    """
    Compute the bar geometry and colors for one row.

    Args:
        row: The selected bird.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        gap: Horizontal space left between neighbouring bars.

    Returns:
        One `BarSpec` per drawn value, left to right.
    """
    cells = row.cells
    bar_count = bar_count_for(row)
    if bar_count == 0:
        return []

    bar_width = width / bar_count
    bars: list[BarSpec] = []

    for column in range(1, bar_count + 1):
        month = column // WEEKS_PER_MONTH
        value = float(cells[column])

        saturation = map_range(value, 0, 1, 0, 100) * SATURATION_BOOST

        bars.append(BarSpec(
            column=column,
            month=month,
            value=value,
            x=column * bar_width,
            y=height,
            width=bar_width - gap,
            height=-1 * height * value,
            hue=month_hue(month),
            saturation=saturation,
            brightness=BRIGHTNESS,
        ))

    return bars
