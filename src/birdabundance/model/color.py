"""
Seasonal Color Mapping
======================
Maps a month position within the year to a hue angle.

The hue follows a half sine wave over the year instead of a linear ramp:
    hue = 360 - map(sin(radians(floor(m / 12 * 180))), 0, 1, 180, 360)
which confines every month to the [0, 180] half of the color wheel, starting
at 180 (cyan) in January, dipping towards 0 (red) mid-year and returning.
"""
from __future__ import annotations

from typing import Union, TYPE_CHECKING

import numpy as np

from birdabundance.config import MONTHS_PER_YEAR

if TYPE_CHECKING:
    import numpy.typing as npt

ArrayOrFloat = Union[float, "npt.NDArray[np.float64]"]


def map_range(
    value: ArrayOrFloat,
    start1: float,
    stop1: float,
    start2: float,
    stop2: float,
) -> ArrayOrFloat:
    """
    Re-map a number (or array) from one range to another. Not clamped.

    Examples:
        map_range(0.5, 0, 1, 0, 100) -> 50.0
        map_range(2.0, 0, 1, 0, 100) -> 200.0
    """
    return (value - start1) / (stop1 - start1) * (stop2 - start2) + start2


def month_hue(month_index: ArrayOrFloat) -> ArrayOrFloat:
    """
    Hue angle in degrees for a month index in [0, 12).

    Args:
        month_index: Month position, fractional values allowed.

    Returns:
        Hue in [0, 180]; a float for scalar input, an array for array input.
    """
    scaled = map_range(np.asarray(month_index, dtype=np.float64), 0, MONTHS_PER_YEAR, 0, 1)
    degrees = np.floor(scaled * 180)
    as_radians = np.deg2rad(degrees)

    # subtracting from 360 reverses the direction around the wheel,
    # mapping onto 180..360 pins the result to the lower half
    hue = 360 - map_range(np.sin(as_radians), 0, 1, 180, 360)

    if np.ndim(hue) == 0:
        return float(hue)
    return hue
