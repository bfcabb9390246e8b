"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers scattered
   throughout the chart, menu and window code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the bundled dataset) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATA_PATH (str): Absolute path to the bundled abundance table.
"""
import logging
import sys
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/birdabundance/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATA_PATH: str = os.path.join(ASSETS_PATH, "ninesprings.tsv")

# Data layout
DEFAULT_BIRD_INDEX: int = 14  # American Robin in the bundled table
WEEKS_PER_MONTH: int = 4
MONTHS_PER_YEAR: int = 12

# Drawing
BACKGROUND: str = "gray"
CANVAS_MARGINS: tuple[int, int] = (32, 16)  # (horizontal, vertical) px
MENU_OFFSET: tuple[int, int] = (10, 10)
BAR_GAP: int = 2
SATURATION_BOOST: float = 1.5
BRIGHTNESS: float = 100.0

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
