"""Shared fixtures: an off-screen QApplication, sample tables and a recording surface."""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path

import pytest

from birdabundance.model.table import AbundanceTable

WEEKS = 48


# =============================================================================
# QT
# =============================================================================


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    from birdabundance.app.application import create_app

    app = create_app(["pytest"])
    yield app


# =============================================================================
# DATA
# =============================================================================


@pytest.fixture
def unsorted_table() -> AbundanceTable:
    """Five birds in file order (not alphabetical)."""
    return AbundanceTable.from_records([
        ["zebra finch", *([0.1] * WEEKS)],
        ["Albatross<em class='sci'>Diomedeidae</em>", *([0.2] * WEEKS)],
        ["Mallard", *([0.3] * WEEKS)],
        ["american Robin<em class='sci'>Turdus migratorius</em>", *([0.4] * WEEKS)],
        ["Blue Jay", *([0.5] * WEEKS)],
    ])


@pytest.fixture
def half_row_table() -> AbundanceTable:
    """A single bird whose 48 values are all 0.5."""
    return AbundanceTable.from_records([["Half Bird", *([0.5] * WEEKS)]])


@pytest.fixture
def tsv_file(tmp_path: Path) -> Path:
    """A small tab-separated file with a header row and three birds."""
    header = "species\t" + "\t".join(f"w{i}" for i in range(WEEKS))
    lines = [header]
    for name, value in (("Mallard", 0.25), ("Blue Jay<em>Cyanocitta</em>", 0.5), ("Killdeer", 1.0)):
        lines.append(name + "\t" + "\t".join(f"{value}" for _ in range(WEEKS)))
    path = tmp_path / "birds.tsv"
    path.write_text("\n".join(lines) + "\n\n", encoding="utf-8")
    return path


# =============================================================================
# RENDERING
# =============================================================================


class RecordingSurface:
    """RenderSurface that records every call instead of drawing."""

    def __init__(self, width: float = 470.0, height: float = 300.0) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def background(self, color):
        self.calls.append(("background", color))

    def fill_hsb(self, hue, saturation, brightness):
        self.calls.append(("fill", hue, saturation, brightness))

    def rect(self, x, y, w, h):
        self.calls.append(("rect", x, y, w, h))

    def named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
