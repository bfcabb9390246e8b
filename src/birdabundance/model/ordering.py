"""Menu ordering and display names for table rows."""
from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable

from birdabundance.model.table import BirdRow

# <em class='sci'>Turdus migratorius</em>
_ELEMENT_RE = re.compile(r"<([A-Za-z][\w-]*)\b[^>]*>.*?</\1\s*>", re.DOTALL)
# any leftover <tag ...> or </tag>
_TAG_RE = re.compile(r"</?[^>]+>")


def compare_rows(first: BirdRow, second: BirdRow) -> int:
    """
    Order two rows by bird name, ignoring case.

    The raw name is compared (markup included), so the menu order follows the
    stored key rather than the cleaned display text. Equal names fall back to
    the row index.
    """
    first_name = first.name.lower()
    second_name = second.name.lower()

    if first_name < second_name:
        return -1
    if first_name > second_name:
        return 1
    if first.index == second.index:
        return 0
    return -1 if first.index < second.index else 1


def sort_rows(rows: Iterable[BirdRow]) -> list[BirdRow]:
    """Return a new list of rows in menu order. The rows keep their indices."""
    return sorted(rows, key=cmp_to_key(compare_rows))


def clean_bird_name(bird_name: str) -> str:
    """Strip tag-like markup (and any text wrapped by it) from a raw name."""
    without_elements = _ELEMENT_RE.sub("", bird_name)
    return _TAG_RE.sub("", without_elements)
