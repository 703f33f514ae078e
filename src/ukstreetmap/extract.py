"""
Scrape location fields from a streetmap grid conversion page.

The page is a two-column table: a label cell holding ``<strong>OS X</strong>``
and the like, followed by a value cell. Everything here is coupled to
that markup, so it lives on its own and is tested against a captured
page in ``tests/fixtures``.
"""

from __future__ import annotations

import re
from typing import Optional

from bs4 import BeautifulSoup

# Extracted field -> value, or None if the row was not on the page
PartialRecord = dict[str, Optional[str]]

EXTRACTED_KEYS = (
    "os_x",
    "os_y",
    "postcode",
    "lat",
    "wgs_lat",
    "long",
    "wgs_long",
    "lr_grid",
)

# Label cell text, lower-cased with all whitespace removed
_LABELS = {
    "osx": "os_x",
    "osy": "os_y",
    "postcode": "postcode",
    "lat(wgs84)": "lat",
    "long(wgs84)": "long",
    "lr": "lr_grid",
}

# "N51:30:52 ( 51.514572 )"
_DUAL_VALUE_RE = re.compile(r"^(.+?)\s*\(\s*(.+?)\s*\)\s*$", re.DOTALL)
_SPACE_RE = re.compile(r"\s+")


def _label_key(text: str) -> str:
    return _SPACE_RE.sub("", text).lower()


def _value_cells(page: str) -> dict[str, str]:
    """Map each known label to the text of the cell next to it."""
    soup = BeautifulSoup(page, "html.parser")
    cells: dict[str, str] = {}

    for strong in soup.find_all("strong"):
        label_cell = strong.find_parent(["td", "th"])
        if label_cell is None:
            continue
        field = _LABELS.get(_label_key(label_cell.get_text()))
        if field is None or field in cells:
            continue
        value_cell = label_cell.find_next_sibling(["td", "th"])
        if value_cell is not None:
            cells[field] = value_cell.get_text()

    return cells


def _squash(value: Optional[str]) -> Optional[str]:
    """Remove all whitespace; empty results count as missing."""
    if value is None:
        return None
    return _SPACE_RE.sub("", value) or None


def _split_dual(value: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Split a "traditional ( decimal )" cell into its two parts."""
    if value is None:
        return None, None
    match = _DUAL_VALUE_RE.match(value.strip())
    if match is None:
        return _squash(value), None
    return _squash(match.group(1)), _squash(match.group(2))


def extract_fields(page: str) -> PartialRecord:
    """
    Extract the coordinate fields from a grid conversion page.

    Returns a dict with every key in EXTRACTED_KEYS. A key is None when
    its row is missing from the page; this never raises on odd markup.
    """
    cells = _value_cells(page)

    postcode = cells.get("postcode")
    if postcode is not None:
        postcode = postcode.rstrip() or None

    lat, wgs_lat = _split_dual(cells.get("lat"))
    long, wgs_long = _split_dual(cells.get("long"))

    return {
        "os_x": _squash(cells.get("os_x")),
        "os_y": _squash(cells.get("os_y")),
        "postcode": postcode,
        "lat": lat,
        "wgs_lat": wgs_lat,
        "long": long,
        "wgs_long": wgs_long,
        "lr_grid": _squash(cells.get("lr_grid")),
    }
