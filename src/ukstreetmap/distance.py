"""Straight-line distance between OS grid points."""

import math
from collections.abc import Mapping
from typing import Any, Union

MILES_PER_KM = 0.621


def crow_flies(a: Mapping[str, Any], b: Mapping[str, Any]) -> str:
    """
    Distance in km "as the crow flies" between two OS grid points.

    Both mappings need ``os_x`` and ``os_y`` (metres). The result is a
    fixed-point string with four decimal places, e.g. ``"5.0000"``.
    """
    dx = float(a["os_x"]) - float(b["os_x"])
    dy = float(a["os_y"]) - float(b["os_y"])
    return f"{math.hypot(dx, dy) / 1000:.4f}"


def km_to_miles(km: Union[float, str]) -> float:
    """Convert kilometres (a number or a crow_flies string) to UK miles."""
    return float(km) * MILES_PER_KM
