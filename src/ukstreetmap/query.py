"""Location query validation, priority selection and streetmap URLs."""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ukstreetmap.exceptions import (
    MalformedUrlError,
    NoLocationDataError,
    PairingError,
)
from ukstreetmap.models import ConversionType

COORDINATE_PAIRS = (
    ("os_x", "os_y"),
    ("wgs_lat", "wgs_long"),
    ("lat", "long"),
)

_URL_X_RE = re.compile(r"\bX=(\d+)", re.IGNORECASE)
_URL_Y_RE = re.compile(r"\bY=(\d+)", re.IGNORECASE)


def _has(query: Mapping[str, Any], key: str) -> bool:
    """True if *key* is set to something other than None or ''."""
    value = query.get(key)
    return value is not None and value != ""


def check_paired(query: Mapping[str, Any]) -> None:
    """
    Ensure every coordinate pair in *query* is either complete or absent.

    Raises PairingError naming the first incomplete pair.
    """
    for pair in COORDINATE_PAIRS:
        if _has(query, pair[0]) != _has(query, pair[1]):
            raise PairingError(pair)


def has_os_grid(query: Mapping[str, Any]) -> bool:
    return _has(query, "os_x") and _has(query, "os_y")


def coords_from_url(url: str) -> tuple[str, str]:
    """
    Pull the OS X/Y pair out of a streetmap map URL.

    Raises MalformedUrlError if either parameter is missing.
    """
    x_match = _URL_X_RE.search(url)
    y_match = _URL_Y_RE.search(url)
    if x_match is None or y_match is None:
        raise MalformedUrlError(url)
    return x_match.group(1), y_match.group(1)


def build_query(query: Mapping[str, Any]) -> tuple[str, ConversionType]:
    """
    Pick the single representation to send to streetmap.

    Precedence: OS grid, WGS84 lat/long, traditional lat/long,
    Landranger grid, postcode, streetmap URL. Returns the
    ``(name, type)`` pair for the grid conversion request.

    Raises MalformedUrlError or NoLocationDataError.
    """
    if has_os_grid(query):
        return f"{query['os_x']},{query['os_y']}", ConversionType.OS_GRID
    if _has(query, "wgs_lat"):
        return (
            f"{query['wgs_lat']},{query['wgs_long']}",
            ConversionType.LAT_LONG,
        )
    if _has(query, "lat"):
        return f"{query['lat']},{query['long']}", ConversionType.LAT_LONG
    if _has(query, "lr_grid"):
        return str(query["lr_grid"]), ConversionType.LR_GRID
    if _has(query, "postcode"):
        return str(query["postcode"]), ConversionType.POSTCODE
    if _has(query, "url"):
        x, y = coords_from_url(str(query["url"]))
        return f"{x},{y}", ConversionType.OS_GRID
    raise NoLocationDataError()


def grid_convert_url(
    base_url: str, name: str, conversion: ConversionType
) -> str:
    """URL of the grid conversion page for *name* read as *conversion*."""
    return (
        f"{base_url}/streetmap.dll?GridConvert"
        f"?name={quote(name, safe='')}&type={quote(conversion.value)}"
    )


def map_url(os_x: str, os_y: str, base_url: str) -> str:
    """Streetmap "link to this map" URL centred on an OS grid point."""
    return f"{base_url}/streetmap.dll?G2M?X={os_x}&Y={os_y}&A=Y&Z=1"
