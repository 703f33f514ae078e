"""Recognise typed location strings: postcodes, grid references, lat/long."""

import re

from ukstreetmap.exceptions import LocationUnrecognised, PostcodeInvalid

_UK_POSTCODE_RE = re.compile(
    r"^[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}$",
    re.IGNORECASE,
)
_OS_GRID_RE = re.compile(r"^(\d{1,7})\s*,\s*(\d{1,7})$")
_WGS84_RE = re.compile(r"^(-?\d{1,2}\.\d+)\s*,\s*(-?\d{1,3}\.\d+)$")
_LAT_LONG_RE = re.compile(
    r"^([NS]\d{1,2}:\d{1,2}:\d{1,2}(?:\.\d+)?)\s*,\s*"
    r"([EW]\d{1,3}:\d{1,2}:\d{1,2}(?:\.\d+)?)$",
    re.IGNORECASE,
)
# Two grid letters then 1-5 digits of easting and the same of northing
_LANDRANGER_RE = re.compile(r"^([A-Z]{2})\s*((?:\d\d){1,5})$", re.IGNORECASE)


def validate_postcode(raw: str) -> bool:
    """Return True if *raw* looks like a valid UK postcode."""
    return bool(_UK_POSTCODE_RE.match(raw.strip()))


def normalise_postcode(raw: str) -> str:
    """
    Normalise to the canonical 'AREA NNN' format, e.g. 'w24bb' -> 'W2 4BB'.

    Raises PostcodeInvalid if the input is not a valid UK postcode.
    """
    if not validate_postcode(raw):
        raise PostcodeInvalid(raw)
    stripped = raw.strip().upper().replace(" ", "")
    return f"{stripped[:-3]} {stripped[-3:]}"


def parse_location(text: str) -> dict[str, str]:
    """
    Turn one free-text location into a query for LocationResolver.

    Accepts a streetmap URL, ``x,y`` OS grid coordinates, decimal WGS84
    ``lat,long``, ``N51:30:52,W0:11:24`` style lat/long, a Landranger
    reference such as ``TQ256810`` or a UK postcode.

    Raises LocationUnrecognised if nothing matches.
    """
    text = text.strip()

    if text.lower().startswith(("http://", "https://")):
        return {"url": text}

    match = _OS_GRID_RE.match(text)
    if match:
        return {"os_x": match.group(1), "os_y": match.group(2)}

    match = _WGS84_RE.match(text)
    if match:
        return {"wgs_lat": match.group(1), "wgs_long": match.group(2)}

    match = _LAT_LONG_RE.match(text)
    if match:
        return {"lat": match.group(1).upper(), "long": match.group(2).upper()}

    match = _LANDRANGER_RE.match(text)
    if match:
        return {"lr_grid": match.group(1).upper() + match.group(2)}

    try:
        return {"postcode": normalise_postcode(text)}
    except PostcodeInvalid as exc:
        raise LocationUnrecognised(text) from exc
