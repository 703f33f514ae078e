"""ukstreetmap: resolve UK postcodes, grid references and lat/long via streetmap.co.uk."""

from ukstreetmap.client import VERSION as __version__
from ukstreetmap.client import LocationResolver
from ukstreetmap.distance import crow_flies, km_to_miles
from ukstreetmap.exceptions import (
    ConfigInvalid,
    LocationUnrecognised,
    MalformedUrlError,
    NoGridReference,
    NoLocationDataError,
    PairingError,
    PostcodeInvalid,
    RequestFailedError,
    StreetmapError,
)
from ukstreetmap.extract import extract_fields
from ukstreetmap.formats import parse_location
from ukstreetmap.models import ConversionType, LocationRecord, ResolverConfig
from ukstreetmap.query import build_query, check_paired, map_url

__all__ = [
    "__version__",
    "LocationResolver",
    "LocationRecord",
    "ResolverConfig",
    "ConversionType",
    "check_paired",
    "build_query",
    "extract_fields",
    "map_url",
    "crow_flies",
    "km_to_miles",
    "parse_location",
    "StreetmapError",
    "PairingError",
    "NoLocationDataError",
    "MalformedUrlError",
    "RequestFailedError",
    "NoGridReference",
    "ConfigInvalid",
    "PostcodeInvalid",
    "LocationUnrecognised",
]
