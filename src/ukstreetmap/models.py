"""Typed records and configuration for ukstreetmap."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from ukstreetmap.exceptions import ConfigInvalid

DEFAULT_BASE_URL = "http://www.streetmap.co.uk"
DEFAULT_TIMEOUT = 10.0

# Keys of a LocationRecord, also the keys a LocationQuery may carry
LOCATION_KEYS = (
    "os_x",
    "os_y",
    "wgs_lat",
    "wgs_long",
    "lat",
    "long",
    "lr_grid",
    "postcode",
    "url",
)


class ConversionType(str, Enum):
    """Value of the ``type`` parameter sent to the grid conversion page."""

    OS_GRID = "OSGrid"
    LAT_LONG = "LatLong"
    LR_GRID = "LRGrid"
    POSTCODE = "Postcode"


@dataclass(frozen=True)
class LocationRecord(Mapping):
    """
    Complete result of a resolution.

    Every field is a string holding the value exactly as streetmap
    printed it; fields missing from the page are empty strings. The
    record is also a read-only mapping, so it can be handed straight
    back to any call that takes a location query.
    """

    os_x: str = ""           # OS National Grid
    os_y: str = ""           # OS National Grid
    wgs_lat: str = ""        # WGS84 decimal degrees
    wgs_long: str = ""       # WGS84 decimal degrees
    lat: str = ""            # e.g. N51:30:52
    long: str = ""           # e.g. W0:11:24
    lr_grid: str = ""        # Landranger, e.g. TQ256810
    postcode: str = ""
    url: str = ""            # streetmap "link to this map" URL

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return asdict(self)

    def __getitem__(self, key: str) -> str:
        if key not in LOCATION_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def __iter__(self) -> Iterator[str]:
        return iter(LOCATION_KEYS)

    def __len__(self) -> int:
        return len(LOCATION_KEYS)


@dataclass(frozen=True)
class ResolverConfig:
    """
    Settings for a LocationResolver, checked when constructed.

    ``user_agent`` of None means the library default
    (``ukstreetmap/<version> python-httpx/<version>``).
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str) or not self.base_url.startswith(
            ("http://", "https://")
        ):
            raise ConfigInvalid("base_url", f"not an http(s) URL: {self.base_url!r}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

        try:
            timeout = float(self.timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigInvalid("timeout", f"not a number: {self.timeout!r}") from exc
        if not timeout > 0:
            raise ConfigInvalid("timeout", f"must be positive, got {timeout}")
        object.__setattr__(self, "timeout", timeout)

        if self.user_agent is not None and (
            not isinstance(self.user_agent, str) or not self.user_agent.strip()
        ):
            raise ConfigInvalid("user_agent", "must not be blank")
