"""LocationResolver: the main entry point for the library."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx

from ukstreetmap import distance, query as location_query
from ukstreetmap.exceptions import NoGridReference, RequestFailedError
from ukstreetmap.extract import extract_fields
from ukstreetmap.models import ConversionType, LocationRecord, ResolverConfig

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def _default_user_agent() -> str:
    return f"ukstreetmap/{VERSION} python-httpx/{httpx.__version__}"


class LocationResolver:
    """
    Resolve UK location data through streetmap.co.uk.

    A query is any mapping (or keyword arguments) using the keys
    ``os_x, os_y, wgs_lat, wgs_long, lat, long, lr_grid, postcode, url``.
    When several representations are given, the highest priority one is
    sent: OS grid, WGS84, lat/long, Landranger, postcode, then URL.

    Holds one HTTP client; call close() or use it as a context manager.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._config = config or ResolverConfig()
        self._http = httpx.Client(
            headers={
                "User-Agent": self._config.user_agent or _default_user_agent()
            },
            timeout=self._config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> ResolverConfig:
        return self._config

    # ── Public API ────────────────────────────────────────────────

    def resolve(
        self, query: Optional[Mapping[str, Any]] = None, **fields: Any
    ) -> LocationRecord:
        """
        Look up every known representation of a location.

        Returns a LocationRecord on success. Raises PairingError,
        NoLocationDataError, MalformedUrlError or RequestFailedError.
        """
        q = _merge(query, fields)
        location_query.check_paired(q)
        name, conversion = location_query.build_query(q)

        page = self.fetch(name, conversion)
        found = extract_fields(page)

        if all(value is None for value in found.values()):
            logger.warning(
                "No location fields found on streetmap page for %s '%s'; "
                "the page layout may have changed",
                conversion.value,
                name,
            )

        os_x, os_y = found["os_x"], found["os_y"]
        if os_x and os_y:
            url = location_query.map_url(os_x, os_y, self._config.base_url)
        else:
            logger.warning(
                "Streetmap returned no OS grid reference for %s '%s'",
                conversion.value,
                name,
            )
            url = ""

        return LocationRecord(
            url=url, **{key: value or "" for key, value in found.items()}
        )

    def build_map_url(
        self, query: Optional[Mapping[str, Any]] = None, **fields: Any
    ) -> str:
        """
        Return the streetmap map URL for a location.

        Built directly from OS coordinates when the query has them;
        otherwise the location is resolved first (one network request).
        """
        q = _merge(query, fields)
        location_query.check_paired(q)
        if location_query.has_os_grid(q):
            return location_query.map_url(
                q["os_x"], q["os_y"], self._config.base_url
            )
        return self.resolve(q).url

    def distance_km(
        self, a: Mapping[str, Any], b: Mapping[str, Any]
    ) -> str:
        """
        Kilometres "as the crow flies" between two locations.

        Either side lacking OS coordinates is resolved first. Returns a
        fixed-point string with four decimal places.
        """
        location_query.check_paired(a)
        location_query.check_paired(b)
        return distance.crow_flies(self._with_os_grid(a), self._with_os_grid(b))

    @staticmethod
    def km_to_miles(km: Union[float, str]) -> float:
        """Convert kilometres to UK miles."""
        return distance.km_to_miles(km)

    def fetch(self, name: str, conversion: ConversionType) -> str:
        """
        Fetch the raw grid conversion page for *name*.

        Raises RequestFailedError on a transport error or non-2xx status.
        """
        url = location_query.grid_convert_url(
            self._config.base_url, name, conversion
        )
        logger.debug("GET %s", url)
        try:
            response = self._http.get(url)
        except httpx.HTTPError as exc:
            raise RequestFailedError(url, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise RequestFailedError(
                url, f"HTTP {response.status_code}", response.status_code
            )
        return response.text

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    def __enter__(self) -> LocationResolver:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── Private helpers ───────────────────────────────────────────

    def _with_os_grid(self, location: Mapping[str, Any]) -> Mapping[str, Any]:
        if location_query.has_os_grid(location):
            return location
        record = self.resolve(location)
        if not location_query.has_os_grid(record):
            name, _ = location_query.build_query(location)
            raise NoGridReference(name)
        return record


def _merge(
    query: Optional[Mapping[str, Any]], fields: Mapping[str, Any]
) -> dict[str, Any]:
    merged = dict(query or {})
    merged.update(fields)
    return merged
