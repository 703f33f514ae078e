"""Custom exception hierarchy for ukstreetmap."""

from __future__ import annotations

from typing import Optional


class StreetmapError(Exception):
    """Base exception for all ukstreetmap errors."""


class PairingError(StreetmapError):
    """One half of a coordinate pair was supplied without the other."""

    def __init__(self, pair: tuple[str, str]):
        self.pair = pair
        super().__init__(
            f"Coordinate pair incomplete: '{pair[0]}' and '{pair[1]}' "
            "must be given together"
        )


class NoLocationDataError(StreetmapError):
    """The query holds no field that can be turned into a lookup."""

    def __init__(self) -> None:
        super().__init__("No workable location data given")


class MalformedUrlError(StreetmapError):
    """A streetmap URL is missing its X= or Y= parameter."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No X/Y coordinates found in URL: '{url}'")


class RequestFailedError(StreetmapError):
    """The request to streetmap did not complete with a 2xx response."""

    def __init__(self, url: str, detail: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Request to streetmap failed ({detail}): {url}")


class ConfigInvalid(StreetmapError):
    """A ResolverConfig value is out of range or badly formed."""

    def __init__(self, field: str, detail: str):
        self.field = field
        super().__init__(f"Invalid configuration for '{field}': {detail}")


class PostcodeInvalid(StreetmapError):
    """The provided string is not a valid UK postcode."""

    def __init__(self, postcode: str):
        self.postcode = postcode
        super().__init__(f"Invalid UK postcode: '{postcode}'")


class LocationUnrecognised(StreetmapError):
    """Free text could not be matched to any known location format."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unrecognised location: '{text}'")


class NoGridReference(StreetmapError):
    """Streetmap answered, but the page carried no OS grid reference."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No OS grid reference returned for '{name}'")
