"""Shared test fixtures: a captured streetmap page and a mocked HTTP transport."""

from pathlib import Path
from urllib.parse import parse_qs

import httpx
import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def sent_params(request: httpx.Request) -> dict:
    """
    Decode the name/type parameters of a grid conversion request.

    Streetmap URLs look like ``streetmap.dll?GridConvert?name=..&type=..``,
    so the real parameters follow the second '?'.
    """
    raw = request.url.query.decode()
    _, _, params = raw.partition("?")
    return {key: values[0] for key, values in parse_qs(params).items()}


class StreetmapStub:
    """MockTransport handler that records requests and replays one page."""

    def __init__(self, page: str = "", status_code: int = 200):
        self.page = page
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.page)

    @property
    def params(self) -> list[dict]:
        return [sent_params(r) for r in self.requests]


@pytest.fixture(scope="session")
def w2_4bb_page() -> str:
    """Grid conversion page captured for postcode W2 4BB."""
    return (FIXTURES / "w2_4bb.html").read_text(encoding="utf-8")


@pytest.fixture()
def stub(w2_4bb_page: str) -> StreetmapStub:
    return StreetmapStub(w2_4bb_page)


@pytest.fixture()
def resolver(stub: StreetmapStub):
    """Create a LocationResolver whose HTTP traffic goes to *stub*."""
    from ukstreetmap import LocationResolver

    r = LocationResolver(transport=httpx.MockTransport(stub))
    yield r
    r.close()
