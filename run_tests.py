"""
Minimal test runner using only the standard library (plus httpx).
Run: python3 run_tests.py
"""

import sys
import unittest
from pathlib import Path

# Add src to path so ukstreetmap is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

FIXTURE = Path(__file__).parent / "tests" / "fixtures" / "w2_4bb.html"
MAP_URL = "http://www.streetmap.co.uk/streetmap.dll?G2M?X=525688&Y=181069&A=Y&Z=1"


def make_resolver(page: str, status_code: int = 200):
    """Resolver whose requests are answered with *page*; returns (resolver, sent)."""
    import httpx
    from ukstreetmap import LocationResolver

    sent = []

    def handler(request):
        sent.append(request)
        return httpx.Response(status_code, text=page)

    return LocationResolver(transport=httpx.MockTransport(handler)), sent


# ── Query Tests ───────────────────────────────────────────────

class TestCheckPaired(unittest.TestCase):
    def test_half_pairs(self):
        from ukstreetmap.exceptions import PairingError
        from ukstreetmap.query import check_paired
        for q in [{"os_x": "1"}, {"wgs_long": "-0.19"}, {"lat": "N51:30:52"}]:
            with self.assertRaises(PairingError, msg=f"Expected failure: {q}"):
                check_paired(q)

    def test_complete(self):
        from ukstreetmap.query import check_paired
        self.assertIsNone(check_paired({"os_x": "1", "os_y": "2"}))


class TestBuildQuery(unittest.TestCase):
    def test_priority(self):
        from ukstreetmap.query import build_query
        name, conversion = build_query(
            {"postcode": "W2 4BB", "os_x": "525688", "os_y": "181069"}
        )
        self.assertEqual(name, "525688,181069")
        self.assertEqual(conversion.value, "OSGrid")

    def test_url_without_coordinates(self):
        from ukstreetmap.exceptions import MalformedUrlError
        from ukstreetmap.query import build_query
        with self.assertRaises(MalformedUrlError):
            build_query({"url": "http://www.streetmap.co.uk/"})

    def test_no_data(self):
        from ukstreetmap.exceptions import NoLocationDataError
        from ukstreetmap.query import build_query
        with self.assertRaises(NoLocationDataError):
            build_query({})

    def test_map_url(self):
        from ukstreetmap.query import map_url
        self.assertEqual(
            map_url("525688", "181069", "http://www.streetmap.co.uk"), MAP_URL
        )


# ── Extraction Tests ──────────────────────────────────────────

class TestExtractFields(unittest.TestCase):
    def test_captured_page(self):
        from ukstreetmap.extract import extract_fields
        found = extract_fields(FIXTURE.read_text(encoding="utf-8"))
        self.assertEqual(found, {
            "lat": "N51:30:52",
            "long": "W0:11:24",
            "lr_grid": "TQ256810",
            "os_x": "525688",
            "os_y": "181069",
            "postcode": "W2 4BB",
            "wgs_lat": "51.514572",
            "wgs_long": "-0.190067",
        })

    def test_missing_rows(self):
        from ukstreetmap.extract import extract_fields
        found = extract_fields("<html></html>")
        self.assertTrue(all(v is None for v in found.values()))


# ── Distance Tests ────────────────────────────────────────────

class TestDistance(unittest.TestCase):
    def test_crow_flies(self):
        from ukstreetmap.distance import crow_flies
        self.assertEqual(
            crow_flies(
                {"os_x": "525688", "os_y": "181069"},
                {"os_x": "528688", "os_y": "185069"},
            ),
            "5.0000",
        )

    def test_miles(self):
        from ukstreetmap.distance import km_to_miles
        self.assertAlmostEqual(km_to_miles(10), 6.21)


# ── Resolver Tests ────────────────────────────────────────────

class TestResolver(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.page = FIXTURE.read_text(encoding="utf-8")

    def test_resolve_postcode(self):
        resolver, sent = make_resolver(self.page)
        with resolver:
            record = resolver.resolve(postcode="W2 4BB")
        self.assertEqual(record.os_x, "525688")
        self.assertEqual(record.url, MAP_URL)
        self.assertEqual(len(sent), 1)
        self.assertIn("name=W2%204BB&type=Postcode", str(sent[0].url))

    def test_map_url_from_grid_needs_no_request(self):
        resolver, sent = make_resolver(self.page)
        with resolver:
            url = resolver.build_map_url(os_x="525688", os_y="181069")
        self.assertEqual(url, MAP_URL)
        self.assertEqual(sent, [])

    def test_request_failed(self):
        from ukstreetmap.exceptions import RequestFailedError
        resolver, _ = make_resolver("", status_code=500)
        with resolver:
            with self.assertRaises(RequestFailedError) as ctx:
                resolver.resolve(postcode="W2 4BB")
        self.assertEqual(ctx.exception.status_code, 500)

    def test_distance_resolves_postcode(self):
        resolver, sent = make_resolver(self.page)
        with resolver:
            km = resolver.distance_km(
                {"postcode": "W2 4BB"}, {"os_x": "522688", "os_y": "177069"}
            )
        self.assertEqual(km, "5.0000")
        self.assertEqual(len(sent), 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
