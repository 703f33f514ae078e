"""
Streetmap Location Lookup: Interactive CLI
==========================================
Thin wrapper around the ukstreetmap library.

Usage:
    ukstreetmap                              # interactive mode
    ukstreetmap "W2 4BB"                     # single lookup
    ukstreetmap "W2 4BB" "525688,181069"     # distance between two points

A location may be a postcode, "x,y" OS grid coordinates, decimal
"lat,long", "N51:30:52,W0:11:24", a Landranger reference such as
TQ256810, or a streetmap map URL.

Settings are read from environment variables:
    STREETMAP_BASE_URL    Streetmap site root (default http://www.streetmap.co.uk)
    STREETMAP_TIMEOUT     Request timeout in seconds (default 10)
    STREETMAP_LOG_LEVEL   Logging level (default WARNING)
"""

import logging
import os
import sys
from typing import Optional

from ukstreetmap import LocationResolver
from ukstreetmap.exceptions import (
    ConfigInvalid,
    LocationUnrecognised,
    RequestFailedError,
    StreetmapError,
)
from ukstreetmap.formats import parse_location
from ukstreetmap.models import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    LocationRecord,
    ResolverConfig,
)

_BANNER = """\
╔══════════════════════════════════════╗
║       Streetmap Location Lookup      ║
║  Postcode / Grid / Lat-Long → All    ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _load_config() -> ResolverConfig:
    """Build a ResolverConfig from the environment. Raises ConfigInvalid."""
    return ResolverConfig(
        base_url=os.environ.get("STREETMAP_BASE_URL", DEFAULT_BASE_URL),
        timeout=os.environ.get("STREETMAP_TIMEOUT", DEFAULT_TIMEOUT),
    )


def _configure_logging() -> None:
    level = os.environ.get("STREETMAP_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigInvalid("STREETMAP_LOG_LEVEL", f"unknown level '{level}'")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _print_record(record: LocationRecord) -> None:
    for key, val in record.to_dict().items():
        print(f"{key:>10}: {val}")


def _run_interactive(resolver: LocationResolver) -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nLocation:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ A location is required.")
            continue

        try:
            query = parse_location(raw)
        except LocationUnrecognised:
            print(f"  ✗ Not a postcode, grid reference or lat/long: '{raw}'")
            continue

        print("  ⏳ Asking streetmap …", end="", flush=True)
        try:
            record = resolver.resolve(query)
        except StreetmapError as exc:
            print(f"\r  ✗ Error: {exc}")
            continue

        print("\r  ✓ Location found        ")
        print()
        print(f"  ┌──────────────────────────────────────────────────────┐")
        print(f"  │  Postcode          {record.postcode:<34}│")
        print(f"  │  OS X / Y          {record.os_x + ' / ' + record.os_y:<34}│")
        print(f"  │  WGS84 Lat / Long  {record.wgs_lat + ' / ' + record.wgs_long:<34}│")
        print(f"  │  Lat / Long        {record.lat + ' / ' + record.long:<34}│")
        print(f"  │  Landranger        {record.lr_grid:<34}│")
        print(f"  └──────────────────────────────────────────────────────┘")
        print(f"  {record.url}")


def _run_once(resolver: LocationResolver, locations: list[str]) -> int:
    """Resolve one location, or two and the distance between them."""
    try:
        queries = [parse_location(text) for text in locations]
    except LocationUnrecognised as exc:
        print(f"Unrecognised location: {exc.text}", file=sys.stderr)
        return 1

    try:
        records = [resolver.resolve(q) for q in queries]
        for i, record in enumerate(records):
            if i:
                print()
            _print_record(record)
        if len(records) == 2:
            km = resolver.distance_km(records[0], records[1])
            print()
            print(f"{'km':>10}: {km}")
            print(f"{'miles':>10}: {resolver.km_to_miles(km):.4f}")
    except RequestFailedError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except StreetmapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point; supports both CLI args and interactive mode."""
    args = sys.argv[1:] if argv is None else argv

    try:
        _configure_logging()
        config = _load_config()
    except ConfigInvalid as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    if len(args) > 2:
        print("Usage: ukstreetmap [LOCATION [OTHER_LOCATION]]", file=sys.stderr)
        sys.exit(1)

    with LocationResolver(config) as resolver:
        if args:
            status = _run_once(resolver, args)
            if status:
                sys.exit(status)
        else:
            _run_interactive(resolver)


if __name__ == "__main__":
    main()
