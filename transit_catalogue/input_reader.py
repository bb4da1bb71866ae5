"""Reading the requests that fill a transport catalogue."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import TextIO

from transit_catalogue.catalogue import TransportCatalogue
from transit_catalogue.domain import Route, Stop
from transit_catalogue.geo import Coordinates

_STOP_PREFIX = "Stop "
_BUS_PREFIX = "Bus "
_STOP_DELIMITER = re.compile(r"[>-]")
_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _read_request_lines(stream: TextIO) -> list[str]:
    header = stream.readline().strip()
    count = int(header) if header else 0
    lines = []
    for _ in range(count):
        lines.append(stream.readline().rstrip("\n"))
    return lines


def _leading_number(text: str) -> float:
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"expected a number, got {text!r}")
    return float(match.group())


def _split_name(body: str, kind: str) -> tuple[str, str]:
    name, colon, rest = body.partition(":")
    if not colon:
        raise ValueError(f"{kind} request has no ':' separator: {body!r}")
    return name, rest[1:]


def read_catalogue(stream: TextIO | None = None) -> TransportCatalogue:
    """Build a catalogue from a counted block of Stop and Bus requests."""
    if stream is None:
        stream = sys.stdin
    stop_requests: list[str] = []
    route_requests: list[str] = []
    for line in _read_request_lines(stream):
        if line.startswith("Stop"):
            stop_requests.append(line)
        elif line.startswith("Bus"):
            route_requests.append(line)

    catalogue = TransportCatalogue()
    add_stops(catalogue, stop_requests)
    add_routes(catalogue, route_requests)
    return catalogue


def add_stops(catalogue: TransportCatalogue, requests: Iterable[str]) -> None:
    """Add a stop to the catalogue for each Stop request."""
    for request in requests:
        catalogue.add_stop(parse_stop(request))


def add_routes(catalogue: TransportCatalogue, requests: Iterable[str]) -> None:
    """Add a route to the catalogue for each Bus request."""
    for request in requests:
        catalogue.add_route(parse_route(catalogue, request))


def parse_stop(request: str) -> Stop:
    """Parse ``Stop <name>: <lat>, <lng>`` into a stop."""
    name, rest = _split_name(request[len(_STOP_PREFIX):], "Stop")
    lat_text, _, lng_text = rest.partition(",")
    lat = _leading_number(lat_text)
    lng = _leading_number(lng_text[1:])
    return Stop(name, Coordinates(lat, lng))


def parse_route(catalogue: TransportCatalogue, request: str) -> Route:
    """Parse ``Bus <name>: A > B > A`` or ``Bus <name>: A - B`` into a route.

    Stops are looked up in the catalogue; an unknown stop raises KeyError.
    A route written with ``-`` goes there and back.
    """
    name, rest = _split_name(request[len(_BUS_PREFIX):], "Bus")

    first = _STOP_DELIMITER.search(rest)
    is_returning = first is not None and first.group() == "-"

    stops: list[Stop] = []
    while (match := _STOP_DELIMITER.search(rest)) is not None:
        stop_name = rest[: max(match.start() - 1, 0)]
        stops.append(catalogue.get_stop(stop_name))
        rest = rest[len(stop_name) + 3:]
    stops.append(catalogue.get_stop(rest))

    if is_returning:
        stops.extend(reversed(stops[:-1]))

    return Route(name, stops)