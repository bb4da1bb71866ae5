"""Answering stat requests against a transport catalogue."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from transit_catalogue.catalogue import TransportCatalogue


def write_info(
    catalogue: TransportCatalogue,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> None:
    """Read a counted block of requests and write one answer line for each."""
    if stream is None:
        stream = sys.stdin
    if out is None:
        out = sys.stdout
    for answer in answer_requests(catalogue, read_requests(stream)):
        out.write(answer + "\n")


def read_requests(stream: TextIO) -> list[str]:
    """Read a count line followed by that many request lines."""
    header = stream.readline().strip()
    count = int(header) if header else 0
    return [stream.readline().rstrip("\n") for _ in range(count)]


def answer_requests(catalogue: TransportCatalogue, requests: Iterable[str]) -> Iterator[str]:
    """Yield the answer to each Bus or Stop request; others are skipped."""
    for request in requests:
        if request.startswith("Bus"):
            yield bus_info(catalogue, request)
        elif request.startswith("Stop"):
            yield stop_info(catalogue, request)


def bus_info(catalogue: TransportCatalogue, request: str) -> str:
    """Answer a ``Bus <name>`` request."""
    return catalogue.route_info(request[len("Bus "):])


def stop_info(catalogue: TransportCatalogue, request: str) -> str:
    """Answer a ``Stop <name>`` request."""
    return catalogue.stop_info(request[len("Stop "):])