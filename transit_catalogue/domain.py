"""Stops and bus routes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

from transit_catalogue.geo import Coordinates, compute_distance


@dataclass(frozen=True, eq=False)
class Stop:
    """A named bus stop; stops are distinguished by identity."""

    name: str
    coordinates: Coordinates


class Route:
    """A bus route as the full sequence of stops it visits."""

    def __init__(self, name: str, stops: Iterable[Stop]) -> None:
        self.name = name
        self._stops = tuple(stops)
        self._unique_stops_count = self._count_unique_stops(self._stops)
        self._length = sum(
            (compute_distance(a.coordinates, b.coordinates) for a, b in pairwise(self._stops)),
            0.0,
        )

    @property
    def stops_count(self) -> int:
        """Number of stops visited, repeats included."""
        return len(self._stops)

    @property
    def unique_stops_count(self) -> int:
        """Number of stops visited before the first repeat."""
        return self._unique_stops_count

    @property
    def length(self) -> float:
        """Geographic length of the route in metres."""
        return self._length

    @property
    def stops(self) -> tuple[Stop, ...]:
        """The stops in visiting order."""
        return self._stops

    @staticmethod
    def _count_unique_stops(stops: tuple[Stop, ...]) -> int:
        seen: set[int] = set()
        for stop in stops:
            if id(stop) in seen:
                break
            seen.add(id(stop))
        return len(seen)

    def __repr__(self) -> str:
        return f"Route(name={self.name!r}, stops_count={self.stops_count})"