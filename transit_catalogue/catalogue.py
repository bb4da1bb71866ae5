"""The transport catalogue: stops, routes and queries about them."""

from __future__ import annotations

from transit_catalogue.domain import Route, Stop


class TransportCatalogue:
    """Stores stops and routes and answers questions about them."""

    def __init__(self) -> None:
        self._stops: list[Stop] = []
        self._stops_by_name: dict[str, Stop] = {}
        self._routes: list[Route] = []
        self._routes_by_name: dict[str, Route] = {}
        self._routes_by_stop: dict[int, dict[int, Route]] = {}

    def add_stop(self, stop: Stop) -> None:
        """Add a stop; an earlier stop with the same name keeps the name."""
        self._stops.append(stop)
        self._stops_by_name.setdefault(stop.name, stop)

    def add_route(self, route: Route) -> None:
        """Add a route and index the stops it goes through."""
        self._routes.append(route)
        self._routes_by_name.setdefault(route.name, route)
        for stop in route.stops:
            self._routes_by_stop.setdefault(id(stop), {})[id(route)] = route

    def get_stop(self, name: str) -> Stop:
        """Return the stop with this name; raise KeyError if there is none."""
        return self._stops_by_name[name]

    def get_route(self, name: str) -> Route:
        """Return the route with this name; raise KeyError if there is none."""
        return self._routes_by_name[name]

    def route_info(self, name: str) -> str:
        """Describe a bus route in one line."""
        try:
            route = self.get_route(name)
        except KeyError:
            return f"Bus {name}: not found"
        return (
            f"Bus {route.name}: {route.stops_count} stops on route, "
            f"{route.unique_stops_count} unique stops, "
            f"{route.length:.6f} route length"
        )

    def stop_info(self, name: str) -> str:
        """List the buses that go through a stop in one line."""
        try:
            stop = self.get_stop(name)
        except KeyError:
            return f"Stop {name}: not found"
        routes = self._routes_by_stop.get(id(stop))
        if not routes:
            return f"Stop {name}: no buses"
        return " ".join([f"Stop {name}: buses", *(route.name for route in routes.values())])