# transit-catalogue

A small catalogue of bus stops and routes. You give it stop and bus
descriptions, then ask about buses and stops. For a bus it reports how
many stops the route visits, how many distinct stops it visits and how
long the route is. For a stop it lists the buses that serve it. Route
length is the sum of the great-circle distances between consecutive
stops, on a sphere of radius 6,371,000 metres.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Input format

The input has two blocks. Each block starts with a line holding the
number of lines that follow.

The first block fills the catalogue:

```
Stop <name>: <latitude>, <longitude>
Bus <name>: <stop> > <stop> > ... > <stop>
Bus <name>: <stop> - <stop> - ... - <stop>
```

Lines can appear in any order. All `Stop` lines are added before any
`Bus` line, so a bus may name stops that are described later in the
block. Lines that start with neither `Stop` nor `Bus` are ignored.

Use `>` for a circular route. Its last stop should repeat the first.
Use `-` for a route that runs out and back along the same stops: the
stops are visited in order and then in reverse back to the first.

The second block holds the queries:

```
Bus <name>
Stop <name>
```

Each query gives one line of output:

- `Bus <name>: <n> stops on route, <u> unique stops, <length> route length`,
  with the length in metres to six decimal places, or `Bus <name>: not found`.
  The unique count is the number of stops visited before the route first
  returns to a stop it has already visited.
- `Stop <name>: buses <bus> <bus> ...`, listing buses in the order they
  were added, `Stop <name>: no buses`, or `Stop <name>: not found`.

Other query lines are skipped.

## Command line

```
transit-catalogue < input.txt
transit-catalogue input.txt
```

Both blocks are read from the named file, or from standard input when
no file is given. Answers go to standard output.

Example input:

```
4
Stop Tolstopaltsevo: 55.611087, 37.208290
Stop Marushkino: 55.595884, 37.209755
Stop Rasskazovka: 55.632761, 37.333324
Bus 750: Tolstopaltsevo - Marushkino - Rasskazovka
3
Bus 750
Bus 751
Stop Marushkino
```

Output:

```
Bus 750: 5 stops on route, 3 unique stops, 20939.483047 route length
Bus 751: not found
Stop Marushkino: buses 750
```

## Library use

```python
import io

from transit_catalogue.input_reader import read_catalogue
from transit_catalogue.stat_reader import write_info

catalogue = read_catalogue(io.StringIO(
    "3\n"
    "Stop A: 55.611087, 37.208290\n"
    "Stop B: 55.595884, 37.209755\n"
    "Bus 1: A - B\n"
))
print(catalogue.route_info("1"))
print(catalogue.stop_info("A"))

out = io.StringIO()
write_info(catalogue, io.StringIO("1\nBus 1\n"), out)
print(out.getvalue(), end="")
```

The modules:

- `transit_catalogue.geo`: `Coordinates(lat, lng)` and
  `compute_distance(origin, destination)`, the distance in metres.
- `transit_catalogue.domain`: `Stop(name, coordinates)` and
  `Route(name, stops)`, with the properties `stops`, `stops_count`,
  `unique_stops_count` and `length`.
- `transit_catalogue.catalogue`: `TransportCatalogue` with `add_stop`,
  `add_route`, `get_stop`, `get_route`, `route_info` and `stop_info`.
- `transit_catalogue.input_reader`: `read_catalogue`, `add_stops`,
  `add_routes`, `parse_stop` and `parse_route`.
- `transit_catalogue.stat_reader`: `write_info`, `read_requests`,
  `answer_requests` (a generator of answer lines), `bus_info` and
  `stop_info`.
- `transit_catalogue.cli`: `main`, the command above.

`get_stop` and `get_route` raise `KeyError` when the name is unknown;
`route_info` and `stop_info` answer "not found" instead. `parse_route`
raises `KeyError` for a bus that names an unknown stop, and
`parse_stop` and `parse_route` raise `ValueError` when a line has no
`:` or a coordinate is not a number.

## What it does not do

The catalogue lives in memory for one run only; nothing is saved
between runs. Distances are straight great-circle distances between
stops, not distances along roads.