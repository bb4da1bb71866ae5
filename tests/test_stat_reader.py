import io

import pytest

from transit_catalogue.input_reader import read_catalogue
from transit_catalogue.stat_reader import (
    answer_requests,
    bus_info,
    read_requests,
    stop_info,
    write_info,
)

BIRYULYOVO_LOOP = [
    "Biryulyovo Zapadnoye",
    "Biryusinka",
    "Universam",
    "Biryulyovo Tovarnaya",
    "Biryulyovo Passazhirskaya",
    "Biryulyovo Zapadnoye",
]
WESTERN_LINE = ["Tolstopaltsevo", "Marushkino", "Rasskazovka"]

STOP_POSITIONS = {
    "Tolstopaltsevo": ("55.611087", "37.20829"),
    "Marushkino": ("55.595884", "37.209755"),
    "Rasskazovka": ("55.632761", "37.333324"),
    "Biryulyovo Zapadnoye": ("55.574371", "37.6517"),
    "Biryusinka": ("55.581065", "37.64839"),
    "Universam": ("55.587655", "37.645687"),
    "Biryulyovo Tovarnaya": ("55.592028", "37.653656"),
    "Biryulyovo Passazhirskaya": ("55.580999", "37.659164"),
}
EXTRA_STOPS = {
    "Rossoshanskaya ulitsa": ("55.595579", "37.605757"),
    "Prazhskaya": ("55.611678", "37.603831"),
}
EXTRA_LOOP = ["Biryulyovo Zapadnoye", "Universam", "Rossoshanskaya ulitsa", "Biryulyovo Zapadnoye"]


def _stop_line(name, position):
    lat, lng = position
    return f"Stop {name}: {lat}, {lng}"


def _bus_line(name, separator, stops):
    return f"Bus {name}: " + f" {separator} ".join(stops)


def _document(lines):
    return io.StringIO("\n".join([str(len(lines)), *lines]) + "\n")


def _base_lines():
    lines = [_stop_line(name, pos) for name, pos in STOP_POSITIONS.items()]
    lines.append(_bus_line("256", ">", BIRYULYOVO_LOOP))
    lines.append(_bus_line("750", "-", WESTERN_LINE))
    return lines


def _full_lines():
    lines = _base_lines()
    lines.append(_bus_line("828", ">", EXTRA_LOOP))
    lines.extend(_stop_line(name, pos) for name, pos in EXTRA_STOPS.items())
    return lines


BUS_256_ANSWER = "Bus 256: 6 stops on route, 5 unique stops, 4371.017261 route length"
BUS_750_ANSWER = "Bus 750: 5 stops on route, 3 unique stops, 20939.483047 route length"


@pytest.fixture
def catalogue():
    return read_catalogue(_document(_base_lines()))


@pytest.fixture
def full_catalogue():
    return read_catalogue(_document(_full_lines()))


def test_stat_request_reader(catalogue):
    out = io.StringIO()
    write_info(catalogue, _document(["Bus 256", "Bus 750", "Bus 751"]), out)
    expected = [BUS_256_ANSWER, BUS_750_ANSWER, "Bus 751: not found"]
    assert out.getvalue().splitlines() == expected
    assert out.getvalue().endswith("\n")


def test_write_info_prints_correctly(full_catalogue):
    requests = _document(
        [
            "Bus 256",
            "Bus 750",
            "Bus 751",
            "Stop Samara",
            "Stop Prazhskaya",
            "Stop Biryulyovo Zapadnoye",
        ]
    )
    out = io.StringIO()
    write_info(full_catalogue, requests, out)
    expected = [
        BUS_256_ANSWER,
        BUS_750_ANSWER,
        "Bus 751: not found",
        "Stop Samara: not found",
        "Stop Prazhskaya: no buses",
        "Stop Biryulyovo Zapadnoye: buses 256 828",
    ]
    assert out.getvalue().splitlines() == expected
    assert out.getvalue().endswith("\n")


def test_read_requests_reads_counted_lines():
    stream = io.StringIO("2\nBus 256\nStop Samara\nBus 999\n")
    assert read_requests(stream) == ["Bus 256", "Stop Samara"]
    assert stream.readline() == "Bus 999\n"


def test_read_requests_empty_stream():
    assert read_requests(io.StringIO("")) == []


def test_answer_requests_skips_unknown_kinds(catalogue):
    answers = list(answer_requests(catalogue, ["Tram 1", "Bus 751", "Stop Samara"]))
    assert answers == ["Bus 751: not found", "Stop Samara: not found"]


def test_bus_info(catalogue):
    assert bus_info(catalogue, "Bus 751") == "Bus 751: not found"
    assert bus_info(catalogue, "Bus 750").startswith("Bus 750: 5 stops on route")


def test_stop_info(full_catalogue):
    assert stop_info(full_catalogue, "Stop Prazhskaya") == "Stop Prazhskaya: no buses"
    assert (
        stop_info(full_catalogue, "Stop Biryulyovo Zapadnoye")
        == "Stop Biryulyovo Zapadnoye: buses 256 828"
    )