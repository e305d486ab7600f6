import socket
import threading

import pytest

from convexhull.geometry import Point
from convexhull.server import WELCOME, ConvexServer, format_float


@pytest.fixture
def server():
    srv = ConvexServer("127.0.0.1", 0)
    yield srv
    srv.close()


def _session(server, commands):
    """Feed commands to handle_client over a socket pair and return the reply lines."""
    ours, theirs = socket.socketpair()
    with theirs:
        theirs.sendall("".join(f"{c}\n" for c in commands).encode())
        theirs.shutdown(socket.SHUT_WR)
        server.handle_client(ours)
        chunks = []
        while True:
            data = theirs.recv(4096)
            if not data:
                break
            chunks.append(data)
    return b"".join(chunks).decode().splitlines()


SQUARE = ["Newgraph 4", "0,0", "4,0", "4,4", "0,4"]


def test_format_float_uses_six_decimals():
    assert format_float(1.5) == "1.500000"
    assert format_float(-2.0) == "-2.000000"


def test_welcome_is_sent_first(server):
    lines = _session(server, [])
    assert lines == [WELCOME.rstrip("\n")]


def test_new_graph_and_hull_area(server):
    lines = _session(server, SQUARE + ["CH"])
    assert lines[1:] == [
        "Enter 4 points x,y ",
        "Graph created",
        "Convex hull area: 16.000000",
    ]
    assert len(server.convex.points()) == 4


def test_new_graph_rejects_non_positive_count(server):
    lines = _session(server, ["Newgraph 0", "Newgraph -3", "Newgraph"])
    assert lines[1:] == ["Number of points must be positive "] * 3
    assert server.convex is None


def test_new_graph_reasks_on_point_without_comma(server):
    lines = _session(server, ["Newgraph 3", "1 2", "0,0", "1,0", "0,1"])
    assert lines[1:] == [
        "Enter 3 points x,y ",
        "Invalid input use format x,y",
        "Graph created",
    ]
    assert server.convex.points() == [Point(0, 0), Point(1, 0), Point(0, 1)]


def test_commands_without_graph(server):
    lines = _session(server, ["Newpoint 1,2", "Removepoint 1,2", "CH"])
    assert lines[1:] == [
        "No graph exists. Use Newgraph first",
        "No graph exists. Use Newgraph first",
        "No graph exists, use Newgraph to create one ",
    ]


def test_new_point_added(server):
    lines = _session(server, SQUARE + ["Newpoint 1,2"])
    assert lines[-1] == "Point (1.000000,2.000000) added"
    assert Point(1.0, 2.0) in server.convex.points()


def test_new_point_without_comma(server):
    lines = _session(server, SQUARE + ["Newpoint 12", "Removepoint 12"])
    assert lines[-2:] == [
        "Invalid input, use format Newpoint x,y",
        "Invalid input, use format Removepoint x,y",
    ]
    assert len(server.convex.points()) == 4


def test_remove_point_then_hull(server):
    lines = _session(server, SQUARE + ["Removepoint 4,4", "CH"])
    assert lines[-2:] == [
        "Point (4.000000,4.000000) removed",
        "Convex hull area: 8.000000",
    ]
    assert Point(4.0, 4.0) not in server.convex.points()


def test_hull_of_too_few_points_sends_no_reply(server):
    lines = _session(server, ["Newgraph 2", "0,0", "1,1", "CH", "hello"])
    assert lines[1:] == [
        "Enter 2 points x,y ",
        "Graph created",
        "Unknown command ",
    ]


def test_unknown_and_empty_commands(server):
    lines = _session(server, ["Frobnicate", ""])
    assert lines[1:] == ["Unknown command ", "Unknown command "]


def test_malformed_number_raises(server):
    ours, theirs = socket.socketpair()
    with theirs:
        theirs.sendall(b"Newgraph 1\n0,0\nNewpoint a,b\n")
        theirs.shutdown(socket.SHUT_WR)
        with pytest.raises(ValueError):
            server.handle_client(ours)


def test_graph_is_shared_between_clients(server):
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    with socket.create_connection(server.address, timeout=5) as first:
        reader = first.makefile("r")
        assert reader.readline() == WELCOME
        first.sendall("".join(f"{c}\n" for c in SQUARE).encode())
        assert reader.readline() == "Enter 4 points x,y \n"
        assert reader.readline() == "Graph created\n"
        reader.close()

    with socket.create_connection(server.address, timeout=5) as second:
        reader = second.makefile("r")
        assert reader.readline() == WELCOME
        second.sendall(b"CH\n")
        assert reader.readline() == "Convex hull area: 16.000000\n"
        reader.close()