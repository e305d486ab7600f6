# convexhull

Compute the convex hull of a set of 2D points with the Graham scan and report
the area of the hull. The package is a small library, `convexhull.geometry`,
with four command-line front ends.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Library

    from convexhull.geometry import Convex

    convex = Convex(4)
    for x, y in [(0, 0), (4, 0), (4, 3), (0, 3)]:
        convex.add_point(x, y)
    convex.find_hull()
    print(convex.hull())  # list of Point, counter-clockwise from the lowest point
    print(convex.area())  # 12.0

- `Point(x, y)` is a frozen dataclass.
- `squared_distance(a, b)` returns the squared distance between two points.
- `orientation(a, b, c)` returns `1` for a counter-clockwise turn, `-1` for a
  clockwise one and `0` for collinear points.
- `Convex.add_point(x, y)` adds a point. `Convex.remove_point(x, y)` removes
  the first equal point and does nothing if there is none.
- `Convex.find_hull()` computes the hull. `find_hull_using_list()` and
  `find_hull_using_deque()` build the same hull with a list or a deque as the
  scan stack. With fewer than three points the hull is left empty. Computing
  the hull also sorts the stored points by angle around the lowest point.
- `Convex.hull()` and `Convex.points()` return copies of the hull vertices
  and of the stored points.
- `Convex.area()` returns the area of the last computed hull and raises
  `ValueError` when it has fewer than three vertices.

## Commands

### convexhull-prompt

Asks for a number of vertices (asking again while it is not positive), reads
that many `x,y` lines from standard input and prints:

    The area of the Convex Hull is - 12

A line that does not hold two numbers is rejected with
`Invalid input, please enter in format x,y`. The exit status is 0 on success
and 1 if the input ends early or the points do not form a hull.

### convexhull-compare

Works like `convexhull-prompt`, skipping blank point lines, but computes the
hull both with the list and with the deque scan and prints both areas:

    The area of the Convex Hull using two different data structures is - 
    Using Vector - 12
    Using Deque - 12

### convexhull-interactive

Reads commands from standard input until it ends:

    Newgraph 4
    0,0
    4,0
    4,3
    0,3
    Newpoint 2,5
    Removepoint 2,5
    CH

`Newgraph n` starts a new point set and reads `n` points on the lines that
follow, `Newpoint x,y` and `Removepoint x,y` edit the set, and `CH` prints
`Convex hull area: 12`. Any other command answers `Unknown command`. A point
whose coordinates are not numbers stops the session with an error message and
exit status 1.

### convexhull-server

    convexhull-server [--host HOST] [--port PORT]

Listens on TCP port 9034 by default, on all interfaces, and accepts the same
commands as `convexhull-interactive`, one per line. Numbers in replies carry
six decimals, for example `Convex hull area: 12.000000`. When `CH` finds fewer
than three hull vertices, no reply is sent. The server can also be used from
code:

    from convexhull.server import ConvexServer

    with ConvexServer("127.0.0.1", 0) as server:
        print(server.address)
        server.serve_forever()

## Limitations

- The server handles one client at a time; a second client waits until the
  first disconnects. All clients share one point set.
- Point sets live only in memory and are lost when a command or the server
  exits.