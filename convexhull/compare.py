"""Compute a convex hull area with two scan-stack structures and report both."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from convexhull.geometry import Convex
from convexhull.prompt import (
    _format_number,
    _lines,
    _read_two_floats,
    _read_vertex_count,
    _say,
)


def run_hull_list(convex: Convex) -> None:
    """Compute the hull of ``convex`` with the list-based scan."""
    convex.find_hull_using_list()


def run_hull_deque(convex: Convex) -> None:
    """Compute the hull of ``convex`` with the deque-based scan."""
    convex.find_hull_using_deque()


def run(infile: TextIO, outfile: TextIO) -> int:
    """Read points, compute both hulls and print their areas; return an exit code."""
    lines = _lines(infile)
    count = _read_vertex_count(lines, outfile)
    if count is None:
        return 1

    with_list = Convex(count)
    with_deque = Convex(count)
    added = 0
    while added < count:
        line = next(lines, None)
        if line is None:
            return 1
        if not line:
            continue
        pair = _read_two_floats(line.replace(",", " "))
        if pair is None:
            _say(outfile, "Invalid input, please enter in format x,y")
            continue
        with_list.add_point(*pair)
        with_deque.add_point(*pair)
        added += 1

    run_hull_list(with_list)
    run_hull_deque(with_deque)

    if len(with_list.hull()) < 3 or len(with_deque.hull()) < 3:
        _say(outfile, "Convex hull cannot be formed with less than 3 points.")
        return 1

    try:
        area_list = with_list.area()
        area_deque = with_deque.area()
    except ValueError as exc:
        _say(outfile, f"Error calculating area: {exc}")
        return 1

    _say(outfile, "The area of the Convex Hull using two different data structures is - ")
    _say(outfile, f"Using Vector - {_format_number(area_list)}")
    _say(outfile, f"Using Deque - {_format_number(area_deque)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the comparison on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Compute a convex hull area with a list and a deque scan stack."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())