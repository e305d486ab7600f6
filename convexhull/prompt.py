"""Prompt for a vertex count and points, then report the convex hull area."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterator, TextIO

from convexhull.geometry import Convex

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _say(outfile: TextIO, text: str) -> None:
    print(text, file=outfile, flush=True)


def _format_number(value: float) -> str:
    """Format a number the way a default-formatted stream prints it."""
    return f"{value:g}"


def _leading_int(text: str) -> int:
    """Return the integer that starts ``text``, or 0 if it does not start with one."""
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _read_two_floats(text: str) -> tuple[float, float] | None:
    """Read two numbers separated by whitespace; return None if there are not two."""
    values = []
    pos = 0
    for _ in range(2):
        match = _FLOAT.match(text, pos)
        if match is None:
            return None
        values.append(float(match.group(1)))
        pos = match.end()
    return values[0], values[1]


def _lines(infile: TextIO) -> Iterator[str]:
    return (raw.rstrip("\n") for raw in infile)


def _read_vertex_count(lines: Iterator[str], outfile: TextIO) -> int | None:
    """Ask until a positive vertex count is given; return None at end of input."""
    while True:
        _say(outfile, "Enter number of vertices for the convex:")
        for line in lines:
            if line.strip():
                break
        else:
            return None
        count = _leading_int(line)
        if count <= 0:
            _say(outfile, "Wrong input for number of vertices. Must be higher than zero.")
            continue
        return count


def run(infile: TextIO, outfile: TextIO) -> int:
    """Read a vertex count and that many points, print the hull area; return an exit code."""
    lines = _lines(infile)
    count = _read_vertex_count(lines, outfile)
    if count is None:
        return 1

    convex = Convex(count)
    added = 0
    while added < count:
        line = next(lines, None)
        if line is None:
            return 1
        pair = _read_two_floats(line.replace(",", " "))
        if pair is None:
            _say(outfile, "Invalid input, please enter in format x,y")
            continue
        convex.add_point(*pair)
        added += 1

    convex.find_hull()
    if len(convex.hull()) < 3:
        _say(outfile, "Convex hull cannot be formed with less than 3 points.")
        return 1

    try:
        area = convex.area()
    except ValueError as exc:
        _say(outfile, f"Error calculating area: {exc}")
        return 1
    _say(outfile, f"The area of the Convex Hull is - {_format_number(area)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the prompt on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Read points from standard input and print their convex hull area."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())