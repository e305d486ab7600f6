"""A line-oriented command session for building point sets and measuring their hulls."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Iterator, TextIO

from convexhull.geometry import Convex
from convexhull.prompt import _format_number, _leading_int, _lines, _say

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _to_float(text: str) -> float:
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def parse_point(text: str) -> tuple[float, float]:
    """Parse ``x,y`` into a pair of floats; raise ValueError if it is malformed."""
    head, sep, tail = text.partition(",")
    if not sep:
        raise ValueError(f"expected x,y: {text!r}")
    return _to_float(head), _to_float(tail)


class _Session:
    def __init__(self, outfile: TextIO) -> None:
        self.outfile = outfile
        self.convex: Convex | None = None
        self.handlers: dict[str, Callable[[str, Iterator[str]], bool]] = {
            "Newgraph": self._new_graph,
            "Newpoint": self._new_point,
            "Removepoint": self._remove_point,
            "CH": self._hull_area,
        }

    def say(self, text: str) -> None:
        _say(self.outfile, text)

    def execute(self, line: str, lines: Iterator[str]) -> None:
        tokens = line.split()
        cmd = tokens[0] if tokens else ""
        arg = tokens[1] if len(tokens) > 1 else ""
        handler = self.handlers.get(cmd)
        if handler is None:
            self.say("Unknown command ")
            ask_next = True
        else:
            ask_next = handler(arg, lines)
        if ask_next:
            self.say("Enter next command:")

    def _new_graph(self, arg: str, lines: Iterator[str]) -> bool:
        count = _leading_int(arg)
        if count <= 0:
            self.say("Number of points must be positive")
            return False
        self.convex = Convex(count)
        self.say(f"Enter {count} points x,y")
        added = 0
        while added < count:
            raw = next(lines, None)
            if raw is None:
                return False
            if "," not in raw:
                self.say("Invalid input use format x,y")
                continue
            self.convex.add_point(*parse_point(raw))
            added += 1
        self.say("Graph created ")
        return True

    def _new_point(self, arg: str, lines: Iterator[str]) -> bool:
        if self.convex is None:
            self.say("No graph exists. Use Newgraph first")
            return False
        if "," not in arg:
            self.say("Invalid input, use format Newpoint x,y")
            return False
        x, y = parse_point(arg)
        self.convex.add_point(x, y)
        self.say(f"Point ({_format_number(x)},{_format_number(y)}) added")
        return True

    def _remove_point(self, arg: str, lines: Iterator[str]) -> bool:
        if self.convex is None:
            self.say("No graph exists. Use Newgraph first")
            return False
        if "," not in arg:
            self.say("Invalid input, use format Removepoint x,y")
            return False
        x, y = parse_point(arg)
        self.convex.remove_point(x, y)
        self.say(f"Point ({_format_number(x)},{_format_number(y)}) removed")
        return True

    def _hull_area(self, arg: str, lines: Iterator[str]) -> bool:
        if self.convex is None:
            self.say("No graph exists, use Newgraph to create one")
            return False
        self.convex.find_hull()
        if len(self.convex.hull()) < 3:
            self.say("Convex hull cannot be formed with less than 3 points")
            return False
        try:
            area = self.convex.area()
        except ValueError as exc:
            self.say(f"Error calculating area: {exc}")
        else:
            self.say(f"Convex hull area: {_format_number(area)}")
        return True


def run(infile: TextIO, outfile: TextIO) -> int:
    """Execute commands read from ``infile`` until it ends; return an exit code.

    A point whose coordinates are not numbers raises ValueError.
    """
    lines = _lines(infile)
    session = _Session(outfile)
    for line in lines:
        session.execute(line, lines)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command session on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Commands: Newgraph n, Newpoint x,y, Removepoint x,y, CH."
    )
    parser.parse_args(argv)
    try:
        return run(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())