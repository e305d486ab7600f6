"""Planar points, orientation tests and a Graham-scan convex hull."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Iterable


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


def squared_distance(a: Point, b: Point) -> float:
    """Return the squared Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def orientation(a: Point, b: Point, c: Point) -> int:
    """Return 1 for a counter-clockwise turn a->b->c, -1 for clockwise, 0 if collinear."""
    value = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def _polar_key(pivot: Point) -> Callable[[Point], object]:
    def compare(a: Point, b: Point) -> int:
        turn = orientation(pivot, a, b)
        if turn == 1:
            return -1
        if turn == -1:
            return 1
        da = squared_distance(pivot, a)
        db = squared_distance(pivot, b)
        return (da > db) - (da < db)

    return cmp_to_key(compare)


class Convex:
    """A set of points together with the convex hull last computed from them."""

    def __init__(self, num_vertices: int) -> None:
        self.num_vertices = num_vertices
        self._points: list[Point] = []
        self._hull: list[Point] = []

    def add_point(self, x: float, y: float) -> None:
        """Add the point (x, y)."""
        self._points.append(Point(float(x), float(y)))

    def remove_point(self, x: float, y: float) -> None:
        """Remove the first point equal to (x, y); do nothing if there is none."""
        target = Point(float(x), float(y))
        try:
            self._points.remove(target)
        except ValueError:
            pass

    def _sort_by_angle(self) -> bool:
        """Sort the points around the lowest one; return False if too few for a hull."""
        if len(self._points) < 3:
            self._hull = []
            return False
        pivot = min(self._points, key=lambda p: (p.y, p.x))
        self._points.sort(key=_polar_key(pivot))
        return True

    @staticmethod
    def _scan(points: Iterable[Point], stack) -> None:
        for point in points:
            while len(stack) > 1 and orientation(stack[-2], stack[-1], point) != 1:
                stack.pop()
            stack.append(point)

    def find_hull(self) -> None:
        """Compute the convex hull of the current points."""
        self.find_hull_using_list()

    def find_hull_using_list(self) -> None:
        """Compute the convex hull using a list as the scan stack."""
        if not self._sort_by_angle():
            return
        stack: list[Point] = []
        self._scan(self._points, stack)
        self._hull = stack

    def find_hull_using_deque(self) -> None:
        """Compute the convex hull using a deque as the scan stack."""
        if not self._sort_by_angle():
            return
        stack: deque[Point] = deque()
        self._scan(self._points, stack)
        self._hull = list(stack)

    def area(self) -> float:
        """Return the area enclosed by the last computed hull."""
        if len(self._hull) < 3:
            raise ValueError("Need at least 3 points to calculate area")
        doubled = sum(
            p1.x * p2.y - p2.x * p1.y
            for p1, p2 in zip(self._hull, self._hull[1:] + self._hull[:1])
        )
        return abs(doubled) / 2.0

    def hull(self) -> list[Point]:
        """Return the vertices of the last computed hull, counter-clockwise."""
        return list(self._hull)

    def points(self) -> list[Point]:
        """Return the current points."""
        return list(self._points)