"""Convex hull computation and hull-area reporting for 2D points, with console and TCP front ends."""

__version__ = "0.1.0"