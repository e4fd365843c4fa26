# polyline_simplify/geometry/distance.py
"""
Distance primitives used by the simplification engine.

This module provides the Euclidean distance between two points and the
perpendicular distance from a point to the infinite line through two points.
"""

import math

from polyline_simplify.geometry.types import Line, Point


def point_to_point(x: Point, y: Point) -> float:
    """
    Calculate the Euclidean distance between two points.

    Args:
        x: First point (x, y).
        y: Second point (x, y).

    Returns:
        float: Non-negative distance between the points.
    """
    a = y[0] - x[0]
    b = y[1] - x[1]
    return abs(math.sqrt(a * a + b * b))


def point_to_line(p: Point, line: Line) -> float:
    """
    Calculate the perpendicular distance from a point to a line.

    The line is infinite and passes through ``line[0]`` and ``line[1]``. When
    both points coincide the distance to that single point is returned.

    Args:
        p: Point coordinates (x, y).
        line: Pair of points defining the line.

    Returns:
        float: Perpendicular distance from the point to the line.
    """
    start, end = line

    # Handle degenerate case
    if start == end:
        return point_to_point(p, start)

    # Implicit form a*x + b*y + c = 0
    a = start[1] - end[1]
    b = end[0] - start[0]
    c = start[0] * end[1] - end[0] * start[1]

    norm = math.sqrt(a * a + b * b)

    # Endpoints too close for the norm to be representable
    if norm == 0.0:
        return point_to_point(p, start)

    return abs((a * p[0] + b * p[1] + c) / norm)
