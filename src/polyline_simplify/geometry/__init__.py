"""
Geometric value types and distance primitives.

This subpackage contains only what the simplification engine needs: point and
line types, the coordinate projection for arbitrary elements, and the
point-to-point and point-to-line distances.
"""

from polyline_simplify.geometry.types import Point, Line, HasPoint, as_point
from polyline_simplify.geometry.distance import point_to_point, point_to_line

__all__ = [
    "Point",
    "Line",
    "HasPoint",
    "as_point",
    "point_to_point",
    "point_to_line",
]
