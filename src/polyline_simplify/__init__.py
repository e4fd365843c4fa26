# polyline_simplify/__init__.py
"""
Polyline Simplification Package.

This package reduces the number of points in a polyline while keeping its
shape within a caller-supplied tolerance, using the Ramer-Douglas-Peucker
algorithm.

Main components:
- geometry: Point and line types, distance primitives
- simplifiers: The simplification engine and numpy strategy layer
- config: Configuration schema for Hydra integration
- utils: Generic registry
"""

from polyline_simplify.geometry import Point, Line, HasPoint, point_to_point, point_to_line
from polyline_simplify.simplifiers import (
    ramer_douglas_peucker,
    ramer_douglas_peucker_indices,
    ramer_douglas_peucker_mask,
    Simplifier,
    get_simplifier,
    build_simplifier,
    list_simplifiers,
)
from polyline_simplify.config import SimplifyConfig

# Short alias for the main entry point
simplify = ramer_douglas_peucker

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Line",
    "HasPoint",
    "point_to_point",
    "point_to_line",
    "simplify",
    "ramer_douglas_peucker",
    "ramer_douglas_peucker_indices",
    "ramer_douglas_peucker_mask",
    "Simplifier",
    "get_simplifier",
    "build_simplifier",
    "list_simplifiers",
    "SimplifyConfig",
]
