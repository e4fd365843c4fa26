# polyline_simplify/geometry/types.py
"""
Value types shared by the distance primitives and the simplification engine.

A point is a plain ``(x, y)`` tuple of floats and a line is a pair of points.
Elements handed to the engine only need to project to a point; anything else
they carry is payload and is never inspected.
"""

from typing import Any, Callable, Optional, Protocol, Tuple, TypeVar, runtime_checkable

Point = Tuple[float, float]
Line = Tuple[Point, Point]

T = TypeVar('T')

# Projection from an element to its coordinate
PointKey = Callable[[Any], Point]


@runtime_checkable
class HasPoint(Protocol):
    """
    Protocol for elements exposing a 2D coordinate.
    """

    def to_point(self) -> Point:
        ...


def as_point(element: Any, key: Optional[PointKey] = None) -> Point:
    """
    Project an element to its ``(x, y)`` coordinate.

    Args:
        element: A ``HasPoint`` object, or any indexable value whose first two
            items are the x and y coordinates (tuples, lists, numpy rows).
        key: Optional projection overriding both rules above.

    Returns:
        Point: The element's coordinate as a tuple of floats.

    Raises:
        TypeError: If the element cannot be projected.
    """
    if key is not None:
        element = key(element)
    elif isinstance(element, HasPoint):
        element = element.to_point()

    try:
        return float(element[0]), float(element[1])
    except (TypeError, ValueError, IndexError, KeyError) as e:
        raise TypeError(
            f"Cannot project {type(element).__name__} to a 2D point: "
            f"expected a to_point() method or at least two coordinates"
        ) from e
