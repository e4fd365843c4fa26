# polyline_simplify/simplifiers/rdp.py
"""
Ramer-Douglas-Peucker polyline simplification.

The engine walks an explicit stack of index ranges instead of recursing, so
long polylines cannot exhaust the interpreter's recursion limit. A range whose
interior stays within ``epsilon`` of the chord between its endpoints collapses
to those endpoints; any other range is split at its farthest interior point.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from polyline_simplify.geometry.distance import point_to_line
from polyline_simplify.geometry.types import PointKey, T, as_point

# Configure module logger
logger = logging.getLogger(__name__)


def ramer_douglas_peucker_indices(
        points: Sequence[T],
        epsilon: float,
        key: Optional[PointKey] = None
) -> List[int]:
    """
    Compute the indices of the elements kept by the simplification.

    Args:
        points: Ordered elements of the polyline.
        epsilon: Inclusive tolerance; interior points farther than this from
            the chord of their range are kept.
        key: Optional projection from an element to its (x, y) coordinate.

    Returns:
        List[int]: Kept indices in ascending order. The first and last index
        are always present when the input has at least two elements.
    """
    length = len(points)
    if length < 3:
        return list(range(length))

    coords = [as_point(element, key) for element in points]

    stack: List[Tuple[int, int]] = [(0, length - 1)]
    result: List[int] = []
    last_end_index = -1

    while stack:
        start_index, end_index = stack.pop()
        line = (coords[start_index], coords[end_index])

        # Leftmost index wins ties. Starting below zero means a split always
        # lands on an interior index, even for a negative epsilon.
        max_distance = -np.inf
        max_index = start_index
        for i in range(start_index + 1, end_index):
            distance = point_to_line(coords[i], line)
            if distance > max_distance:
                max_distance = distance
                max_index = i

        if max_distance > epsilon:
            # Left half is popped first, so emission stays in index order
            stack.append((max_index, end_index))
            stack.append((start_index, max_index))
        else:
            if last_end_index != start_index:
                result.append(start_index)
            result.append(end_index)
            last_end_index = end_index

    logger.debug(f"Simplified {length} points to {len(result)} with epsilon={epsilon}")
    return result


def ramer_douglas_peucker(
        points: Sequence[T],
        epsilon: float,
        key: Optional[PointKey] = None
) -> List[T]:
    """
    Simplify a polyline with the Ramer-Douglas-Peucker algorithm.

    Elements are kept or dropped, never modified, so any payload they carry
    survives untouched.

    Args:
        points: Ordered elements of the polyline.
        epsilon: Inclusive distance tolerance.
        key: Optional projection from an element to its (x, y) coordinate.

    Returns:
        List[T]: The kept elements, in their original order.

    Examples:
        >>> ramer_douglas_peucker([(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)], 0.5)
        [(1.0, 1.0), (3.0, 3.0)]
    """
    return [points[i] for i in ramer_douglas_peucker_indices(points, epsilon, key)]


def ramer_douglas_peucker_mask(
        points: Sequence[T],
        epsilon: float,
        key: Optional[PointKey] = None
) -> np.ndarray:
    """
    Compute a boolean mask of the elements kept by the simplification.

    Args:
        points: Ordered elements of the polyline.
        epsilon: Inclusive distance tolerance.
        key: Optional projection from an element to its (x, y) coordinate.

    Returns:
        np.ndarray: Boolean array of ``len(points)`` entries, True where kept.
    """
    mask = np.zeros(len(points), dtype=bool)
    mask[ramer_douglas_peucker_indices(points, epsilon, key)] = True
    return mask
