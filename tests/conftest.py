"""Pytest fixtures for polyline_simplify tests."""

from dataclasses import dataclass

import pytest
import numpy as np


# ============================================================================
# Element Fixtures
# ============================================================================

@dataclass(frozen=True)
class TrackPoint:
    """GPS fix with a payload beyond its coordinate."""

    x: float
    y: float
    timestamp: int

    def to_point(self):
        return (self.x, self.y)


@pytest.fixture
def track_point_cls():
    """The TrackPoint element class."""
    return TrackPoint


@pytest.fixture
def track():
    """A short GPS track whose middle fix lies on the chord."""
    return [
        TrackPoint(0.0, 0.0, 100),
        TrackPoint(1.0, 1.0, 101),
        TrackPoint(2.0, 2.0, 102),
        TrackPoint(3.0, 1.0, 103),
    ]


# ============================================================================
# Polyline Fixtures
# ============================================================================

@pytest.fixture
def zigzag():
    """Polyline that keeps all points at a tight tolerance."""
    return [(0.0, 2.0), (1.0, 1.0), (3.0, 0.0), (5.0, 1.0)]


@pytest.fixture
def closed_square():
    """Closed loop around a 2x2 square with midpoints on every side."""
    return [
        (0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (2.0, 1.0), (2.0, 2.0),
        (1.0, 2.0), (0.0, 2.0), (0.0, 1.0), (0.0, 0.0),
    ]


@pytest.fixture
def complex_curve():
    """Eight point curve with mixed deviations."""
    return [
        (3.5, 21.25), (7.3, 12.0), (23.2, 3.1), (37.2, 12.07),
        (54.6, 18.15), (62.2, 16.45), (71.5, 9.7), (101.3, 21.1),
    ]


@pytest.fixture
def sample_polylines(zigzag, closed_square, complex_curve):
    """A set of polylines for property checks."""
    wave = [(float(i), float(np.sin(i / 3.0)) * 4.0) for i in range(40)]
    return [zigzag, closed_square, complex_curve, wave]


@pytest.fixture
def payload_array():
    """Polyline array with a third payload column."""
    return np.array([
        [0.0, 0.0, 10.0],
        [1.0, 0.0, 11.0],
        [2.0, 0.0, 12.0],
        [2.0, 1.0, 13.0],
        [2.0, 2.0, 14.0],
    ])
