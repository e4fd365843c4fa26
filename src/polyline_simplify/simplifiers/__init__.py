"""
Polyline simplification implementations.

This package provides the Ramer-Douglas-Peucker engine for arbitrary element
sequences, and a strategy layer for simplifying polylines held as numpy arrays.
"""

# Import the engine
from .rdp import ramer_douglas_peucker, ramer_douglas_peucker_indices, ramer_douglas_peucker_mask

# Import the base classes
from .strategy import SimplifierStrategy
from .simplifier import Simplifier

# Import the registry functions
from .registry import register_simplifier, get_simplifier, build_simplifier, list_simplifiers

# Import all strategies to register them
from .strategies import DouglasPeuckerStrategy

__all__ = [
    "ramer_douglas_peucker",
    "ramer_douglas_peucker_indices",
    "ramer_douglas_peucker_mask",
    "Simplifier",
    "SimplifierStrategy",
    "register_simplifier",
    "get_simplifier",
    "build_simplifier",
    "list_simplifiers",
    "DouglasPeuckerStrategy",
]
