"""
Utility helpers for the polyline simplification package.
"""

from polyline_simplify.utils.registry import Registry

__all__ = [
    "Registry",
]
