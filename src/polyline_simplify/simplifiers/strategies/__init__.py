"""
Simplification strategies implementation.

Importing this subpackage registers every strategy it contains.
"""

from .douglas_peucker import DouglasPeuckerStrategy

__all__ = [
    'DouglasPeuckerStrategy',
]
