# polyline_simplify/simplifiers/simplifier.py
"""
Main simplifier interface for polyline simplification.

This module provides the Simplifier class, which applies a simplification
strategy to one polyline or to a batch of polylines of varying lengths and
reports how many points were removed.
"""

import logging
from typing import Any, Iterable, List

import numpy as np

from polyline_simplify.simplifiers.strategy import SimplifierStrategy

# Configure module logger
logger = logging.getLogger(__name__)


class Simplifier:
    """
    Main interface for simplifying polyline data.

    Polylines are processed sequentially; each one is an array with shape
    [points, D] whose first two columns are the coordinates.
    """

    def __init__(self, strategy: SimplifierStrategy) -> None:
        """
        Initialize the simplifier.

        Args:
            strategy: The simplification strategy to use.
        """
        self.strategy = strategy

    def simplify(self, polyline: Any, **kwargs: Any) -> np.ndarray:
        """
        Simplify a single polyline.

        Args:
            polyline: Array-like of points with shape [points, D].
            **kwargs: Additional parameters passed to the strategy.

        Returns:
            np.ndarray: The simplified polyline.
        """
        simplified = self.strategy.simplify_polyline(polyline, **kwargs)
        logger.debug(f"{self.strategy.name}: {len(polyline)} -> {self._kept_count(simplified)} points")
        return simplified

    def simplify_many(self, polylines: Iterable[Any], **kwargs: Any) -> List[np.ndarray]:
        """
        Simplify a batch of polylines.

        Args:
            polylines: Iterable of array-likes, each with shape [points, D].
                Lengths may differ between polylines.
            **kwargs: Additional parameters passed to the strategy.

        Returns:
            List[np.ndarray]: Simplified polylines in input order.
        """
        results = []
        total_in = 0
        total_out = 0

        for polyline in polylines:
            simplified = self.simplify(polyline, **kwargs)
            total_in += len(polyline)
            total_out += self._kept_count(simplified)
            results.append(simplified)

        logger.info(
            f"Simplified {len(results)} polylines using {self.strategy.name}: "
            f"{total_in} -> {total_out} points"
        )
        return results

    @staticmethod
    def _kept_count(simplified: np.ndarray) -> int:
        # A boolean result is a mask over the input rather than the kept rows
        if simplified.dtype == bool:
            return int(np.count_nonzero(simplified))
        return len(simplified)
