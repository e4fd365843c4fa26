# polyline_simplify/simplifiers/strategy.py
from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np


class SimplifierStrategy(ABC):
    """
    Abstract base class for polyline simplification strategies.

    A strategy defines the core simplification algorithm for a single polyline
    held as a numpy array; batching and logging are left to ``Simplifier``.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the simplification strategy.

        Args:
            config: Configuration parameters for the strategy.
        """
        self.config = config
        self.name = config.get("name", self.__class__.__name__)

    @abstractmethod
    def simplify_polyline(self, polyline: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Simplify a single polyline.

        Args:
            polyline: Array of points with shape [points, D], D >= 2. The first
                two columns are x and y, any further columns are payload.
            **kwargs: Additional parameters specific to the strategy.

        Returns:
            np.ndarray: The kept rows, in their original order.
        """
        pass

    def prepare_input(self, polyline: Any) -> np.ndarray:
        """
        Validate and prepare an input polyline.

        Args:
            polyline: Array-like of points with shape [points, D].

        Returns:
            np.ndarray: The polyline as a numpy array.

        Raises:
            ValueError: If the input shape is invalid.
        """
        polyline = np.asarray(polyline)

        # An empty polyline has no columns to check
        if polyline.size == 0 and polyline.ndim == 1:
            return polyline.reshape(0, 2)

        if polyline.ndim != 2 or polyline.shape[1] < 2:
            raise ValueError(f"Invalid polyline data shape: {polyline.shape}. Expected (N, D) with D >= 2")

        return polyline
