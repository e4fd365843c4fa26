from typing import Any, Dict, Optional
import numpy as np
import logging

from ..strategy import SimplifierStrategy
from ..registry import register_simplifier
from ..rdp import ramer_douglas_peucker_indices

# Configure module logger
logger = logging.getLogger(__name__)


@register_simplifier("douglas_peucker")
class DouglasPeuckerStrategy(SimplifierStrategy):
    """
    Strategy for Ramer-Douglas-Peucker polyline simplification.

    This algorithm keeps the endpoints and recursively keeps the interior
    point farthest from the current chord while it lies more than ``epsilon``
    away, dropping everything flat enough in between.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the Douglas-Peucker strategy.

        Args:
            config: Configuration parameters. May include:
                - 'epsilon': Distance tolerance (defaults to 0.0).
        """
        super().__init__(config)
        self.epsilon = float(config.get("epsilon", 0.0))
        self._check_epsilon(self.epsilon)

    def simplify_polyline(
            self,
            polyline: np.ndarray,
            epsilon: Optional[float] = None,
            return_mask: bool = False,
            **kwargs: Any
    ) -> np.ndarray:
        """
        Simplify a polyline to the rows that exceed the tolerance.

        Args:
            polyline: Array of points with shape [points, D], D >= 2.
            epsilon: Tolerance overriding the configured one for this call.
            return_mask: Return a boolean mask of kept rows instead of the rows.
            **kwargs: Additional parameters (ignored).

        Returns:
            np.ndarray: Kept rows with all their columns, or the boolean mask.

        Raises:
            ValueError: If the polyline shape is invalid.
        """
        polyline = self.prepare_input(polyline)

        if epsilon is None:
            epsilon = self.epsilon
        else:
            self._check_epsilon(epsilon)

        indices = ramer_douglas_peucker_indices(polyline, epsilon)

        if return_mask:
            mask = np.zeros(len(polyline), dtype=bool)
            mask[indices] = True
            return mask

        return polyline[indices]

    @staticmethod
    def _check_epsilon(epsilon: float) -> None:
        # Accepted, but every point will be kept
        if epsilon < 0:
            logger.warning(f"Negative epsilon {epsilon} disables simplification")
