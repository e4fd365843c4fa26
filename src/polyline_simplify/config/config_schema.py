# polyline_simplify/config/config_schema.py
"""
Configuration schemas for polyline simplification.

This module defines the structured configuration schema used with Hydra
for validating simplifier settings.
"""

from dataclasses import dataclass

from hydra.core.config_store import ConfigStore


@dataclass
class SimplifyConfig:
    """
    Configuration for polyline simplification.

    This selects the simplification algorithm and its tolerance.
    """

    algorithm: str = "douglas_peucker"
    """Simplification algorithm to use (see list_simplifiers())."""

    epsilon: float = 0.0
    """Distance tolerance; interior points farther than this are kept."""


# Register configs with Hydra
cs = ConfigStore.instance()
cs.store(name="simplify_schema", node=SimplifyConfig)
