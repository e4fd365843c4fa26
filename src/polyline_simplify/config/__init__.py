# polyline_simplify/config/__init__.py
"""
Configuration schemas for the polyline simplification package.

This subpackage contains the structured configuration schema used with
Hydra for validating simplifier settings.
"""

from polyline_simplify.config.config_schema import SimplifyConfig

__all__ = [
    "SimplifyConfig",
]
