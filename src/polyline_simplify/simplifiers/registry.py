from dataclasses import is_dataclass
from typing import Any, Dict, Type

from omegaconf import DictConfig, OmegaConf

from polyline_simplify.config import SimplifyConfig
from polyline_simplify.utils.registry import Registry
from .strategy import SimplifierStrategy
from .simplifier import Simplifier

# Create a registry for simplifier strategies
strategy_registry = Registry[SimplifierStrategy]("SimplifierStrategy")

# Alias for registering strategies with a decorator
register_simplifier = strategy_registry.register


def get_simplifier(name: str, config: Any = None) -> Simplifier:
    """
    Get a simplifier by name.

    Args:
        name: Name of the simplifier strategy.
        config: Configuration parameters as a dict, a DictConfig or a
            SimplifyConfig. Defaults to an empty configuration.

    Returns:
        Simplifier: Simplifier using the requested strategy.

    Raises:
        ValueError: If the strategy is not found.
    """
    strategy_cls = strategy_registry.get(name)

    if config is None:
        config = {}
    elif is_dataclass(config) or isinstance(config, DictConfig):
        config = OmegaConf.to_container(OmegaConf.structured(config), resolve=True)

    return Simplifier(strategy_cls(config))


def build_simplifier(cfg: Any) -> Simplifier:
    """
    Build a simplifier from a configuration validated against SimplifyConfig.

    Args:
        cfg: Dict, DictConfig or SimplifyConfig. Missing fields take the
            schema defaults.

    Returns:
        Simplifier: Simplifier for ``cfg.algorithm``.

    Raises:
        omegaconf.errors.ValidationError: If a field has the wrong type.
        omegaconf.errors.ConfigKeyError: If the config has unknown fields.
        ValueError: If the algorithm is not registered.
    """
    merged = OmegaConf.merge(OmegaConf.structured(SimplifyConfig), cfg)
    return get_simplifier(merged.algorithm, merged)


def list_simplifiers() -> Dict[str, Type[SimplifierStrategy]]:
    """
    Get a dictionary of all registered simplifier strategies.

    Returns:
        Dict[str, Type[SimplifierStrategy]]: Dictionary mapping names to classes.
    """
    return strategy_registry.list()
