"""
Plugin loading: resolve strategy classes from dotted paths.

The configured path (plugins.selection_strategy) names a class, e.g.
"poolselect.policies.proportional.ProportionalPoolSelectionStrategy".
"""

import importlib
import logging
from typing import Optional

from poolselect.interfaces import PoolSelectionStrategy

logger = logging.getLogger(__name__)


def load_strategy(path: Optional[str] = None, **kwargs) -> PoolSelectionStrategy:
    """
    Import and instantiate a pool selection strategy.

    Args:
        path: Dotted class path (defaults to plugins.selection_strategy)
        **kwargs: Passed to the strategy constructor

    Raises:
        ValueError: If path is not a dotted class path
        ImportError: If the module cannot be imported
        TypeError: If the class is not a PoolSelectionStrategy
    """
    if path is None:
        from poolselect.config import get_config

        path = get_config().plugins.selection_strategy

    module_name, _, class_name = path.rpartition(".")
    if not module_name or not class_name:
        raise ValueError(f"Not a dotted class path: {path!r}")

    module = importlib.import_module(module_name)
    try:
        cls = getattr(module, class_name)
    except AttributeError:
        raise ImportError(f"Module {module_name} has no attribute {class_name}") from None

    if not isinstance(cls, type) or not issubclass(cls, PoolSelectionStrategy):
        raise TypeError(f"{path} is not a PoolSelectionStrategy")

    logger.info(f"Loading pool selection strategy {path}")
    return cls(**kwargs)
