"""
poolselect configuration.

Nested dataclasses with dict/YAML loading and a process-wide instance:

    random:
      seed: 42
    plugins:
      selection_strategy: poolselect.policies.proportional.ProportionalPoolSelectionStrategy

Per-pool policy knobs (breakeven, gap, mover cost factor) travel with the
cost snapshots and are deliberately not part of this configuration.
"""

import logging
import os
import threading
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "POOLSELECT_CONFIG"
DEFAULT_SELECTION_STRATEGY = (
    "poolselect.policies.proportional.ProportionalPoolSelectionStrategy"
)


@dataclass
class RandomConfig:
    """Shared random source settings."""
    seed: Optional[int] = None          # None seeds from OS entropy

    def __post_init__(self):
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"random.seed must be non-negative, got {self.seed}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RandomConfig":
        seed = data.get("seed")
        return cls(seed=int(seed) if seed is not None else None)


@dataclass
class PluginConfig:
    """Dotted paths of pluggable components."""
    selection_strategy: str = DEFAULT_SELECTION_STRATEGY

    def __post_init__(self):
        if not self.selection_strategy or "." not in self.selection_strategy:
            raise ValueError(
                f"plugins.selection_strategy must be a dotted path, "
                f"got {self.selection_strategy!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PluginConfig":
        return cls(
            selection_strategy=data.get("selection_strategy", DEFAULT_SELECTION_STRATEGY)
        )


@dataclass
class SelectionConfig:
    """Top-level configuration."""
    random: RandomConfig = field(default_factory=RandomConfig)
    plugins: PluginConfig = field(default_factory=PluginConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SelectionConfig":
        data = data or {}
        unknown = set(data) - {"random", "plugins"}
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")
        return cls(
            random=RandomConfig.from_dict(data.get("random") or {}),
            plugins=PluginConfig.from_dict(data.get("plugins") or {}),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SelectionConfig":
        import yaml

        path = Path(path)
        with path.open() as handle:
            data = yaml.safe_load(handle)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"{path}: configuration must be a mapping")
        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Global singleton instance
_global_config: Optional[SelectionConfig] = None
_config_lock = threading.Lock()


def get_config() -> SelectionConfig:
    """Get or create the process-wide configuration (thread-safe)."""
    global _global_config

    if _global_config is None:
        with _config_lock:
            if _global_config is None:
                path = os.environ.get(CONFIG_ENV_VAR)
                _global_config = SelectionConfig.from_yaml(path) if path else SelectionConfig()

    return _global_config


def set_config(config: SelectionConfig) -> None:
    """Replace the process-wide configuration."""
    global _global_config

    with _config_lock:
        _global_config = config


def reset_config() -> None:
    """Drop the process-wide configuration (for testing)."""
    global _global_config

    with _config_lock:
        _global_config = None
