"""
Shared random source for selection strategies.

numpy Generators are not safe for concurrent use, so every draw goes
through a lock. The process keeps one source; tests inject a seeded one
with set_random_source().
"""

import logging
import threading
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class RandomSource:
    """Thread-safe uniform [0, 1) generator."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()
        logger.debug(f"RandomSource initialized (seed={seed})")

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def random(self) -> float:
        """One uniform draw from [0, 1)."""
        with self._lock:
            return float(self._rng.random())


# Global singleton instance
_global_source: Optional[RandomSource] = None
_source_lock = threading.Lock()


def get_random_source() -> RandomSource:
    """Get or create the process-wide random source (thread-safe)."""
    global _global_source

    if _global_source is None:
        with _source_lock:
            if _global_source is None:
                from .config import get_config

                _global_source = RandomSource(seed=get_config().random.seed)

    return _global_source


def set_random_source(source: RandomSource) -> None:
    """Replace the process-wide random source."""
    global _global_source

    with _source_lock:
        _global_source = source


def reset_random_source() -> None:
    """Drop the process-wide random source (for testing)."""
    global _global_source

    with _source_lock:
        _global_source = None
