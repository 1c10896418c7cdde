"""
poolselect: weighted random selection of storage pools.

Chooses a target pool for placing or migrating data with probability
proportional to each pool's available space, where removable space decays
with age and write load discounts the result.
"""

from poolselect.interfaces import (
    CapacitySnapshot,
    LoadSnapshot,
    PoolCandidate,
    PoolCostInfo,
    PoolSelectionStrategy,
)
from poolselect.policies import ProportionalPoolSelectionStrategy

__version__ = "0.1.0"

__all__ = [
    "CapacitySnapshot",
    "LoadSnapshot",
    "PoolCandidate",
    "PoolCostInfo",
    "PoolSelectionStrategy",
    "ProportionalPoolSelectionStrategy",
]
