"""
poolselect extensibility interfaces.

These types define the contract between the placement layer and the
pluggable pool selection strategies:
- CapacitySnapshot / LoadSnapshot: Per-pool cost figures
- PoolCandidate: A pool plus its optional cost snapshot
- PoolSelectionStrategy: Policy for picking one pool
"""

from .pool_selection_strategy import (
    CapacitySnapshot,
    LoadSnapshot,
    PoolCostInfo,
    PoolCandidate,
    PoolSelectionStrategy,
)

__all__ = [
    "CapacitySnapshot",
    "LoadSnapshot",
    "PoolCostInfo",
    "PoolCandidate",
    "PoolSelectionStrategy",
]
