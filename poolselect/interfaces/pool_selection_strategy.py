"""
PoolSelectionStrategy: Pluggable policy for choosing a target pool.

The migration/placement layer hands a list of candidate pools, each with
the cost snapshot it last reported, and the strategy picks one of them.
Different deployments need different strategies:
- Proportional: Random choice weighted by available space (load spreading)
- Best: Always the pool with the most available space
- Round-robin: Cycle through candidates ignoring cost

This interface enables swapping strategies without touching the caller.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class CapacitySnapshot:
    """Space figures reported by a pool."""
    free_bytes: int             # Unambiguously unused bytes
    removable_bytes: float      # Bytes held by evictable content
    breakeven: float            # Decay parameter (0 disables decay)
    lru_seconds: float          # Age of the least recently used removable byte
    gap_bytes: int              # Spare space a pool must keep

    def __post_init__(self):
        if self.free_bytes < 0:
            raise ValueError(f"free_bytes must be non-negative: {self.free_bytes}")
        if self.removable_bytes < 0:
            raise ValueError(f"removable_bytes must be non-negative: {self.removable_bytes}")
        if self.breakeven < 0:
            raise ValueError(f"breakeven must be non-negative: {self.breakeven}")
        if self.lru_seconds < 0:
            raise ValueError(f"lru_seconds must be non-negative: {self.lru_seconds}")
        if self.gap_bytes < 0:
            raise ValueError(f"gap_bytes must be non-negative: {self.gap_bytes}")


@dataclass(frozen=True)
class LoadSnapshot:
    """Write load reported by a pool."""
    mover_cost_factor: float    # Sensitivity of the pool to concurrent writers
    writers: int                # Active write movers

    def __post_init__(self):
        if self.mover_cost_factor < 0:
            raise ValueError(f"mover_cost_factor must be non-negative: {self.mover_cost_factor}")
        if self.writers < 0:
            raise ValueError(f"writers must be non-negative: {self.writers}")


@dataclass(frozen=True)
class PoolCostInfo:
    """Cost snapshot of a single pool."""
    capacity: CapacitySnapshot
    load: LoadSnapshot


@dataclass(frozen=True)
class PoolCandidate:
    """A pool that could receive the data."""
    name: str
    cost: Optional[PoolCostInfo] = None   # None if the pool did not report


class PoolSelectionStrategy(ABC):
    """
    Pluggable policy for selecting one pool out of a list of candidates.

    The migration module calls this whenever a replica has to be placed and
    more than one pool qualifies. The strategy only chooses; copying the
    data is up to the caller.
    """

    @abstractmethod
    def select(self, candidates: List[PoolCandidate]) -> PoolCandidate:
        """
        Select the pool to use.

        Args:
            candidates: Non-empty list of candidate pools

        Returns:
            One element of candidates

        Raises:
            ValueError: If candidates is empty

        Constraints:
            - Must return an element of the list, never a copy
            - Candidates without cost info stay in the list and must be
              tolerated

        Example (Best):
            if not candidates:
                raise ValueError("No pools to select from")
            return max(candidates, key=lambda c: available(c))
        """
        pass
