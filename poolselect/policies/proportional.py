"""
Proportional Pool Selection: Roulette-wheel choice over available space.

Picks a pool with probability proportional to its weighted available
space, so new data spreads over all pools with room instead of piling
onto the single emptiest one.

Available space = free space + decayed removable space, where removable
space decays exponentially with age. Concurrent writers then discount
the result exponentially.

Strategy: Fitness proportionate ("roulette-wheel") selection.
"""

import logging
import math
import threading
from typing import List, Optional

from poolselect.interfaces import (
    CapacitySnapshot,
    PoolCandidate,
    PoolCostInfo,
    PoolSelectionStrategy,
)
from poolselect.random_source import RandomSource, get_random_source

logger = logging.getLogger(__name__)

SECONDS_IN_WEEK = 7 * 24 * 3600.0
LOG2 = math.log(2)


def halflife_seconds(breakeven: float) -> Optional[float]:
    """
    Half-life of removable space for a breakeven value.

    Breakeven is the undecayed fraction of the oldest removable byte when
    it is one week old. Values >= 1.0 come from the older cost model where
    breakeven was a corrective factor; those get a fixed two week
    half-life. Returns None for 0.0 (decay disabled).
    """
    if breakeven >= 1.0:
        return SECONDS_IN_WEEK * 2
    if breakeven > 0.0:
        return SECONDS_IN_WEEK * -LOG2 / math.log(breakeven)
    return None


def decayed_fraction(lru: float, halflife: float) -> float:
    """
    Share of removable space that has decayed, in [0, 1).

    With a = l * ln 2 / T the undecayed share is (1 - e ** -a) / a, so the
    decayed share is (a + expm1(-a)) / a. Below 1e-4 the difference
    cancels badly and the Taylor series a/2 - a**2/6 + a**3/24 is used.
    """
    if lru <= 0:
        return 0.0
    a = lru * LOG2 / halflife
    if a < 1e-4:
        return a / 2 - a * a / 6 + a ** 3 / 24
    return (a + math.expm1(-a)) / a


def estimate_available(space: CapacitySnapshot) -> float:
    """
    Available space of a pool in bytes, 0.0 if it does not exceed the gap.

    Removable bytes are assumed to be spread linearly in age from 0 (the
    youngest) to lru (the oldest), and the x'th byte still counts as
    0.5 ** (age(x) / T) occupied. Integrating over all r removable bytes:

        undecayed = r * T * (1 - 2 ** (-l / T)) / (l * ln 2)

    The decayed remainder r - undecayed is computed directly by
    decayed_fraction() to stay accurate for tiny ages.
    """
    free = float(space.free_bytes)
    removable = float(space.removable_bytes)
    lru = float(space.lru_seconds)
    gap = space.gap_bytes

    halflife = halflife_seconds(space.breakeven)
    if halflife is None:
        # Age is ignored: removable space is simply available
        available = free + removable
        return available if available > gap else 0.0

    # Zero lru: no age information, nothing has decayed
    decayed = removable * decayed_fraction(lru, halflife)
    available = free + decayed

    # Below the gap the pool is full
    return available if available > gap else 0.0


def weighted_available(cost: PoolCostInfo) -> float:
    """
    Available space discounted by write load.

        weighted = available / 2 ** (f * writers)

    1/f is the number of writers it takes to halve the weight; f = 0 makes
    the load irrelevant.
    """
    available = estimate_available(cost.capacity)
    load = cost.load.mover_cost_factor * cost.load.writers
    # Negative exponent underflows to 0.0 instead of overflowing
    return available * 2.0 ** -load


class ProportionalPoolSelectionStrategy(PoolSelectionStrategy):
    """
    Weighted random pool selection.

    Each candidate's weight is its weighted available space (0 for pools
    without cost info). A threshold is drawn uniformly from [0, sum) and the
    first candidate whose running sum reaches it is chosen, so candidate i
    wins with probability weight_i / sum.

    All-zero weights always select the first candidate.
    """

    def __init__(self, config: dict = None, random_source: Optional[RandomSource] = None):
        """Initialize policy."""
        self.config = config or {}
        self._random_source = random_source
        self._stats_lock = threading.Lock()
        self.stats = {
            "selections": 0,
            "zero_weight_selections": 0,
            "fallback_selections": 0,
        }
        logger.info("ProportionalPoolSelectionStrategy initialized")

    def _random(self) -> float:
        source = self._random_source or get_random_source()
        return source.random()

    def get_available(self, space: CapacitySnapshot) -> float:
        return estimate_available(space)

    def get_weighted_available(self, cost: PoolCostInfo) -> float:
        return weighted_available(cost)

    def weights(self, candidates: List[PoolCandidate]) -> List[float]:
        """Selection weight of every candidate, in input order."""
        return [
            weighted_available(c.cost) if c.cost is not None else 0.0
            for c in candidates
        ]

    def select(self, candidates: List[PoolCandidate]) -> PoolCandidate:
        """
        Select a pool with probability proportional to its weight.

        Args:
            candidates: Non-empty list of candidate pools

        Returns:
            The chosen candidate

        Raises:
            ValueError: If candidates is empty
        """
        if not candidates:
            raise ValueError("Cannot select a pool from an empty candidate list")

        available = self.weights(candidates)
        total = sum(available)
        threshold = self._random() * total

        if total == 0.0:
            logger.warning(
                f"All {len(candidates)} candidate pools have zero weight, "
                f"selecting {candidates[0].name}"
            )

        running = 0.0
        for candidate, weight in zip(candidates, available):
            running += weight
            if running >= threshold:
                self._record(zero_weight=total == 0.0)
                logger.debug(
                    f"Selected pool {candidate.name} (weight={weight:.1f}, "
                    f"threshold={threshold:.1f}, total={total:.1f})"
                )
                return candidate

        # Only reachable through rounding at the tail of the running sum
        self._record(fallback=True)
        logger.warning(
            f"Running sum {running!r} never reached threshold {threshold!r}, "
            f"falling back to last pool {candidates[-1].name}"
        )
        return candidates[-1]

    def _record(self, zero_weight: bool = False, fallback: bool = False) -> None:
        with self._stats_lock:
            self.stats["selections"] += 1
            if zero_weight:
                self.stats["zero_weight_selections"] += 1
            if fallback:
                self.stats["fallback_selections"] += 1
