"""
Pool selection policies.

- ProportionalPoolSelectionStrategy: Random choice weighted by available space
"""

from .proportional import (
    ProportionalPoolSelectionStrategy,
    estimate_available,
    weighted_available,
)

__all__ = [
    "ProportionalPoolSelectionStrategy",
    "estimate_available",
    "weighted_available",
]
