"""
poolselect command line.

Loads candidate pools from a YAML or JSON file, prints their weights and
runs one or more selections:

    python -m poolselect pools.yaml --trials 10000 --seed 7

Candidate file format:

    pools:
      - name: pool-a
        space: {free: 1000, removable: 500, breakeven: 0.5, lru: 86400, gap: 100}
        load: {mover_cost_factor: 0.5, writers: 2}
      - name: pool-b          # no cost info, weight 0
"""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

from poolselect.interfaces import (
    CapacitySnapshot,
    LoadSnapshot,
    PoolCandidate,
    PoolCostInfo,
)

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _integer(section: Dict[str, Any], key: str) -> int:
    value = section.get(key, 0)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be a whole number, got {value!r}")
    return value


def _real(section: Dict[str, Any], key: str) -> float:
    value = section.get(key, 0.0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return float(value)


def _parse_candidate(entry: Any) -> PoolCandidate:
    if not isinstance(entry, dict) or "name" not in entry:
        raise ValueError(f"Pool entry must be a mapping with a name: {entry!r}")

    name = str(entry["name"])
    space = entry.get("space")
    load = entry.get("load")
    if space is None or load is None:
        return PoolCandidate(name=name)
    if not isinstance(space, dict) or not isinstance(load, dict):
        raise ValueError(f"Pool {name}: space and load must be mappings")

    capacity = CapacitySnapshot(
        free_bytes=_integer(space, "free"),
        removable_bytes=_real(space, "removable"),
        breakeven=_real(space, "breakeven"),
        lru_seconds=_real(space, "lru"),
        gap_bytes=_integer(space, "gap"),
    )
    load_info = LoadSnapshot(
        mover_cost_factor=_real(load, "mover_cost_factor"),
        writers=_integer(load, "writers"),
    )
    return PoolCandidate(name=name, cost=PoolCostInfo(capacity, load_info))


def load_candidates(path: Path) -> List[PoolCandidate]:
    """Read candidate pools from a YAML or JSON file."""
    with path.open() as handle:
        if path.suffix == ".json":
            data = json.load(handle)
        else:
            import yaml

            try:
                data = yaml.safe_load(handle)
            except yaml.YAMLError as e:
                raise ValueError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("pools"), list):
        raise ValueError(f"{path}: expected a mapping with a 'pools' list")
    return [_parse_candidate(entry) for entry in data["pools"]]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poolselect",
        description="Weighted random pool selection",
    )
    parser.add_argument('candidates', type=Path, help='YAML or JSON file listing candidate pools')
    parser.add_argument('--config', type=Path, help='YAML configuration file')
    parser.add_argument('--pattern', help='Only consider pools whose name matches this glob')
    parser.add_argument('--trials', type=int, default=1, help='Number of selections (default: 1)')
    parser.add_argument('--seed', type=int, help='Seed for the shared random source')
    parser.add_argument('--log-level', default='warning', help='Logging level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.trials < 1:
        parser.error("--trials must be at least 1")

    from poolselect.config import SelectionConfig, get_config, set_config
    from poolselect.glob import filter_candidates
    from poolselect.plugins import load_strategy
    from poolselect.policies.proportional import estimate_available
    from poolselect.random_source import RandomSource, set_random_source

    try:
        if args.config:
            set_config(SelectionConfig.from_yaml(args.config))
        candidates = load_candidates(args.candidates)
    except (OSError, ValueError) as e:
        print(f"poolselect: {e}", file=sys.stderr)
        return 1

    if args.pattern:
        candidates = filter_candidates(candidates, args.pattern)
    if not candidates:
        print("poolselect: no candidate pools", file=sys.stderr)
        return 1

    seed = args.seed if args.seed is not None else get_config().random.seed
    set_random_source(RandomSource(seed=seed))

    # Strategies draw from the process-wide source installed above
    strategy = load_strategy()

    # Custom strategies need not expose weights
    probabilities = None
    if hasattr(strategy, "weights"):
        weights = strategy.weights(candidates)
        total = sum(weights)
        # All-zero weights always pick the first pool
        probabilities = [
            w / total if total > 0 else float(i == 0) for i, w in enumerate(weights)
        ]
        print(f"{'pool':<24} {'available':>16} {'weight':>16} {'probability':>12}")
        for i, candidate in enumerate(candidates):
            available = estimate_available(candidate.cost.capacity) if candidate.cost else 0.0
            print(f"{candidate.name:<24} {available:>16.1f} {weights[i]:>16.1f} "
                  f"{probabilities[i]:>12.4f}")

    if args.trials == 1:
        print(f"\nselected: {strategy.select(candidates).name}")
        return 0

    # Count by position, pool names need not be unique
    position = {id(c): i for i, c in enumerate(candidates)}
    counts = Counter(position[id(strategy.select(candidates))] for _ in range(args.trials))
    print(f"\n{'pool':<24} {'selected':>10} {'frequency':>12} {'expected':>12}")
    for i, candidate in enumerate(candidates):
        expected = f"{probabilities[i]:>12.4f}" if probabilities else f"{'-':>12}"
        print(f"{candidate.name:<24} {counts[i]:>10} {counts[i] / args.trials:>12.4f} {expected}")
    return 0
