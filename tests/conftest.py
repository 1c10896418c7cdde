import pytest


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Start every test with fresh config and random source singletons."""
    from poolselect.config import CONFIG_ENV_VAR, reset_config
    from poolselect.random_source import reset_random_source

    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config()
    reset_random_source()
    yield
    reset_config()
    reset_random_source()


@pytest.fixture
def seeded_source():
    """Deterministic random source for statistical tests."""
    from poolselect.random_source import RandomSource

    return RandomSource(seed=1234)


@pytest.fixture
def make_candidate():
    """Build a PoolCandidate from plain numbers."""
    from poolselect.interfaces import (
        CapacitySnapshot,
        LoadSnapshot,
        PoolCandidate,
        PoolCostInfo,
    )

    def _make(name, free=0, removable=0.0, breakeven=0.0, lru=0.0, gap=0,
              mover_cost_factor=0.0, writers=0):
        capacity = CapacitySnapshot(
            free_bytes=free,
            removable_bytes=removable,
            breakeven=breakeven,
            lru_seconds=lru,
            gap_bytes=gap,
        )
        load = LoadSnapshot(mover_cost_factor=mover_cost_factor, writers=writers)
        return PoolCandidate(name=name, cost=PoolCostInfo(capacity, load))

    return _make
