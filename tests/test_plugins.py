"""
Unit tests for strategy plugin loading.
"""

import pytest


def test_load_default_strategy():
    """The configured default is the proportional strategy."""
    from poolselect.plugins import load_strategy
    from poolselect.policies import ProportionalPoolSelectionStrategy

    strategy = load_strategy()
    assert isinstance(strategy, ProportionalPoolSelectionStrategy)


def test_load_strategy_passes_kwargs():
    """Constructor arguments reach the strategy."""
    from poolselect.plugins import load_strategy
    from poolselect.random_source import RandomSource

    source = RandomSource(seed=3)
    strategy = load_strategy(
        "poolselect.policies.proportional.ProportionalPoolSelectionStrategy",
        random_source=source,
    )
    assert strategy._random_source is source


def test_load_strategy_from_config():
    """plugins.selection_strategy picks the class."""
    from poolselect.config import SelectionConfig, PluginConfig, set_config
    from poolselect.plugins import load_strategy

    set_config(SelectionConfig(plugins=PluginConfig(selection_strategy="poolselect.glob.Glob")))
    # Glob is importable but not a strategy
    with pytest.raises(TypeError):
        load_strategy()


def test_load_strategy_errors():
    """Malformed or unknown paths are reported."""
    from poolselect.plugins import load_strategy

    with pytest.raises(ValueError):
        load_strategy("NoModule")
    with pytest.raises(ImportError):
        load_strategy("poolselect.no_such_module.Strategy")
    with pytest.raises(ImportError):
        load_strategy("poolselect.policies.proportional.NoSuchStrategy")
    with pytest.raises(TypeError):
        load_strategy("poolselect.policies.proportional.LOG2")


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
