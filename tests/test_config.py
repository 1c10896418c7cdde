"""
Unit tests for poolselect configuration.
"""

import pytest


def test_configuration_defaults():
    """Test SelectionConfig defaults."""
    from poolselect.config import SelectionConfig

    config = SelectionConfig()

    assert config.random.seed is None
    assert config.plugins.selection_strategy == \
        "poolselect.policies.proportional.ProportionalPoolSelectionStrategy"


def test_configuration_from_dict():
    """Test loading configuration from dict."""
    from poolselect.config import SelectionConfig

    config = SelectionConfig.from_dict({
        'random': {'seed': 42},
        'plugins': {'selection_strategy': 'mypkg.strategies.BestPool'},
    })
    assert config.random.seed == 42
    assert config.plugins.selection_strategy == 'mypkg.strategies.BestPool'
    assert config.to_dict() == {
        'random': {'seed': 42},
        'plugins': {'selection_strategy': 'mypkg.strategies.BestPool'},
    }


def test_configuration_validation():
    """Test configuration validation."""
    from poolselect.config import SelectionConfig, RandomConfig, PluginConfig

    # Valid config should not raise
    SelectionConfig()

    with pytest.raises(ValueError):
        RandomConfig(seed=-1)
    with pytest.raises(ValueError):
        PluginConfig(selection_strategy="nodots")
    with pytest.raises(ValueError):
        SelectionConfig.from_dict({'scheduler': {}})


def test_configuration_from_yaml(tmp_path):
    """Test loading configuration from a YAML file."""
    from poolselect.config import SelectionConfig

    path = tmp_path / "poolselect.yaml"
    path.write_text("random:\n  seed: 7\n")

    config = SelectionConfig.from_yaml(path)
    assert config.random.seed == 7
    assert config.plugins.selection_strategy.endswith("ProportionalPoolSelectionStrategy")


def test_empty_yaml_gives_defaults(tmp_path):
    """An empty file is a valid configuration."""
    from poolselect.config import SelectionConfig

    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert SelectionConfig.from_yaml(path) == SelectionConfig()


def test_non_mapping_yaml_rejected(tmp_path):
    """Top-level YAML must be a mapping."""
    from poolselect.config import SelectionConfig

    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        SelectionConfig.from_yaml(path)


def test_missing_yaml_raises(tmp_path):
    """A missing configuration file is reported, not ignored."""
    from poolselect.config import SelectionConfig

    with pytest.raises(FileNotFoundError):
        SelectionConfig.from_yaml(tmp_path / "missing.yaml")


def test_config_singleton():
    """Test that config uses singleton pattern."""
    from poolselect.config import get_config, set_config, SelectionConfig

    # Get default
    config1 = get_config()
    config2 = get_config()

    # Should be same instance
    assert config1 is config2

    # Can set new config
    new_config = SelectionConfig()
    set_config(new_config)
    config3 = get_config()
    assert config3 is new_config


def test_config_from_environment(tmp_path, monkeypatch):
    """POOLSELECT_CONFIG points get_config() at a YAML file."""
    from poolselect.config import CONFIG_ENV_VAR, get_config

    path = tmp_path / "env.yaml"
    path.write_text("random:\n  seed: 11\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert get_config().random.seed == 11


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
