"""Unit tests for SequencerConfig."""

import pytest

from dsviz.core.config import SequencerConfig
from dsviz.core.errors import ConfigError


def test_defaults():
    """Test default phase timings."""
    config = SequencerConfig()

    assert (config.prepare_ms, config.mutate_ms, config.confirm_ms) == (1000, 1000, 1000)
    assert (config.find_prepare_ms, config.find_confirm_ms) == (1500, 2000)
    assert config.peek_confirm_ms == 2000
    assert (config.traversal_mutate_ms, config.traversal_confirm_ms) == (2000, 2000)
    assert config.hash_table_capacity == 10


def test_seconds_applies_time_scale():
    """Test millisecond holds are scaled into seconds."""
    assert SequencerConfig().seconds(1500) == 1.5
    assert SequencerConfig(time_scale=0.5).seconds(1000) == 0.5
    assert SequencerConfig(time_scale=0).seconds(2000) == 0


@pytest.mark.parametrize(
    "overrides",
    [{"prepare_ms": -1}, {"time_scale": "fast"}, {"confirm_ms": True}, {"hash_table_capacity": 0}],
)
def test_invalid_values(overrides):
    """Test invalid settings raise ConfigError."""
    with pytest.raises(ConfigError):
        SequencerConfig(**overrides)


def test_from_dict_rejects_unknown_keys():
    """Test from_dict names unknown settings."""
    with pytest.raises(ConfigError, match="prepare_seconds"):
        SequencerConfig.from_dict({"prepare_seconds": 1})


def test_round_trip_dict():
    """Test to_dict output is accepted by from_dict."""
    config = SequencerConfig(mutate_ms=250)
    assert SequencerConfig.from_dict(config.to_dict()) == config


def test_from_toml(tmp_path):
    """Test loading the [sequencer] table of a TOML file."""
    path = tmp_path / "dsviz.toml"
    path.write_text("[sequencer]\nprepare_ms = 200\ntime_scale = 0.5\n", encoding="utf-8")

    config = SequencerConfig.from_toml(path)

    assert config.prepare_ms == 200
    assert config.time_scale == 0.5
    assert config.mutate_ms == 1000


def test_from_toml_without_table(tmp_path):
    """Test a file without [sequencer] yields defaults."""
    path = tmp_path / "dsviz.toml"
    path.write_text("[other]\nx = 1\n", encoding="utf-8")

    assert SequencerConfig.from_toml(path) == SequencerConfig()


def test_from_toml_errors(tmp_path):
    """Test missing files and invalid TOML."""
    with pytest.raises(FileNotFoundError):
        SequencerConfig.from_toml(tmp_path / "missing.toml")

    bad = tmp_path / "bad.toml"
    bad.write_text("[sequencer\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        SequencerConfig.from_toml(bad)
