"""Tests for evaluator configuration loading."""
import json
from pathlib import Path

import jsonschema
import pytest

from draw_poker.config.loader import CONFIG_ENV_VAR, EvaluatorConfig, load_config
from draw_poker.core.exceptions import ConfigError
from draw_poker.evaluation.evaluator import HandEvaluator

DATA_DIR = Path(__file__).parents[2] / "data"


@pytest.fixture
def schema():
    """Load the JSON schema for evaluator configurations."""
    with open(DATA_DIR / "schemas" / "evaluator_config.json") as f:
        return json.load(f)


def test_sample_configs_match_schema(schema):
    """Test that all sample configurations in data/configs are valid."""
    config_files = list((DATA_DIR / "configs").glob("*.json"))
    assert len(config_files) > 0, "No sample configuration files found"

    for config_file in config_files:
        with open(config_file) as f:
            config = json.load(f)

        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.exceptions.ValidationError as e:
            pytest.fail(f"Schema validation failed for {config_file.name}: {e}")

        EvaluatorConfig.from_file(config_file)


def test_schema_rejects_unknown_fields(schema):
    """The schema and the loader both refuse unknown keys."""
    data = {"players": 3, "jokers": True}
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(instance=data, schema=schema)
    with pytest.raises(ConfigError, match="jokers"):
        EvaluatorConfig.from_dict(data)


def test_defaults():
    """Test default configuration values."""
    config = EvaluatorConfig()
    assert config.pre_shuffle is True
    assert config.seed is None
    assert config.players == 2
    assert config.log_level == "INFO"


def test_from_json():
    """Test loading values from JSON."""
    config = EvaluatorConfig.from_json('{"seed": 7, "players": 4, "log_level": "debug"}')
    assert config.seed == 7
    assert config.players == 4
    assert config.log_level == "DEBUG"
    assert config.to_dict() == {"pre_shuffle": True, "seed": 7, "players": 4, "log_level": "DEBUG"}


@pytest.mark.parametrize("json_str", [
    "not json",
    "[1, 2]",
    '{"players": 0}',
    '{"players": 11}',
    '{"players": "two"}',
    '{"seed": "abc"}',
    '{"seed": true}',
    '{"pre_shuffle": "yes"}',
    '{"log_level": "LOUD"}',
])
def test_from_json_invalid(json_str):
    """Test invalid configurations are rejected."""
    with pytest.raises(ConfigError):
        EvaluatorConfig.from_json(json_str)


def test_load_config_defaults(monkeypatch):
    """Without a path or environment variable the defaults are used."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_config() == EvaluatorConfig()


def test_load_config_from_path():
    """Test loading a sample file by path."""
    config = load_config(DATA_DIR / "configs" / "repeatable.json")
    assert config.seed == 1234
    assert config.players == 4


def test_load_config_from_environment(monkeypatch, tmp_path):
    """The environment variable names the file when no path is given."""
    config_file = tmp_path / "config.json"
    config_file.write_text('{"pre_shuffle": false, "players": 3}')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

    config = load_config()
    assert config.pre_shuffle is False
    assert config.players == 3


def test_load_config_missing_file(tmp_path):
    """Test a missing file is reported."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.json")


def test_seeded_config_gives_repeatable_deck():
    """Evaluators built from the same seed deal the same cards."""
    config = EvaluatorConfig(seed=99)
    first = HandEvaluator(config=config).deal_player_hand()
    second = HandEvaluator(config=config).deal_player_hand()
    assert [c.id for c in first] == [c.id for c in second]


def test_unshuffled_config():
    """pre_shuffle false leaves the deck in order."""
    evaluator = HandEvaluator(config=EvaluatorConfig(pre_shuffle=False))
    assert [str(c) for c in evaluator.deal_player_hand()] == ["AS", "KS", "QS", "JS", "10S"]
