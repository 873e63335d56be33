"""Evaluator configuration loading and parsing."""
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging
import os

from draw_poker.core.exceptions import ConfigError
from draw_poker.evaluation.constants import MAX_PLAYERS

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'DRAW_POKER_CONFIG'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class EvaluatorConfig:
    """
    Settings for building an evaluator and its deck.

    Attributes:
        pre_shuffle: Shuffle the deck when it is created
        seed: Random seed for repeatable deals, None for a random one
        players: Number of hands the command line deals by default
        log_level: Root logging level used by the command line
    """
    pre_shuffle: bool = True
    seed: Optional[int] = None
    players: int = 2
    log_level: str = 'INFO'

    def __post_init__(self):
        if not isinstance(self.pre_shuffle, bool):
            raise ConfigError(f"pre_shuffle must be a boolean, got {self.pre_shuffle!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer or null, got {self.seed!r}")
        if isinstance(self.players, bool) or not isinstance(self.players, int):
            raise ConfigError(f"players must be an integer, got {self.players!r}")
        if not 1 <= self.players <= MAX_PLAYERS:
            raise ConfigError(f"players must be between 1 and {MAX_PLAYERS}, got {self.players}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvaluatorConfig':
        """
        Create a config from a mapping of field names to values.

        Raises:
            ConfigError: If there are unknown keys or invalid values
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a JSON object, got {type(data).__name__}")

        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration fields: {sorted(unknown)}")

        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> 'EvaluatorConfig':
        """
        Create a config from a JSON string.

        Raises:
            ConfigError: If the JSON is invalid or holds invalid values
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON: {e}")

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> 'EvaluatorConfig':
        """Load a config from a JSON file."""
        with open(filepath, 'r') as f:
            return cls.from_json(f.read())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Optional[Union[str, Path]] = None) -> EvaluatorConfig:
    """
    Load the evaluator configuration.

    Uses `path` if given, else the file named by the DRAW_POKER_CONFIG
    environment variable, else the defaults.

    Raises:
        ConfigError: If the file is missing or invalid
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        logger.debug("No configuration file given, using defaults")
        return EvaluatorConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")
    return EvaluatorConfig.from_file(config_path)
