"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

DEFAULT_PROMPT = "Choose the number of the card you want to play: "


class GameConfig(BaseModel):
    """Game configuration."""

    num_players: int = 4
    hand_size: int = 3
    num_rounds: int = 3
    human_seat: int = 1
    seed: int | None = None


class InputConfig(BaseModel):
    """Human input configuration."""

    # None retries forever
    max_retries: int | None = None
    prompt: str = DEFAULT_PROMPT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    show_hands: bool = False


class GameLogSettings(BaseModel):
    """Game log output directory."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    input: InputConfig = InputConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
