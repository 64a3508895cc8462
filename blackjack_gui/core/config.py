"""Game configuration loading."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from .cards import CardSource
from .game import GameEngine
from .rules import BET_OPTIONS, DEFAULT_BET, STARTING_BANKROLL

LOGGER = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


@dataclass
class GameConfig:
    starting_bankroll: int = STARTING_BANKROLL
    bet_options: Tuple[int, ...] = field(default_factory=lambda: BET_OPTIONS)
    default_bet: int = DEFAULT_BET


def _positive_int(value: Any, name: str, path: Path) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{path}: {name} must be a positive integer, got {value!r}")
    return value


def parse_game_config(data: Dict[str, Any], path: Path = Path("<config>")) -> GameConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    config = GameConfig()
    if "starting_bankroll" in data:
        config.starting_bankroll = _positive_int(data["starting_bankroll"], "starting_bankroll", path)
    if "bet_options" in data:
        options = data["bet_options"]
        if not isinstance(options, list) or not options:
            raise ConfigError(f"{path}: bet_options must be a non-empty list")
        config.bet_options = tuple(
            sorted({_positive_int(option, "bet option", path) for option in options})
        )
    if "default_bet" in data:
        config.default_bet = _positive_int(data["default_bet"], "default_bet", path)
    elif config.default_bet not in config.bet_options:
        config.default_bet = config.bet_options[0]
    if config.default_bet not in config.bet_options:
        raise ConfigError(f"{path}: default_bet {config.default_bet} is not among bet_options")
    return config


def load_game_config(path: Path) -> GameConfig:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON ({exc})") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: unable to read configuration ({exc})") from exc
    config = parse_game_config(data, path)
    LOGGER.info("Loaded game configuration from %s", path)
    return config


def create_engine(config: GameConfig | None = None, source: CardSource | None = None) -> GameEngine:
    config = config or GameConfig()
    return GameEngine(
        source=source,
        bankroll=config.starting_bankroll,
        bet_options=config.bet_options,
        default_bet=config.default_bet,
    )


def create_engine_from_file(path: Path, source: CardSource | None = None) -> GameEngine:
    return create_engine(load_game_config(path), source)


__all__ = [
    "ConfigError",
    "GameConfig",
    "create_engine",
    "create_engine_from_file",
    "load_game_config",
    "parse_game_config",
]
