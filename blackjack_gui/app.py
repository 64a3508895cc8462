"""Application bootstrap for the blackjack GUI."""
from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from .core.cards import RandomCardSource
from .core.config import ConfigError, GameConfig, create_engine, load_game_config
from .core.game import GameEngine

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blackjack-gui", description="Single-player blackjack")
    parser.add_argument("--config", type=Path, help="JSON file with bankroll and bet options")
    parser.add_argument("--seed", type=int, help="seed the card shoe for a reproducible session")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def build_engine(config_path: Optional[Path], seed: Optional[int]) -> GameEngine:
    config = load_game_config(config_path) if config_path else GameConfig()
    rng = random.Random(seed) if seed is not None else None
    return create_engine(config, RandomCardSource(rng=rng))


def run(argv: Optional[list[str]] = None) -> int:
    """Run the blackjack GUI application."""

    argv = list(sys.argv if argv is None else argv)
    args = build_parser().parse_args(argv[1:])
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        engine = build_engine(args.config, args.seed)
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        print(f"Unable to load configuration: {exc}")
        return 2
    source = str(args.config) if args.config else None

    try:
        from .ui.qt_app import launch_qt
    except Exception as exc:  # pragma: no cover - Qt not available during tests
        LOGGER.warning("Falling back to Tkinter UI due to PyQt6 load failure")
        LOGGER.debug("PyQt6 import error: %s", exc)
        from .ui.tk_app import launch_tk

        try:
            return launch_tk(engine)
        except Exception:  # pragma: no cover - headless CI
            LOGGER.warning("Tkinter fallback unavailable", exc_info=True)
            print("Unable to launch a graphical interface in this environment.")
            return 1

    return launch_qt(engine, argv[:1], source)


def main() -> None:
    sys.exit(run())


__all__ = ["run", "main", "build_engine", "GameEngine"]
