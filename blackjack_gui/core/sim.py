"""Headless auto-play."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .game import GameEngine, RoundState
from .rules import DEALER_STANDS_ON, Outcome


@dataclass
class SimulationSummary:
    rounds: int = 0
    outcomes: Dict[Outcome, int] = field(default_factory=lambda: {outcome: 0 for outcome in Outcome})
    starting_bankroll: int = 0
    final_bankroll: int = 0

    @property
    def net(self) -> int:
        return self.final_bankroll - self.starting_bankroll


def play_round(engine: GameEngine, *, stand_on: int = DEALER_STANDS_ON) -> bool:
    """Play one round hitting below ``stand_on``. Returns False if it could not start."""

    if not engine.start_round():
        return False
    while engine.round_in_progress and engine.player_value < stand_on:
        engine.hit()
    if engine.round_in_progress:
        engine.stand()
    return True


def simulate(engine: GameEngine, rounds: int, *, stand_on: int = DEALER_STANDS_ON) -> SimulationSummary:
    if rounds < 0:
        raise ValueError("rounds must be non-negative")
    if engine.round_state is RoundState.IN_PROGRESS:
        raise ValueError("cannot simulate while a round is in progress")
    summary = SimulationSummary(starting_bankroll=engine.bankroll)
    for _ in range(rounds):
        if not play_round(engine, stand_on=stand_on):
            break
        summary.rounds += 1
        summary.outcomes[engine.history[-1].outcome] += 1
    summary.final_bankroll = engine.bankroll
    return summary


__all__ = ["SimulationSummary", "play_round", "simulate"]
