"""Toolkit independent view state shared by the Qt and Tk front ends."""
from __future__ import annotations

from typing import Sequence

from ..core.cards import Card, is_soft
from ..core.game import GameEngine
from ..core.rules import Outcome


def deal_enabled(engine: GameEngine) -> bool:
    return not engine.round_in_progress and engine.can_afford()


def play_enabled(engine: GameEngine) -> bool:
    """Hit and Stand share the same rule."""

    return engine.round_in_progress


def bet_picker_enabled(engine: GameEngine) -> bool:
    return not engine.round_in_progress


def format_money(amount: int) -> str:
    return f"${amount:,}"


def format_total(cards: Sequence[Card], value: int) -> str:
    if cards and is_soft(cards) and value < 21:
        return f"Total: Soft {value}"
    return f"Total: {value}"


def format_record(engine: GameEngine) -> str:
    tally = engine.record()
    losses = tally[Outcome.LOSS] + tally[Outcome.BUST]
    return f"Wins {tally[Outcome.WIN]}  Losses {losses}  Pushes {tally[Outcome.PUSH]}"


__all__ = [
    "bet_picker_enabled",
    "deal_enabled",
    "format_money",
    "format_record",
    "format_total",
    "play_enabled",
]
