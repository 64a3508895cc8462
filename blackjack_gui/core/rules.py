"""Blackjack table rules and settlement helpers."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence, Tuple

from .cards import Card, hand_value

BET_OPTIONS: Tuple[int, ...] = (10, 25, 50, 100, 250, 500, 999)
STARTING_BANKROLL = 5000
DEFAULT_BET = 10
BLACKJACK = 21
DEALER_STANDS_ON = 17

MSG_PLACE_BET = "Place your bet and tap Deal"
MSG_HIT_OR_STAND = "Hit or Stand?"
MSG_BUST = "You Bust! 💥"
MSG_WIN = "You Win! 🎉"
MSG_LOSS = "Dealer Wins 😞"
MSG_PUSH = "Push 🤝"
MSG_NOT_ENOUGH_MONEY = "Not enough money!"


class Outcome(Enum):
    WIN = "win"
    LOSS = "loss"
    PUSH = "push"
    BUST = "bust"

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self]


OUTCOME_MESSAGES = {
    Outcome.WIN: MSG_WIN,
    Outcome.LOSS: MSG_LOSS,
    Outcome.PUSH: MSG_PUSH,
    Outcome.BUST: MSG_BUST,
}


def is_valid_bet(amount: int, options: Sequence[int] = BET_OPTIONS) -> bool:
    return amount in options


def is_bust(cards: Iterable[Card]) -> bool:
    return hand_value(cards) > BLACKJACK


def dealer_should_draw(cards: Iterable[Card]) -> bool:
    """Dealer draws to 16 and stands on every 17, soft or hard."""

    return hand_value(cards) < DEALER_STANDS_ON


def settle(bet: int, player_score: int, dealer_score: int) -> Tuple[Outcome, int]:
    """Return the outcome and the amount credited back to the bankroll.

    The stake has already left the bankroll, so a win credits twice the bet
    and a push returns it.
    """

    if dealer_score > BLACKJACK or player_score > dealer_score:
        return Outcome.WIN, bet * 2
    if player_score < dealer_score:
        return Outcome.LOSS, 0
    return Outcome.PUSH, bet


__all__ = [
    "BET_OPTIONS",
    "BLACKJACK",
    "DEALER_STANDS_ON",
    "DEFAULT_BET",
    "STARTING_BANKROLL",
    "MSG_BUST",
    "MSG_HIT_OR_STAND",
    "MSG_LOSS",
    "MSG_NOT_ENOUGH_MONEY",
    "MSG_PLACE_BET",
    "MSG_PUSH",
    "MSG_WIN",
    "Outcome",
    "dealer_should_draw",
    "is_bust",
    "is_valid_bet",
    "settle",
]
