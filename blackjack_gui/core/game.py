"""Round state and transitions for a single-player blackjack table."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .cards import Card, CardSource, RandomCardSource, hand_value
from .rules import (
    BET_OPTIONS,
    DEFAULT_BET,
    MSG_HIT_OR_STAND,
    MSG_NOT_ENOUGH_MONEY,
    MSG_PLACE_BET,
    STARTING_BANKROLL,
    Outcome,
    dealer_should_draw,
    is_bust,
    is_valid_bet,
    settle,
)

LOGGER = logging.getLogger(__name__)


class RoundState(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    OVER = auto()


class EngineError(Enum):
    INSUFFICIENT_FUNDS = auto()
    INVALID_TRANSITION = auto()


@dataclass(frozen=True)
class RoundResult:
    bet: int
    outcome: Outcome
    player_score: int
    dealer_score: int
    payout: int
    bankroll: int

    @property
    def net(self) -> int:
        return self.payout - self.bet


Listener = Callable[["GameEngine"], None]


class GameEngine:
    """Owns the bankroll, both hands and the round state.

    Commands return ``True`` when applied. A rejected command leaves bankroll,
    hands and round state untouched and records the reason in ``last_error``.
    """

    def __init__(
        self,
        *,
        source: CardSource | None = None,
        bankroll: int = STARTING_BANKROLL,
        bet_options: Sequence[int] = BET_OPTIONS,
        default_bet: int = DEFAULT_BET,
    ) -> None:
        if not is_valid_bet(default_bet, bet_options):
            raise ValueError(f"default bet {default_bet} is not one of {tuple(bet_options)}")
        self.source: CardSource = source or RandomCardSource()
        self.bet_options: Tuple[int, ...] = tuple(bet_options)
        self._bankroll = bankroll
        self._bet = default_bet
        self._player: List[Card] = []
        self._dealer: List[Card] = []
        self._state = RoundState.NOT_STARTED
        self._message = MSG_PLACE_BET
        self.last_error: Optional[EngineError] = None
        self.history: List[RoundResult] = []
        self._listeners: List[Listener] = []

    # ---------------- Queries ----------------

    @property
    def player_hand(self) -> Tuple[Card, ...]:
        return tuple(self._player)

    @property
    def dealer_hand(self) -> Tuple[Card, ...]:
        return tuple(self._dealer)

    @property
    def player_value(self) -> int:
        return hand_value(self._player)

    @property
    def dealer_value(self) -> int:
        return hand_value(self._dealer)

    @property
    def bankroll(self) -> int:
        return self._bankroll

    @property
    def bet(self) -> int:
        return self._bet

    @property
    def round_state(self) -> RoundState:
        return self._state

    @property
    def message(self) -> str:
        return self._message

    @property
    def round_in_progress(self) -> bool:
        return self._state is RoundState.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self._state is RoundState.OVER

    @property
    def last_result(self) -> Optional[RoundResult]:
        return self.history[-1] if self.history else None

    def can_afford(self, bet: int | None = None) -> bool:
        return (self._bet if bet is None else bet) <= self._bankroll

    def record(self) -> Dict[Outcome, int]:
        tally = {outcome: 0 for outcome in Outcome}
        for result in self.history:
            tally[result.outcome] += 1
        return tally

    # ---------------- Notifications ----------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ---------------- Commands ----------------

    def select_bet(self, amount: int) -> bool:
        if not is_valid_bet(amount, self.bet_options):
            raise ValueError(f"bet must be one of {self.bet_options}, got {amount}")
        if self.round_in_progress:
            return self._reject(EngineError.INVALID_TRANSITION, "select_bet")
        self._bet = amount
        self.last_error = None
        self._notify()
        return True

    def start_round(self, bet: int | None = None) -> bool:
        if self.round_in_progress:
            return self._reject(EngineError.INVALID_TRANSITION, "start_round")
        if not self.can_afford(bet):
            self._message = MSG_NOT_ENOUGH_MONEY
            return self._reject(EngineError.INSUFFICIENT_FUNDS, "start_round")
        if bet is not None and not is_valid_bet(bet, self.bet_options):
            raise ValueError(f"bet must be one of {self.bet_options}, got {bet}")

        # Nothing is committed until every opening card is in hand.
        player = [self._draw(), self._draw()]
        dealer = [self._draw()]
        if bet is not None:
            self._bet = bet
        self._bankroll -= self._bet
        self._player = player
        self._dealer = dealer
        self._state = RoundState.IN_PROGRESS
        self._message = MSG_HIT_OR_STAND
        self.last_error = None
        LOGGER.info("Round started: bet=%d bankroll=%d", self._bet, self._bankroll)
        self._notify()
        return True

    def hit(self) -> bool:
        if not self.round_in_progress:
            return self._reject(EngineError.INVALID_TRANSITION, "hit")
        self._player.append(self._draw())
        self.last_error = None
        if is_bust(self._player):
            self._finish(Outcome.BUST, payout=0)
        self._notify()
        return True

    def stand(self) -> bool:
        if not self.round_in_progress:
            return self._reject(EngineError.INVALID_TRANSITION, "stand")
        while dealer_should_draw(self._dealer):
            self._dealer.append(self._draw())
        outcome, payout = settle(self._bet, self.player_value, self.dealer_value)
        self._bankroll += payout
        self.last_error = None
        self._finish(outcome, payout)
        self._notify()
        return True

    # ---------------- Internals ----------------

    def _draw(self) -> Card:
        card = self.source.draw()
        LOGGER.debug("Drew %s", card)
        return card

    def _finish(self, outcome: Outcome, payout: int) -> None:
        result = RoundResult(
            bet=self._bet,
            outcome=outcome,
            player_score=self.player_value,
            dealer_score=self.dealer_value,
            payout=payout,
            bankroll=self._bankroll,
        )
        self.history.append(result)
        self._state = RoundState.OVER
        self._message = outcome.message
        LOGGER.info(
            "Round over: %s player=%d dealer=%d payout=%d bankroll=%d",
            outcome.value,
            result.player_score,
            result.dealer_score,
            payout,
            self._bankroll,
        )

    def _reject(self, error: EngineError, command: str) -> bool:
        self.last_error = error
        LOGGER.warning("Rejected %s in state %s: %s", command, self._state.name, error.name)
        if error is EngineError.INSUFFICIENT_FUNDS:
            self._notify()
        return False


__all__ = ["EngineError", "GameEngine", "RoundResult", "RoundState"]
