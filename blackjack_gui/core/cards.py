"""Card values, card sources and hand totals."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence, Union

ACE = 11
TEN_LABELS = ("10", "J", "Q", "K")
# One entry per rank; the four ten-valued ranks share value 10.
RANK_VALUES = (2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 10, 10, ACE)


def labels_for_value(value: int) -> Sequence[str]:
    if value == ACE:
        return ("A",)
    if value == 10:
        return TEN_LABELS
    if 2 <= value <= 9:
        return (str(value),)
    raise ValueError(f"card value must be between 2 and 11, got {value}")


@dataclass(frozen=True)
class Card:
    """A blackjack card: its counting value and the label shown to the player."""

    value: int
    label: str

    def __post_init__(self) -> None:
        if self.label not in labels_for_value(self.value):
            raise ValueError(f"label {self.label!r} does not match value {self.value}")

    @property
    def is_ace(self) -> bool:
        return self.value == ACE

    def __str__(self) -> str:
        return self.label


def card_from_value(value: int) -> Card:
    return Card(value, labels_for_value(value)[0])


def card_from_label(label: str) -> Card:
    label = label.upper()
    if label == "A":
        return Card(ACE, label)
    if label in TEN_LABELS:
        return Card(10, label)
    return Card(int(label), label)


class CardSource(Protocol):
    def draw(self) -> Card:
        ...


class RandomCardSource:
    """Infinite shoe drawing each of the thirteen ranks with equal chance."""

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def draw(self) -> Card:
        value = self._rng.choice(RANK_VALUES)
        return Card(value, self._rng.choice(labels_for_value(value)))


class CardSourceExhausted(IndexError):
    pass


class ScriptedCardSource:
    """Deals a fixed sequence of cards, in order."""

    def __init__(self, cards: Iterable[Union[Card, int, str]]) -> None:
        self._cards: List[Card] = [_coerce(card) for card in cards]
        self._position = 0

    def draw(self) -> Card:
        if self._position >= len(self._cards):
            raise CardSourceExhausted("no scripted cards left")
        card = self._cards[self._position]
        self._position += 1
        return card

    def __len__(self) -> int:
        return len(self._cards) - self._position


def _coerce(card: Union[Card, int, str]) -> Card:
    if isinstance(card, Card):
        return card
    if isinstance(card, int):
        return card_from_value(card)
    return card_from_label(card)


def _reduce_aces(cards: Iterable[Card]) -> tuple[int, int]:
    total = 0
    aces = 0
    for card in cards:
        total += card.value
        if card.is_ace:
            aces += 1
    while total > 21 and aces:
        total -= 10
        aces -= 1
    return total, aces


def hand_value(cards: Iterable[Card]) -> int:
    """Best blackjack total for ``cards``.

    Aces start at 11 and are downgraded to 1, one at a time, while the hand
    would otherwise bust.
    """

    return _reduce_aces(cards)[0]


def is_soft(cards: Iterable[Card]) -> bool:
    total, aces = _reduce_aces(cards)
    return aces > 0 and total <= 21


__all__ = [
    "ACE",
    "Card",
    "CardSource",
    "CardSourceExhausted",
    "RandomCardSource",
    "ScriptedCardSource",
    "card_from_label",
    "card_from_value",
    "hand_value",
    "is_soft",
    "labels_for_value",
]
