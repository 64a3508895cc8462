"""Reusable Qt widgets for the blackjack UI."""
from __future__ import annotations

from PyQt6 import QtCore, QtWidgets

PLAYER_CARD_STYLE = "border-radius: 8px; padding: 6px; background: rgba(0, 122, 255, 0.3); color: white;"
DEALER_CARD_STYLE = "border-radius: 8px; padding: 6px; background: rgba(128, 128, 128, 0.2); color: white;"


class CardLabel(QtWidgets.QLabel):
    """Fixed size label that renders a card's rank."""

    def __init__(self, text: str, *, dealer: bool = False, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.setFixedSize(50, 70)
        font = self.font()
        font.setPointSize(20)
        self.setFont(font)
        self.setStyleSheet(DEALER_CARD_STYLE if dealer else PLAYER_CARD_STYLE)


__all__ = ["CardLabel"]
