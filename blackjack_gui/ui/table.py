"""Qt widgets representing the blackjack table."""
from __future__ import annotations

from typing import Dict, Optional

from PyQt6 import QtWidgets

from ..core.game import GameEngine
from ..core.sim import simulate
from . import controls
from .widgets import CardLabel

AUTO_PLAY_ROUNDS = 10


class TableWindow(QtWidgets.QMainWindow):
    def __init__(self, engine: GameEngine, source: Optional[str] = None) -> None:
        super().__init__()
        self.engine = engine
        self.setWindowTitle("Blackjack")
        self.resize(520, 640)
        self.setStyleSheet("background: black; color: white;")
        self.view = TableView(engine)
        self.setCentralWidget(self.view)
        self.status = self.statusBar()
        self.status.showMessage(f"Loaded {source}" if source else controls.format_record(engine))
        engine.subscribe(self._on_engine_changed)

    def _on_engine_changed(self, engine: GameEngine) -> None:
        self.status.showMessage(controls.format_record(engine))


class TableView(QtWidgets.QWidget):
    def __init__(self, engine: GameEngine) -> None:
        super().__init__()
        self.engine = engine
        self._build_ui()
        self.engine.subscribe(lambda _engine: self.update_view())
        self.update_view()

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setSpacing(20)

        title = QtWidgets.QLabel("Blackjack")
        font = title.font()
        font.setPointSize(28)
        title.setFont(font)
        layout.addWidget(title)

        self.money_label = QtWidgets.QLabel()
        layout.addWidget(self.money_label)

        layout.addWidget(QtWidgets.QLabel("Dealer"))
        self.dealer_cards = QtWidgets.QHBoxLayout()
        layout.addLayout(self.dealer_cards)
        self.dealer_total = QtWidgets.QLabel()
        layout.addWidget(self.dealer_total)

        divider = QtWidgets.QFrame()
        divider.setFrameShape(QtWidgets.QFrame.Shape.HLine)
        layout.addWidget(divider)

        layout.addWidget(QtWidgets.QLabel("You"))
        self.player_cards = QtWidgets.QHBoxLayout()
        layout.addLayout(self.player_cards)
        self.player_total = QtWidgets.QLabel()
        layout.addWidget(self.player_total)

        self.message_label = QtWidgets.QLabel()
        self.message_label.setStyleSheet("color: #34c759;")
        layout.addWidget(self.message_label)

        buttons = QtWidgets.QHBoxLayout()
        self.deal_btn = QtWidgets.QPushButton("Deal")
        self.deal_btn.clicked.connect(lambda: self.on_deal())
        self.hit_btn = QtWidgets.QPushButton("Hit")
        self.hit_btn.clicked.connect(lambda: self.engine.hit())
        self.stand_btn = QtWidgets.QPushButton("Stand")
        self.stand_btn.clicked.connect(lambda: self.engine.stand())
        self.auto_play_btn = QtWidgets.QPushButton("Auto Play")
        self.auto_play_btn.clicked.connect(lambda: self.on_auto_play())
        for button in (self.deal_btn, self.hit_btn, self.stand_btn, self.auto_play_btn):
            buttons.addWidget(button)
        layout.addLayout(buttons)

        self.bet_group = QtWidgets.QButtonGroup(self)
        self.bet_group.setExclusive(True)
        self.bet_buttons: Dict[int, QtWidgets.QPushButton] = {}
        bet_row = QtWidgets.QHBoxLayout()
        for amount in self.engine.bet_options:
            button = QtWidgets.QPushButton(controls.format_money(amount))
            button.setCheckable(True)
            self.bet_group.addButton(button, amount)
            self.bet_buttons[amount] = button
            bet_row.addWidget(button)
        self.bet_group.idClicked.connect(self.engine.select_bet)
        layout.addLayout(bet_row)
        layout.addStretch()

    def update_view(self) -> None:
        engine = self.engine
        self.money_label.setText(f"Money: {controls.format_money(engine.bankroll)}")
        self._fill_cards(self.dealer_cards, engine.dealer_hand, dealer=True)
        self._fill_cards(self.player_cards, engine.player_hand, dealer=False)
        self.dealer_total.setText(controls.format_total(engine.dealer_hand, engine.dealer_value))
        self.player_total.setText(controls.format_total(engine.player_hand, engine.player_value))
        self.message_label.setText(engine.message)

        self.deal_btn.setEnabled(controls.deal_enabled(engine))
        playing = controls.play_enabled(engine)
        self.hit_btn.setEnabled(playing)
        self.stand_btn.setEnabled(playing)
        self.auto_play_btn.setEnabled(controls.deal_enabled(engine))
        picker = controls.bet_picker_enabled(engine)
        for amount, button in self.bet_buttons.items():
            button.setEnabled(picker)
            button.setChecked(amount == engine.bet)

    def _fill_cards(self, row: QtWidgets.QHBoxLayout, cards, *, dealer: bool) -> None:
        while row.count():
            item = row.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        for card in cards:
            row.addWidget(CardLabel(card.label, dealer=dealer))
        row.addStretch()

    def on_deal(self) -> None:
        self.engine.start_round()

    def on_auto_play(self) -> None:
        summary = simulate(self.engine, AUTO_PLAY_ROUNDS)
        self.message_label.setText(
            f"Auto played {summary.rounds} rounds, net {controls.format_money(summary.net)}"
        )


__all__ = ["TableWindow", "TableView"]
