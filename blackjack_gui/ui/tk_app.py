"""Minimal Tkinter fallback UI."""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..core.game import GameEngine
from ..core.sim import simulate
from . import controls

AUTO_PLAY_ROUNDS = 10


def launch_tk(engine: GameEngine) -> int:
    root = tk.Tk()
    root.title("Blackjack (Fallback)")
    money = tk.StringVar()
    dealer = tk.StringVar()
    player = tk.StringVar()
    message = tk.StringVar()
    bet = tk.IntVar(value=engine.bet)

    for var in (money, dealer, player, message):
        ttk.Label(root, textvariable=var).pack(padx=20, pady=6)

    buttons = ttk.Frame(root)
    buttons.pack(padx=20, pady=10)
    deal_btn = ttk.Button(buttons, text="Deal", command=lambda: engine.start_round())
    hit_btn = ttk.Button(buttons, text="Hit", command=engine.hit)
    stand_btn = ttk.Button(buttons, text="Stand", command=engine.stand)

    def auto_play() -> None:
        summary = simulate(engine, AUTO_PLAY_ROUNDS)
        message.set(f"Auto played {summary.rounds} rounds, net {controls.format_money(summary.net)}")

    auto_btn = ttk.Button(buttons, text="Auto Play", command=auto_play)
    for column, button in enumerate((deal_btn, hit_btn, stand_btn, auto_btn)):
        button.grid(row=0, column=column, padx=4)

    picker = ttk.Frame(root)
    picker.pack(padx=20, pady=10)
    bet_buttons = []
    for column, amount in enumerate(engine.bet_options):
        radio = ttk.Radiobutton(
            picker,
            text=controls.format_money(amount),
            value=amount,
            variable=bet,
            command=lambda: engine.select_bet(bet.get()),
        )
        radio.grid(row=0, column=column, padx=2)
        bet_buttons.append(radio)

    def set_enabled(widget: ttk.Widget, enabled: bool) -> None:
        widget.state(["!disabled"] if enabled else ["disabled"])

    def refresh(_engine: GameEngine = engine) -> None:
        money.set(f"Money: {controls.format_money(engine.bankroll)}")
        dealer_cards = " ".join(card.label for card in engine.dealer_hand)
        player_cards = " ".join(card.label for card in engine.player_hand)
        dealer.set(f"Dealer: {dealer_cards}  {controls.format_total(engine.dealer_hand, engine.dealer_value)}")
        player.set(f"You: {player_cards}  {controls.format_total(engine.player_hand, engine.player_value)}")
        message.set(engine.message)
        set_enabled(deal_btn, controls.deal_enabled(engine))
        set_enabled(auto_btn, controls.deal_enabled(engine))
        set_enabled(hit_btn, controls.play_enabled(engine))
        set_enabled(stand_btn, controls.play_enabled(engine))
        for radio in bet_buttons:
            set_enabled(radio, controls.bet_picker_enabled(engine))

    engine.subscribe(refresh)
    refresh()
    root.mainloop()
    return 0


__all__ = ["launch_tk"]
