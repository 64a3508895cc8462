import pytest

from blackjack_gui.core.cards import CardSourceExhausted, ScriptedCardSource
from blackjack_gui.core.game import EngineError, GameEngine, RoundState
from blackjack_gui.core.rules import (
    MSG_BUST,
    MSG_HIT_OR_STAND,
    MSG_LOSS,
    MSG_NOT_ENOUGH_MONEY,
    MSG_PLACE_BET,
    MSG_PUSH,
    MSG_WIN,
    Outcome,
)


def scripted_engine(cards, **kwargs):
    """Cards are dealt player, player, dealer, then in draw order."""

    return GameEngine(source=ScriptedCardSource(cards), **kwargs)


def test_new_engine_waits_for_a_bet():
    engine = GameEngine()
    assert engine.round_state is RoundState.NOT_STARTED
    assert engine.bankroll == 5000
    assert engine.bet == 10
    assert engine.message == MSG_PLACE_BET
    assert engine.player_hand == () and engine.dealer_hand == ()


def test_start_round_deducts_bet_and_deals():
    engine = scripted_engine([9, 5, 7])
    assert engine.start_round(10)
    assert engine.bankroll == 4990
    assert [card.value for card in engine.player_hand] == [9, 5]
    assert [card.value for card in engine.dealer_hand] == [7]
    assert engine.round_state is RoundState.IN_PROGRESS
    assert engine.message == MSG_HIT_OR_STAND
    assert engine.last_error is None


def test_start_round_without_funds_is_rejected():
    engine = scripted_engine([])
    assert not engine.start_round(6000)
    assert engine.last_error is EngineError.INSUFFICIENT_FUNDS
    assert engine.message == MSG_NOT_ENOUGH_MONEY
    assert engine.bankroll == 5000
    assert engine.bet == 10
    assert engine.round_state is RoundState.NOT_STARTED
    assert engine.player_hand == ()


def test_selected_bet_above_bankroll_is_rejected_at_deal():
    engine = scripted_engine([], bankroll=20)
    assert engine.select_bet(25)
    assert not engine.can_afford()
    assert not engine.start_round()
    assert engine.last_error is EngineError.INSUFFICIENT_FUNDS
    assert engine.bankroll == 20


def test_invalid_denomination_raises():
    engine = GameEngine()
    with pytest.raises(ValueError):
        engine.select_bet(30)
    with pytest.raises(ValueError):
        engine.start_round(30)
    assert engine.bankroll == 5000


def test_hit_until_bust_forfeits_stake():
    engine = scripted_engine([10, 6, 5, 3, 10])
    engine.start_round(100)
    assert engine.hit()
    assert engine.player_value == 19
    assert engine.round_in_progress
    assert engine.hit()
    assert engine.player_value == 29
    assert engine.round_state is RoundState.OVER
    assert engine.message == MSG_BUST
    assert engine.bankroll == 4900
    assert engine.last_result.outcome is Outcome.BUST

    assert not engine.hit()
    assert engine.last_error is EngineError.INVALID_TRANSITION
    assert len(engine.player_hand) == 4
    assert engine.bankroll == 4900
    assert not engine.stand()
    assert len(engine.dealer_hand) == 1


def test_stand_with_dealer_bust_pays_double():
    engine = scripted_engine([10, 9, 6, 10, 10], bankroll=100)
    engine.start_round(50)
    assert engine.bankroll == 50
    assert engine.stand()
    assert engine.dealer_value == 26
    assert engine.bankroll == 150
    assert engine.message == MSG_WIN
    assert engine.is_game_over


def test_stand_loss_keeps_stake():
    engine = scripted_engine([10, 6, 10, 8])
    engine.start_round(25)
    engine.stand()
    assert engine.dealer_value == 18
    assert engine.message == MSG_LOSS
    assert engine.bankroll == 4975
    assert engine.last_result.net == -25


def test_push_returns_stake():
    engine = scripted_engine([10, 7, 10, 7])
    engine.start_round(250)
    engine.stand()
    assert engine.message == MSG_PUSH
    assert engine.bankroll == 5000


def test_dealer_draws_until_seventeen():
    engine = scripted_engine([10, 10, 2, 2, 2, 2, 2, 2, 2, 2, 2])
    engine.start_round()
    engine.stand()
    assert engine.dealer_value == 18
    assert len(engine.dealer_hand) == 9
    assert engine.last_result.outcome is Outcome.WIN


def test_dealer_stands_on_soft_seventeen():
    # The script holds no card beyond the dealer's second one.
    engine = scripted_engine([10, 8, "A", 6])
    engine.start_round()
    engine.stand()
    assert engine.dealer_value == 17
    assert engine.last_result.outcome is Outcome.WIN


def test_second_stand_is_rejected():
    engine = scripted_engine([10, 9, 10, 9])
    engine.start_round(10)
    engine.stand()
    bankroll = engine.bankroll
    hands = (engine.player_hand, engine.dealer_hand)
    assert not engine.stand()
    assert engine.last_error is EngineError.INVALID_TRANSITION
    assert engine.bankroll == bankroll
    assert (engine.player_hand, engine.dealer_hand) == hands
    assert len(engine.history) == 1


def test_bet_locked_during_round():
    engine = scripted_engine([10, 5, 4])
    engine.start_round(50)
    assert not engine.select_bet(100)
    assert not engine.start_round(10)
    assert engine.bet == 50
    assert engine.bankroll == 4950


def test_new_round_replaces_hands():
    engine = scripted_engine([10, 9, 10, 8, 2, 3, 4])
    engine.start_round()
    engine.stand()
    assert engine.start_round()
    assert [card.value for card in engine.player_hand] == [2, 3]
    assert [card.value for card in engine.dealer_hand] == [4]
    assert engine.record()[Outcome.WIN] == 1


def test_listeners_see_each_change():
    engine = scripted_engine([10, 9, 10, 8])
    seen = []

    def listener(changed):
        seen.append(changed.round_state)

    engine.subscribe(listener)
    engine.select_bet(25)
    engine.start_round()
    engine.stand()
    engine.hit()
    assert seen == [RoundState.NOT_STARTED, RoundState.IN_PROGRESS, RoundState.OVER]
    engine.unsubscribe(listener)
    engine.start_round(6000)
    assert len(seen) == 3


def test_locked_out_once_bankroll_below_smallest_bet():
    engine = scripted_engine([10, 6, 10, 8], bankroll=10)
    engine.start_round(10)
    engine.stand()
    assert engine.bankroll == 0
    assert not engine.start_round()
    assert engine.last_error is EngineError.INSUFFICIENT_FUNDS


def test_failed_deal_keeps_the_stake():
    engine = scripted_engine([9])
    with pytest.raises(CardSourceExhausted):
        engine.start_round(25)
    assert engine.bankroll == 5000
    assert engine.bet == 10
    assert engine.round_state is RoundState.NOT_STARTED
    assert engine.player_hand == () and engine.dealer_hand == ()


def test_listener_sees_insufficient_funds_notice():
    engine = scripted_engine([])
    messages = []
    engine.subscribe(lambda changed: messages.append(changed.message))
    assert not engine.start_round(6000)
    assert messages == [MSG_NOT_ENOUGH_MONEY]


def test_start_round_with_bet_notifies_once():
    engine = scripted_engine([10, 5, 4])
    seen = []
    engine.subscribe(lambda changed: seen.append(changed.round_state))
    engine.start_round(25)
    assert seen == [RoundState.IN_PROGRESS]
    assert engine.bet == 25
