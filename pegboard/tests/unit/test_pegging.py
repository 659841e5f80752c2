"""Pegging phase rules."""

from __future__ import annotations

from typing import Sequence, Tuple

import pytest

from ...bots import FirstLegalStrategy, OpponentStrategy
from ...engine.cards import Card, Rank, Suit
from ...engine.exceptions import InvalidActionError, InvariantViolation
from ...engine.phases.pegging import PeggingPhase
from ...engine.rules import RulesConfig
from ...engine.scoring import ScoreEvent
from ...engine.state import AdvanceResult, GamePhase, Player, create_initial_state
from ..fixtures.hands import parse_cards, pegging_state


class StubbornStrategy(OpponentStrategy):
    """Always names cards it was never dealt."""

    name = "stubborn"

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> Tuple[Card, Card]:
        return Card(Suit.SPADES, Rank.ACE), Card(Suit.SPADES, Rank.TWO)

    def choose_play(self, hand: Sequence[Card], pile: Sequence[Card], count: int) -> Card:
        return Card(Suit.SPADES, Rank.ACE)


def _phase() -> PeggingPhase:
    return PeggingPhase(strategy=FirstLegalStrategy())


def _with_pile(state, text: str) -> None:
    state.pile = parse_cards(text, Suit.DIAMONDS)
    state.pegging_count = sum(card.value for card in state.pile)


def test_human_without_choice_waits() -> None:
    state = pegging_state("A23K", "9TJQ")
    step = _phase().play(state, 0)
    assert step.result is AdvanceResult.WAIT_FOR_USER
    assert step.next_phase is None
    assert state.pile == []
    assert state.current_player is Player.HUMAN


def test_human_out_of_range_slot_is_ignored() -> None:
    state = pegging_state("A23K", "9TJQ")
    for choice in (5, 13, -1):
        assert _phase().play(state, choice).result is AdvanceResult.WAIT_FOR_USER
    assert len(state.hands[Player.HUMAN]) == 4


def test_human_card_over_thirty_one_is_ignored() -> None:
    state = pegging_state("A23K", "9TJQ")
    _with_pile(state, "KQ5")
    phase = _phase()
    assert phase.play(state, 4).result is AdvanceResult.WAIT_FOR_USER
    assert state.pegging_count == 25
    assert phase.play(state, 3).result is AdvanceResult.CONTINUE
    assert state.pegging_count == 28
    assert state.current_player is Player.CPU


def test_human_play_scores_fifteen() -> None:
    state = pegging_state("5A2K", "9TJQ")
    _with_pile(state, "K")
    step = _phase().play(state, 3)
    assert step.result is AdvanceResult.CONTINUE
    assert state.pile[-1] == Card(Suit.HEARTS, Rank.FIVE)
    assert state.pegging_count == 15
    assert state.score_events == [ScoreEvent.FIFTEEN]
    assert state.scores[Player.HUMAN] == 2
    assert state.remaining_cards[Player.HUMAN] == 3
    assert state.last_card_player is Player.HUMAN
    assert state.current_player is Player.CPU


def test_cpu_plays_first_legal_card() -> None:
    state = pegging_state("A23K", "9TJQ", dealer=Player.HUMAN)
    _with_pile(state, "KQ2")
    step = _phase().play(state, 0)
    assert step.result is AdvanceResult.CONTINUE
    assert state.pile[-1] == Card(Suit.CLUBS, Rank.NINE)
    assert state.pegging_count == 31
    assert state.score_events == [ScoreEvent.THIRTY_ONE]
    assert state.scores[Player.CPU] == 2


def test_thirty_one_moves_to_announcement() -> None:
    state = pegging_state("A23K", "9TJQ")
    _with_pile(state, "KQA")
    state.pegging_count = 31
    step = _phase().play(state, 0)
    assert step.result is AdvanceResult.CONTINUE
    assert step.next_phase is GamePhase.ANNOUNCE_THIRTY_ONE


def test_thirty_one_takes_precedence_over_go() -> None:
    state = pegging_state("A23K", "9TJQ")
    _with_pile(state, "KQA")
    state.pegging_count = 31
    state.called_go = {Player.HUMAN: True, Player.CPU: True}
    assert _phase().play(state, 0).next_phase is GamePhase.ANNOUNCE_THIRTY_ONE


def test_go_when_no_card_fits() -> None:
    state = pegging_state("A23K", "9TJQ", dealer=Player.HUMAN)
    _with_pile(state, "KQ3")
    step = _phase().play(state, 0)
    assert step.result is AdvanceResult.CONTINUE
    assert state.called_go[Player.CPU]
    assert not state.called_go[Player.HUMAN]
    assert state.pegging_count == 23
    assert state.current_player is Player.HUMAN


def test_go_with_empty_hand() -> None:
    state = pegging_state("A23K", "9TJQ")
    state.hands[Player.HUMAN] = []
    state.remaining_cards[Player.HUMAN] = 0
    assert _phase().play(state, 1).result is AdvanceResult.CONTINUE
    assert state.called_go[Player.HUMAN]


def test_both_go_waits_for_last_card() -> None:
    state = pegging_state("A23K", "9TJQ")
    state.called_go = {Player.HUMAN: True, Player.CPU: True}
    step = _phase().play(state, 0)
    assert step.result is AdvanceResult.WAIT_FOR_USER
    assert step.next_phase is GamePhase.ANNOUNCE_LAST_CARD


def test_pile_overflow_is_invariant_violation() -> None:
    state = pegging_state("A23K", "9TJQ")
    state.pile = parse_cards("AAAA2222")
    state.pegging_count = 12
    with pytest.raises(InvariantViolation):
        _phase().play(state, 1)


def test_missing_current_player_is_invariant_violation() -> None:
    state = pegging_state("A23K", "9TJQ")
    state.current_player = None
    with pytest.raises(InvariantViolation):
        _phase().play(state, 1)


def test_illegal_strategy_play_raises() -> None:
    state = pegging_state("A23K", "9TJQ", dealer=Player.HUMAN)
    with pytest.raises(InvalidActionError):
        PeggingPhase(strategy=StubbornStrategy()).play(state, 0)


def _crib_state():
    state = create_initial_state(RulesConfig(), seed=1)
    state.phase = GamePhase.PEGGING
    state.dealer = Player.CPU
    state.set_hands({Player.HUMAN: parse_cards("A23456", Suit.HEARTS), Player.CPU: parse_cards("789TJQ", Suit.CLUBS)})
    state.up_card = Card(Suit.SPADES, Rank.KING)
    state.crib_choices = [2, 5]
    return state


def test_first_entry_lays_away_to_crib() -> None:
    state = _crib_state()
    _phase().start(state)
    assert state.crib == [
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.HEARTS, Rank.FIVE),
        Card(Suit.CLUBS, Rank.SEVEN),
        Card(Suit.CLUBS, Rank.EIGHT),
    ]
    assert state.hands[Player.HUMAN] == parse_cards("A346", Suit.HEARTS)
    assert state.hands[Player.CPU] == parse_cards("9TJQ", Suit.CLUBS)
    assert state.original_hands[Player.HUMAN] == state.hands[Player.HUMAN]
    assert state.original_hands[Player.HUMAN] is not state.hands[Player.HUMAN]
    assert state.remaining_cards == {Player.HUMAN: 4, Player.CPU: 4}
    assert state.current_player is Player.HUMAN


def test_later_entry_only_resets_segment() -> None:
    state = pegging_state("A23K", "9TJQ")
    _with_pile(state, "KQA")
    state.current_player = Player.CPU
    state.called_go[Player.HUMAN] = True
    _phase().start(state)
    assert state.pile == []
    assert state.pegging_count == 0
    assert not any(state.called_go.values())
    assert state.current_player is Player.CPU
    assert len(state.hands[Player.HUMAN]) == 4


def test_bad_strategy_discards_raise() -> None:
    state = _crib_state()
    with pytest.raises(InvalidActionError):
        PeggingPhase(strategy=StubbornStrategy()).start(state)


def test_last_card_point() -> None:
    state = pegging_state("A23K", "9TJQ")
    state.last_card_player = Player.CPU
    _phase().announce_last_card(state)
    assert state.score_events == [ScoreEvent.LAST_CARD]
    assert state.scores == {Player.HUMAN: 0, Player.CPU: 1}


def test_finish_segment_picks_next_phase() -> None:
    state = pegging_state("A23K", "9TJQ")
    phase = _phase()
    assert phase.finish_segment(state, 0).next_phase is GamePhase.PEGGING
    state.remaining_cards = {Player.HUMAN: 0, Player.CPU: 0}
    assert phase.finish_segment(state, 0).next_phase is GamePhase.COUNTING
