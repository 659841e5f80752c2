"""Tests for the game state container."""

from __future__ import annotations

from ...engine.rules import RulesConfig
from ...engine.state import GameData, GamePhase, Player, create_initial_state


def test_initial_state_per_player_defaults() -> None:
    state = create_initial_state(RulesConfig(), seed=0)
    assert state.phase is GamePhase.CHOOSE_DEALER
    assert state.scores == {Player.HUMAN: 0, Player.CPU: 0}
    assert state.cut_cards == {Player.HUMAN: None, Player.CPU: None}
    assert state.cut_slots == {Player.HUMAN: 0, Player.CPU: 0}
    assert state.called_go == {Player.HUMAN: False, Player.CPU: False}
    assert state.remaining_cards == {Player.HUMAN: 0, Player.CPU: 0}


def test_per_player_fields_are_not_shared() -> None:
    """Each game gets its own score and go tables."""

    first = GameData(rules=RulesConfig())
    second = GameData(rules=RulesConfig())
    first.add_score(Player.CPU, 5)
    first.called_go[Player.HUMAN] = True
    assert second.scores[Player.CPU] == 0
    assert not second.called_go[Player.HUMAN]
    assert first.scores is not second.scores


def test_pone_follows_dealer() -> None:
    state = GameData(rules=RulesConfig())
    assert state.pone is None
    state.dealer = Player.HUMAN
    assert state.pone is Player.CPU
