"""Tests for opponent strategies and action masks."""

from __future__ import annotations

import random

import numpy as np
import pytest

from ...bots import FirstLegalStrategy, GreedyStrategy, RandomStrategy, build_strategy
from ...bots.greedy_bot import expected_hand_points
from ...engine.actions import ActionMask, legal_play_mask, legal_plays
from ...engine.cards import Card, Rank, Suit, draw, sort_cards
from ...engine.exceptions import InvalidActionError
from ..fixtures.hands import parse_cards


def test_legal_play_mask() -> None:
    hand = parse_cards("A5QK")
    mask = legal_play_mask(hand, 25)
    assert mask.values == [1, 1, 0, 0]
    assert mask.first_slot() == 1
    assert mask.as_numpy().dtype == np.int8


def test_legal_play_mask_without_legal_card() -> None:
    with pytest.raises(InvalidActionError):
        legal_play_mask(parse_cards("9TJQ"), 23)


def test_action_mask_rejects_non_binary_values() -> None:
    with pytest.raises(ValueError):
        ActionMask(values=[0, 2])


def test_first_legal_discards_lowest_cards() -> None:
    hand = sort_cards(parse_cards("K3A9Q5"))
    assert FirstLegalStrategy().choose_discards(hand, is_dealer=False) == (hand[0], hand[1])


def test_first_legal_skips_cards_over_limit() -> None:
    hand = parse_cards("K5", Suit.HEARTS)
    assert FirstLegalStrategy().choose_play(hand, [], 25) == Card(Suit.HEARTS, Rank.FIVE)


def test_random_strategy_plays_only_legal_cards() -> None:
    strategy = RandomStrategy(rng=random.Random(5))
    hand = parse_cards("A5QK")
    for _ in range(50):
        assert strategy.choose_play(hand, [], 25).value <= 6
    first, second = strategy.choose_discards(parse_cards("A23456"), is_dealer=True)
    assert first != second


def test_random_strategy_without_legal_card() -> None:
    with pytest.raises(InvalidActionError):
        RandomStrategy().choose_play(parse_cards("KQ"), [], 30)


def test_greedy_prefers_run_over_fifteen() -> None:
    pile = parse_cards("67", Suit.DIAMONDS)
    hand = parse_cards("829", Suit.HEARTS)
    assert GreedyStrategy().choose_play(hand, pile, 13).rank == Rank.EIGHT


def test_greedy_breaks_ties_with_highest_card() -> None:
    pile = parse_cards("K", Suit.DIAMONDS)
    hand = parse_cards("A23", Suit.HEARTS)
    assert GreedyStrategy().choose_play(hand, pile, 10).rank == Rank.THREE


def test_greedy_keeps_the_strongest_four() -> None:
    hand = [
        Card(Suit.CLUBS, Rank.FIVE),
        Card(Suit.DIAMONDS, Rank.FIVE),
        Card(Suit.HEARTS, Rank.FIVE),
        Card(Suit.SPADES, Rank.JACK),
        Card(Suit.DIAMONDS, Rank.KING),
        Card(Suit.CLUBS, Rank.TWO),
    ]
    discards = GreedyStrategy().choose_discards(hand, is_dealer=True)
    assert set(discards) == {Card(Suit.DIAMONDS, Rank.KING), Card(Suit.CLUBS, Rank.TWO)}


def test_greedy_discards_need_a_full_deal() -> None:
    with pytest.raises(InvalidActionError):
        GreedyStrategy().choose_discards(parse_cards("A"), is_dealer=False)
    with pytest.raises(InvalidActionError):
        GreedyStrategy().choose_discards(parse_cards("A2345"), is_dealer=True)


def test_expected_hand_points_averages_unseen_up_cards() -> None:
    hand = draw(6, random.Random(9))
    value = expected_hand_points(hand[:4], hand)
    assert value >= 0


def test_build_strategy() -> None:
    assert isinstance(build_strategy("first_legal"), FirstLegalStrategy)
    assert isinstance(build_strategy("greedy"), GreedyStrategy)
    assert isinstance(build_strategy("random", seed=1), RandomStrategy)
    with pytest.raises(KeyError):
        build_strategy("alpha")
