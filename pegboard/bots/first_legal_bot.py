"""Placeholder opponent that always takes the first available option."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .base_bot import OpponentStrategy
from ..engine.actions import legal_play_mask
from ..engine.cards import Card


@dataclass
class FirstLegalStrategy(OpponentStrategy):
    """Lays away its two lowest cards and pegs the first legal card."""

    name: str = "first_legal"

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> Tuple[Card, Card]:
        return hand[0], hand[1]

    def choose_play(self, hand: Sequence[Card], pile: Sequence[Card], count: int) -> Card:
        mask = legal_play_mask(hand, count)
        return hand[mask.first_slot() - 1]
