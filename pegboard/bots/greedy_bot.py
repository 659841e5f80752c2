"""Greedy baseline opponent."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import List, Sequence, Tuple

from .base_bot import OpponentStrategy
from ..engine.actions import legal_plays
from ..engine.cards import Card, create_deck
from ..engine.exceptions import InvalidActionError
from ..engine.phases.crib import DEAL_SIZE
from ..engine.scoring import score_counting, score_pegging, total_points


def _discard_bonus(first: Card, second: Card) -> int:
    """Points the two discards make on their own in the crib."""

    bonus = 0
    if first.rank == second.rank:
        bonus += 2
    if first.value + second.value == 15:
        bonus += 2
    return bonus


def expected_hand_points(kept: Sequence[Card], seen: Sequence[Card]) -> float:
    """Average count of the kept cards over every up-card not yet seen."""

    unseen = [card for card in create_deck() if card not in seen]
    total = sum(total_points(score_counting(kept, up_card)) for up_card in unseen)
    return total / len(unseen)


@dataclass
class GreedyStrategy(OpponentStrategy):
    """Keeps the best-averaging four cards and pegs for immediate points."""

    name: str = "greedy"

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> Tuple[Card, Card]:
        if len(hand) != DEAL_SIZE:
            msg = f"Discards are chosen from a {DEAL_SIZE} card hand, got {len(hand)}"
            raise InvalidActionError(msg)

        def value(discards: Tuple[Card, Card]) -> float:
            kept: List[Card] = [card for card in hand if card not in discards]
            bonus = _discard_bonus(*discards)
            return expected_hand_points(kept, hand) + (bonus if is_dealer else -bonus)

        return max(combinations(hand, 2), key=value)

    def choose_play(self, hand: Sequence[Card], pile: Sequence[Card], count: int) -> Card:
        options = legal_plays(hand, count)
        if not options:
            raise InvalidActionError("No legal cards available")
        # Highest value first so ties go to the card that is hardest to play later.
        options.sort(key=lambda card: card.value, reverse=True)
        return max(options, key=lambda card: total_points(score_pegging([*pile, card])))
