"""Scoring rules for pegging plays and hand counts.

Both evaluators are pure: they take a sequence of cards and return the
ordered list of :class:`ScoreEvent` detected, leaving announcement and point
bookkeeping to the caller.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from types import MappingProxyType
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .cards import Card, Rank

__all__ = [
    "ScoreEvent",
    "SCORE_VALUES",
    "CountResult",
    "MAX_PEGGING_RUN",
    "score_pegging",
    "score_counting",
    "total_points",
    "is_run",
    "find_pair_length",
    "find_run_length",
    "count_fifteens",
]

# Ace through seven already counts 28, so no eighth card can extend a run.
MAX_PEGGING_RUN = 7


class ScoreEvent(Enum):
    """Scoring combinations in detection order."""

    FIFTEEN = "Fifteen"
    THIRTY_ONE = "Thirty-one"
    LAST_CARD = "Last card"
    PAIR = "Pair"
    PAIR_ROYALE = "Pair royale"
    DOUBLE_PAIR_ROYALE = "Double pair royale"
    RUN_OF_THREE = "Run of three"
    RUN_OF_FOUR = "Run of four"
    RUN_OF_FIVE = "Run of five"
    RUN_OF_SIX = "Run of six"
    RUN_OF_SEVEN = "Run of seven"
    FLUSH = "Flush"
    FIVE_CARD_FLUSH = "Five card flush"
    NOBS = "Nobs"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ScoreEvent({self.value})"

    @property
    def points(self) -> int:
        return SCORE_VALUES[self]


SCORE_VALUES = MappingProxyType(
    {
        ScoreEvent.FIFTEEN: 2,
        ScoreEvent.THIRTY_ONE: 2,
        ScoreEvent.LAST_CARD: 1,
        ScoreEvent.PAIR: 2,
        ScoreEvent.PAIR_ROYALE: 6,
        ScoreEvent.DOUBLE_PAIR_ROYALE: 12,
        ScoreEvent.RUN_OF_THREE: 3,
        ScoreEvent.RUN_OF_FOUR: 4,
        ScoreEvent.RUN_OF_FIVE: 5,
        ScoreEvent.RUN_OF_SIX: 6,
        ScoreEvent.RUN_OF_SEVEN: 7,
        ScoreEvent.FLUSH: 4,
        ScoreEvent.FIVE_CARD_FLUSH: 5,
        ScoreEvent.NOBS: 1,
    }
)

# Indexed by number of matching cards beyond the first.
_PAIR_EVENTS = (None, ScoreEvent.PAIR, ScoreEvent.PAIR_ROYALE, ScoreEvent.DOUBLE_PAIR_ROYALE)

_RUN_EVENTS = MappingProxyType(
    {
        3: ScoreEvent.RUN_OF_THREE,
        4: ScoreEvent.RUN_OF_FOUR,
        5: ScoreEvent.RUN_OF_FIVE,
        6: ScoreEvent.RUN_OF_SIX,
        7: ScoreEvent.RUN_OF_SEVEN,
    }
)


@dataclass
class CountResult:
    """Outcome of counting one hand (or the crib) with the up-card."""

    owner: object
    cards: List[Card]
    up_card: Card
    is_crib: bool = False
    events: List[ScoreEvent] = field(default_factory=list)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"CountResult(owner={self.owner}, is_crib={self.is_crib}, points={self.points})"

    @property
    def points(self) -> int:
        return total_points(self.events)

    def encode(self) -> np.ndarray:
        """Return a histogram of events in :class:`ScoreEvent` order."""

        order = list(ScoreEvent)
        vec = np.zeros(len(order), dtype=np.float32)
        for event in self.events:
            vec[order.index(event)] += 1.0
        return vec


def total_points(events: Iterable[ScoreEvent]) -> int:
    """Sum the point values of the given events."""

    return sum(SCORE_VALUES[event] for event in events)


def _pile_total(cards: Sequence[Card]) -> int:
    return sum(card.value for card in cards)


def is_run(cards: Sequence[Card]) -> bool:
    """Return whether the cards form one run using every card.

    A repeated rank disqualifies the window outright, so 9-6-9-6 or
    5-4-3-4-1 never count as runs.
    """

    if len(cards) < 3:
        return False
    ranks = [int(card.rank) for card in cards]
    if len(set(ranks)) != len(ranks):
        return False
    return max(ranks) - min(ranks) == len(ranks) - 1


def find_pair_length(pile: Sequence[Card]) -> int:
    """Count cards directly before the latest play that share its rank."""

    if len(pile) < 2:
        return 0
    last_rank = pile[-1].rank
    matches = 0
    for card in reversed(pile[:-1]):
        if card.rank != last_rank:
            break
        matches += 1
    return matches


def find_run_length(pile: Sequence[Card]) -> int:
    """Return the longest run formed by the most recent plays, or 0."""

    longest = min(len(pile), MAX_PEGGING_RUN)
    for length in range(longest, 2, -1):
        if is_run(pile[-length:]):
            return length
    return 0


def score_pegging(pile: Sequence[Card], is_last_card: bool = False) -> List[ScoreEvent]:
    """Score the latest play against the pile since the count last reset."""

    events: List[ScoreEvent] = []
    if not pile:
        return events
    total = _pile_total(pile)
    if total == 15:
        events.append(ScoreEvent.FIFTEEN)
    if total == 31:
        events.append(ScoreEvent.THIRTY_ONE)
    pair_length = find_pair_length(pile)
    if pair_length:
        events.append(_PAIR_EVENTS[pair_length])
    run_length = find_run_length(pile)
    if run_length:
        events.append(_RUN_EVENTS[run_length])
    if is_last_card and total != 31:
        events.append(ScoreEvent.LAST_CARD)
    return events


def count_fifteens(cards: Sequence[Card]) -> int:
    """Return how many subsets of two or more cards add up to fifteen."""

    return sum(
        1
        for size in range(2, len(cards) + 1)
        for combo in combinations(cards, size)
        if _pile_total(combo) == 15
    )


def _score_pairs(cards: Sequence[Card]) -> List[ScoreEvent]:
    counts = Counter(card.rank for card in cards)
    events = []
    for rank in Rank:
        if counts[rank] > 1:
            events.append(_PAIR_EVENTS[counts[rank] - 1])
    return events


def _score_runs(cards: Sequence[Card]) -> List[ScoreEvent]:
    """Longer runs shadow shorter ones; equal length runs stack."""

    for size in range(len(cards), 2, -1):
        found = [combo for combo in combinations(cards, size) if is_run(combo)]
        if found:
            return [_RUN_EVENTS[size]] * len(found)
    return []


def _score_flush(hand: Sequence[Card], up_card: Card, is_crib: bool) -> Optional[ScoreEvent]:
    suits = {card.suit for card in hand}
    if len(suits) != 1:
        return None
    if up_card.suit in suits:
        return ScoreEvent.FIVE_CARD_FLUSH
    if is_crib:
        return None
    return ScoreEvent.FLUSH


def score_counting(hand: Sequence[Card], up_card: Card, is_crib: bool = False) -> List[ScoreEvent]:
    """Count a four card hand together with the up-card."""

    if len(hand) != 4:
        msg = f"Counting needs a four card hand, got {len(hand)}"
        raise ValueError(msg)
    cards = list(hand) + [up_card]
    events: List[ScoreEvent] = [ScoreEvent.FIFTEEN] * count_fifteens(cards)
    events.extend(_score_pairs(cards))
    events.extend(_score_runs(cards))
    flush = _score_flush(hand, up_card, is_crib)
    if flush is not None:
        events.append(flush)
    if any(card.rank == Rank.JACK and card.suit == up_card.suit for card in hand):
        events.append(ScoreEvent.NOBS)
    return events
