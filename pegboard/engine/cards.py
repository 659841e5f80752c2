"""Card abstractions for the Pegboard cribbage engine."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Iterable, List, Optional, Tuple

import numpy as np

__all__ = [
    "Suit",
    "Rank",
    "Card",
    "CARD_VALUES",
    "RAND_RANGE",
    "create_deck",
    "draw",
    "is_card",
    "random_index",
]


class Suit(str, Enum):
    """Enumeration of the four suits."""

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Suit({self.value})"


class Rank(IntEnum):
    """Card ranks, ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """Return the short face label used on card indices."""

        return RANK_LABELS[self]


RANK_LABELS = MappingProxyType(
    {
        Rank.ACE: "A",
        Rank.TWO: "2",
        Rank.THREE: "3",
        Rank.FOUR: "4",
        Rank.FIVE: "5",
        Rank.SIX: "6",
        Rank.SEVEN: "7",
        Rank.EIGHT: "8",
        Rank.NINE: "9",
        Rank.TEN: "10",
        Rank.JACK: "J",
        Rank.QUEEN: "Q",
        Rank.KING: "K",
    }
)

# Face cards count ten when adding up fifteens and the pegging count.
CARD_VALUES = MappingProxyType({rank: min(int(rank), 10) for rank in Rank})

# Raw output range of the generator fed to the rejection sampler.
RAND_RANGE = 2**31


@dataclass(frozen=True)
class Card:
    """Immutable representation of a single card."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if self.rank not in CARD_VALUES:
            msg = f"Unknown rank: {self.rank}"
            raise ValueError(msg)
        # Accept plain ints for ranks so fixtures can stay terse.
        object.__setattr__(self, "rank", Rank(self.rank))

    def __repr__(self) -> str:
        return f"Card({self.label})"

    @property
    def value(self) -> int:
        """Return the counting value of the card."""

        return CARD_VALUES[self.rank]

    @property
    def label(self) -> str:
        return f"{self.rank.label}{self.suit.value}"

    def encode(self) -> np.ndarray:
        """Encode the card as a one-hot numpy array."""

        vec = np.zeros(len(_DECK), dtype=np.float32)
        vec[_DECK.index(self)] = 1.0
        return vec


def create_deck() -> Tuple[Card, ...]:
    """Return the full 52-card population, suit by suit."""

    return _DECK


def is_card(card: Optional[Card]) -> bool:
    """Return True for a real card, False for an empty slot."""

    return isinstance(card, Card)


def random_index(rng: random.Random, span: int) -> int:
    """Return a uniform integer in ``[0, span)`` without modulo bias.

    Raw outputs at or above the largest multiple of ``span`` that fits in
    :data:`RAND_RANGE` are rejected and redrawn before reducing.
    """

    if span <= 0:
        msg = f"Span must be positive, got {span}"
        raise ValueError(msg)
    limit = (RAND_RANGE // span) * span
    while True:
        raw = rng.getrandbits(31)
        if raw < limit:
            return raw % span


def draw(count: int, rng: random.Random) -> List[Card]:
    """Draw ``count`` distinct cards uniformly from the full population."""

    if count < 0 or count > len(_DECK):
        msg = f"Cannot draw {count} cards from a {len(_DECK)} card deck"
        raise ValueError(msg)
    chosen = set()
    cards: List[Card] = []
    while len(cards) < count:
        index = random_index(rng, len(_DECK))
        if index in chosen:
            continue
        chosen.add(index)
        cards.append(_DECK[index])
    return cards


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Return cards in ascending rank order, suit breaking ties."""

    suit_order = {suit: idx for idx, suit in enumerate(Suit)}
    return sorted(cards, key=lambda card: (int(card.rank), suit_order[card.suit]))


_DECK: Tuple[Card, ...] = tuple(Card(suit=suit, rank=rank) for suit in Suit for rank in Rank)

__all__.append("sort_cards")
