"""Action utilities for the Pegboard engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .cards import Card
from .exceptions import InvalidActionError
from .state import PEGGING_LIMIT

__all__ = ["ActionMask", "legal_play_mask", "legal_plays"]


@dataclass
class ActionMask:
    """Binary mask describing which hand slots may be played."""

    values: List[int]

    def __post_init__(self) -> None:
        if any(val not in {0, 1} for val in self.values):
            msg = "Action masks must contain only 0 or 1 entries"
            raise ValueError(msg)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ActionMask(values={self.values})"

    def as_numpy(self):  # type: ignore[override]
        """Return the mask as a numpy array."""

        import numpy as np

        return np.array(self.values, dtype=np.int8)

    def first_slot(self) -> int:
        """Return the 1-based slot of the first legal entry."""

        return self.values.index(1) + 1


def legal_plays(hand: Iterable[Card], count: int) -> List[Card]:
    """Return cards in hand order that keep the count at or under 31."""

    return [card for card in hand if card.value + count <= PEGGING_LIMIT]


def legal_play_mask(hand: Iterable[Card], count: int) -> ActionMask:
    """Create an action mask for the cards that can legally be pegged."""

    hand_list = list(hand)
    mask = [1 if card.value + count <= PEGGING_LIMIT else 0 for card in hand_list]
    if not any(mask):
        raise InvalidActionError("No legal cards available")
    return ActionMask(values=mask)
