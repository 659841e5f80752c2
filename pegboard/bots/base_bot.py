"""Strategy interface for the automated opponent."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from ..engine.cards import Card

__all__ = ["OpponentStrategy"]


class OpponentStrategy(ABC):
    """Abstract base class for opponent decision logic.

    The engine asks for two discards once per hand and for one card on each
    pegging turn where a legal play exists.
    """

    name: str = "strategy"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return self.name

    @abstractmethod
    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> Tuple[Card, Card]:
        """Return the two cards from a six card hand to lay away."""

    @abstractmethod
    def choose_play(self, hand: Sequence[Card], pile: Sequence[Card], count: int) -> Card:
        """Return a card from hand whose value keeps the count at or under 31."""

    def reset(self) -> None:
        """Reset internal state if any."""
