"""Random baseline opponent."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from .base_bot import OpponentStrategy
from ..engine.actions import legal_plays
from ..engine.cards import Card
from ..engine.exceptions import InvalidActionError


@dataclass
class RandomStrategy(OpponentStrategy):
    """Randomly selects discards and legal plays."""

    name: str = "random"
    rng: random.Random = field(default_factory=random.Random)

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> Tuple[Card, Card]:
        first, second = self.rng.sample(list(hand), 2)
        return first, second

    def choose_play(self, hand: Sequence[Card], pile: Sequence[Card], count: int) -> Card:
        options = legal_plays(hand, count)
        if not options:
            raise InvalidActionError("No legal cards available")
        return self.rng.choice(options)
