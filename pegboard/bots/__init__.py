"""Opponent strategies for Pegboard."""

from __future__ import annotations

import random
from typing import Optional

from .base_bot import OpponentStrategy
from .first_legal_bot import FirstLegalStrategy
from .greedy_bot import GreedyStrategy
from .random_bot import RandomStrategy

__all__ = ["OpponentStrategy", "FirstLegalStrategy", "GreedyStrategy", "RandomStrategy", "build_strategy"]


def build_strategy(name: str, seed: Optional[int] = None) -> OpponentStrategy:
    """Instantiate the strategy registered under ``name``."""

    if name == "first_legal":
        return FirstLegalStrategy()
    if name == "random":
        return RandomStrategy(rng=random.Random(seed))
    if name == "greedy":
        return GreedyStrategy()
    msg = f"Unknown opponent strategy: {name}"
    raise KeyError(msg)
