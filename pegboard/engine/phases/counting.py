"""Counting the hands and the crib after pegging."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..scoring import CountResult, score_counting
from ..state import AdvanceResult, GameData, Step

__all__ = ["CountingPhase"]

logger = logging.getLogger(__name__)


@dataclass
class CountingPhase:
    """Pone counts first, then the dealer's hand, then the dealer's crib."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "CountingPhase()"

    def count_hands(self, state: GameData) -> List[CountResult]:
        """Score each hand with the up-card and credit its owner."""

        pone, dealer = state.pone, state.dealer
        counts = [
            CountResult(owner=pone, cards=list(state.original_hands[pone]), up_card=state.up_card),
            CountResult(owner=dealer, cards=list(state.original_hands[dealer]), up_card=state.up_card),
            CountResult(owner=dealer, cards=list(state.crib), up_card=state.up_card, is_crib=True),
        ]
        for result in counts:
            result.events = score_counting(result.cards, result.up_card, is_crib=result.is_crib)
            state.add_score(result.owner, result.points)
            logger.debug(
                "%s %s counts %d: %s",
                result.owner.value,
                "crib" if result.is_crib else "hand",
                result.points,
                [event.value for event in result.events],
            )
        state.counts = counts
        state.score_events = [event for result in counts for event in result.events]
        return counts

    def wait(self, state: GameData, choice: int) -> Step:
        # Nothing follows the count of a single hand.
        return Step(AdvanceResult.WAIT_FOR_USER)
