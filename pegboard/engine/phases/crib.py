"""Dealing, laying away to the crib, and turning the up-card."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cards import Rank, draw
from ..state import AdvanceResult, GameData, GamePhase, Player, Step

__all__ = ["CribPhase", "DEAL_SIZE", "DISCARDS"]

logger = logging.getLogger(__name__)

DEAL_SIZE = 6
DISCARDS = 2


@dataclass
class CribPhase:
    """Handles the deal, the human's crib selection, and nibs."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "CribPhase()"

    def deal(self, state: GameData) -> None:
        """Deal six cards each and set aside the thirteenth as the up-card."""

        cards = draw(2 * DEAL_SIZE + 1, state.rng)
        state.set_hands({Player.HUMAN: cards[:DEAL_SIZE], Player.CPU: cards[DEAL_SIZE : 2 * DEAL_SIZE]})
        state.up_card = cards[-1]
        state.crib_choices = [0] * DISCARDS
        logger.debug("Dealt hands, up-card is %r", state.up_card)

    def choose(self, state: GameData, choice: int) -> Step:
        """Toggle a hand slot in or out of the crib, or commit with 0."""

        if choice == 0:
            if not state.crib_ready:
                return Step(AdvanceResult.WAIT_FOR_USER)
            if state.up_card.rank == Rank.JACK:
                return Step(AdvanceResult.WAIT_FOR_USER, GamePhase.ANNOUNCE_NIBS)
            return Step(AdvanceResult.CONTINUE, GamePhase.PEGGING)
        if not 1 <= choice <= len(state.hands[Player.HUMAN]):
            return Step(AdvanceResult.WAIT_FOR_USER)
        if choice in state.crib_choices:
            state.crib_choices[state.crib_choices.index(choice)] = 0
        elif 0 in state.crib_choices:
            state.crib_choices[state.crib_choices.index(0)] = choice
        return Step(AdvanceResult.WAIT_FOR_USER)

    def award_nibs(self, state: GameData) -> None:
        """His heels: the dealer pegs for turning up a jack."""

        if state.up_card.rank == Rank.JACK:
            state.add_score(state.dealer, state.rules.game.nibs_points)
            logger.debug("Nibs to %s", state.dealer.value)

    def acknowledge_nibs(self, state: GameData, choice: int) -> Step:
        return Step(AdvanceResult.CONTINUE, GamePhase.PEGGING)
