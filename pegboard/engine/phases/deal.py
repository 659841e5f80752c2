"""Cutting the deck to decide the first dealer."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cards import draw, random_index
from ..exceptions import InvariantViolation
from ..state import AdvanceResult, GameData, GamePhase, Player, Step

__all__ = ["CutForDealPhase"]

logger = logging.getLogger(__name__)


@dataclass
class CutForDealPhase:
    """Each player cuts a card; the lower rank deals."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "CutForDealPhase()"

    def start(self, state: GameData) -> None:
        """Clear everything left from a previous deal."""

        state.dealer = None
        state.up_card = None
        state.current_player = Player.HUMAN
        state.crib = []
        state.crib_choices = [0, 0]
        state.counts = []
        state.score_events = []
        for player in Player:
            state.hands[player] = []
            state.original_hands[player] = []
            state.cut_cards[player] = None
            state.cut_slots[player] = 0
            state.scores[player] = 0

    def cut(self, state: GameData, choice: int) -> Step:
        """Take the human's cut, then make the opponent's."""

        slots = state.rules.game.cut_slots
        if state.current_player is Player.HUMAN:
            if not 1 <= choice <= slots:
                return Step(AdvanceResult.WAIT_FOR_USER)
            # The slot is only for show: the card itself is random.
            state.cut_cards[Player.HUMAN] = draw(1, state.rng)[0]
            state.cut_slots[Player.HUMAN] = choice
            state.current_player = Player.CPU
            return Step(AdvanceResult.CONTINUE)
        if state.current_player is Player.CPU:
            human_card = state.cut_cards[Player.HUMAN]
            card = draw(1, state.rng)[0]
            # Redraw rather than resolve a tie on equal ranks.
            while card.rank == human_card.rank:
                card = draw(1, state.rng)[0]
            state.cut_cards[Player.CPU] = card
            slot = state.cut_slots[Player.HUMAN]
            while slot == state.cut_slots[Player.HUMAN]:
                slot = random_index(state.rng, slots) + 1
            state.cut_slots[Player.CPU] = slot
            return Step(AdvanceResult.WAIT_FOR_USER, GamePhase.ANNOUNCE_DEALER)
        logger.critical("Cut for deal does not know whose turn it is: %s", state.current_player)
        raise InvariantViolation(f"No player to cut for deal: {state.current_player}")

    def announce(self, state: GameData) -> None:
        """Lowest cut deals first."""

        human = state.cut_cards[Player.HUMAN]
        cpu = state.cut_cards[Player.CPU]
        state.dealer = Player.HUMAN if human.rank < cpu.rank else Player.CPU
        state.current_player = None
        logger.debug("Cut %r against %r, %s deals", human, cpu, state.dealer.value)

    def acknowledge(self, state: GameData, choice: int) -> Step:
        return Step(AdvanceResult.WAIT_FOR_USER, GamePhase.CHOOSE_CRIB)
