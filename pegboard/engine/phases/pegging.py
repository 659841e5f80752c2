"""Pegging: alternate plays onto the pile up to thirty-one."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ...bots.base_bot import OpponentStrategy
from ..cards import Card, sort_cards
from ..exceptions import InvalidActionError, InvariantViolation
from ..scoring import ScoreEvent, score_pegging, total_points
from ..state import (
    CRIB_SIZE,
    MAX_PILE,
    PEGGING_LIMIT,
    AdvanceResult,
    GameData,
    GamePhase,
    Player,
    Step,
)

__all__ = ["PeggingPhase"]

logger = logging.getLogger(__name__)


@dataclass
class PeggingPhase:
    """Runs pegging segments until both hands are empty."""

    strategy: OpponentStrategy

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PeggingPhase(strategy={self.strategy!r})"

    def start(self, state: GameData) -> None:
        """Open a new segment; on the first one, form the crib as well."""

        state.pile = []
        state.pegging_count = 0
        state.score_events = []
        for player in Player:
            state.called_go[player] = False
        if state.current_player is not None:
            return
        cpu_discards = self.strategy.choose_discards(list(state.hands[Player.CPU]), state.dealer is Player.CPU)
        self._lay_away(state, cpu_discards)
        for player in Player:
            state.remaining_cards[player] = len(state.hands[player])
        state.current_player = state.pone
        logger.debug("Pegging starts with %s leading", state.current_player.value)

    def _lay_away(self, state: GameData, cpu_discards: Sequence[Card]) -> None:
        human_hand = state.hands[Player.HUMAN]
        cpu_hand = state.hands[Player.CPU]
        if len(set(cpu_discards)) != 2 or any(card not in cpu_hand for card in cpu_discards):
            raise InvalidActionError(f"Strategy discarded cards it does not hold: {cpu_discards}")
        human_discards = [human_hand[choice - 1] for choice in state.crib_choices]
        state.set_hands(
            {
                Player.HUMAN: [card for card in human_hand if card not in human_discards],
                Player.CPU: [card for card in cpu_hand if card not in cpu_discards],
            }
        )
        state.crib = sort_cards([*human_discards, *cpu_discards])
        if len(state.crib) != CRIB_SIZE:
            logger.critical("Crib holds %d cards", len(state.crib))
            raise InvariantViolation(f"Crib must hold {CRIB_SIZE} cards, got {len(state.crib)}")
        # Pegging empties the hands, so keep what each player counts later.
        for player in Player:
            state.original_hands[player] = list(state.hands[player])

    def play(self, state: GameData, choice: int) -> Step:
        """Take one pegging turn for the current player."""

        if state.pegging_count == PEGGING_LIMIT:
            state.current_player = state.current_player.other()
            return Step(AdvanceResult.CONTINUE, GamePhase.ANNOUNCE_THIRTY_ONE)
        if all(state.called_go.values()):
            return Step(AdvanceResult.WAIT_FOR_USER, GamePhase.ANNOUNCE_LAST_CARD)

        player = state.current_player
        if player is None:
            logger.critical("Pegging does not know whose turn it is")
            raise InvariantViolation("No current player during pegging")

        if state.remaining_cards[player] == 0 or not state.has_valid_play(player):
            state.called_go[player] = True
            state.score_events = []
            logger.debug("%s calls go at %d", player.value, state.pegging_count)
        elif player is Player.HUMAN:
            card = self._human_card(state, choice)
            if card is None:
                return Step(AdvanceResult.WAIT_FOR_USER)
            self._peg(state, player, card)
        else:
            card = self.strategy.choose_play(list(state.hands[player]), list(state.pile), state.pegging_count)
            if card not in state.hands[player] or not state.is_playable(card):
                raise InvalidActionError(f"Strategy chose an illegal play: {card!r}")
            self._peg(state, player, card)

        state.current_player = player.other()
        return Step(AdvanceResult.CONTINUE)

    def _human_card(self, state: GameData, choice: int) -> Optional[Card]:
        """Return the card in the chosen slot if it may be played."""

        hand = state.hands[Player.HUMAN]
        if not 1 <= choice <= len(hand):
            return None
        card = hand[choice - 1]
        if not state.is_playable(card):
            return None
        return card

    def _peg(self, state: GameData, player: Player, card: Card) -> None:
        if len(state.pile) >= MAX_PILE:
            logger.critical("Pegging pile overflow with %r", state.pile)
            raise InvariantViolation(f"Pegging pile cannot hold more than {MAX_PILE} cards")
        state.hands[player].remove(card)
        state.remaining_cards[player] -= 1
        state.pile.append(card)
        state.pegging_count += card.value
        state.score_events = score_pegging(state.pile)
        points = total_points(state.score_events)
        state.add_score(player, points)
        state.last_card_player = player
        logger.debug(
            "%s pegs %r for %d (count %d): %s",
            player.value,
            card,
            points,
            state.pegging_count,
            [event.value for event in state.score_events],
        )

    def announce_last_card(self, state: GameData) -> None:
        """One for last when neither player could reach thirty-one."""

        state.score_events = [ScoreEvent.LAST_CARD]
        state.add_score(state.last_card_player, total_points(state.score_events))
        logger.debug("Last card to %s", state.last_card_player.value)

    def announce_thirty_one(self, state: GameData) -> None:
        state.current_player = state.current_player.other()

    def finish_segment(self, state: GameData, choice: int) -> Step:
        """Start another segment, or move on to counting once both hands are empty."""

        if state.hands_exhausted():
            return Step(AdvanceResult.CONTINUE, GamePhase.COUNTING)
        return Step(AdvanceResult.CONTINUE, GamePhase.PEGGING)
