"""Read-only presentation snapshots of the game for renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple, Union

from .cards import Card
from .scoring import CountResult
from .state import GameData, GamePhase, Player

__all__ = [
    "BlankScene",
    "DeckCutScene",
    "AnnounceDealerScene",
    "ChooseCribScene",
    "AnnounceNibsScene",
    "PeggingScene",
    "CountingScene",
    "RenderScene",
    "project_scene",
]

Slots = Tuple[Optional[Card], ...]


@dataclass(frozen=True)
class BlankScene:
    """Nothing to draw."""


@dataclass(frozen=True)
class DeckCutScene:
    human_card: Optional[Card]
    chosen_slot: int


@dataclass(frozen=True)
class AnnounceDealerScene:
    chosen_cards: Dict[Player, Optional[Card]]
    chosen_slots: Tuple[int, int]
    first_dealer: Player


@dataclass(frozen=True)
class ChooseCribScene:
    human_cards: Slots
    human_crib_choices: Tuple[int, int]
    ready_to_proceed: bool
    crib_player: Player
    scores: Dict[Player, int]


@dataclass(frozen=True)
class AnnounceNibsScene:
    human_cards: Slots
    up_card: Card
    scores: Dict[Player, int]
    dealer: Player


@dataclass(frozen=True)
class PeggingScene:
    human_cards: Slots
    up_card: Card
    scores: Dict[Player, int]
    dealer: Player
    played_cards: Tuple[Card, ...]
    pegging_count: int
    current_player: Optional[Player]
    called_go: Dict[Player, bool]
    remaining_cpu_cards: int
    last_card: bool
    last_card_player: Optional[Player]


@dataclass(frozen=True)
class CountingScene:
    counts: Tuple[CountResult, ...]
    up_card: Card
    scores: Dict[Player, int]
    dealer: Player


RenderScene = Union[
    BlankScene,
    DeckCutScene,
    AnnounceDealerScene,
    ChooseCribScene,
    AnnounceNibsScene,
    PeggingScene,
    CountingScene,
]


def _slots(cards: Sequence[Card], size: int) -> Slots:
    """Pad to a fixed slot count so slot numbers stay positional."""

    padded = list(cards[:size])
    padded.extend([None] * (size - len(padded)))
    return tuple(padded)


def _kept_cards(state: GameData) -> Sequence[Card]:
    """The human's hand without the cards marked for the crib."""

    hand = state.hands[Player.HUMAN]
    return [card for slot, card in enumerate(hand, start=1) if slot not in state.crib_choices]


def project_scene(state: Optional[GameData]) -> RenderScene:
    """Copy the parts of the state that the current phase displays."""

    if state is None:
        return BlankScene()
    phase = state.phase
    scores = dict(state.scores)
    human_hand = state.hands[Player.HUMAN]
    if phase is GamePhase.CHOOSE_DEALER:
        return DeckCutScene(human_card=state.cut_cards[Player.HUMAN], chosen_slot=state.cut_slots[Player.HUMAN])
    if phase is GamePhase.ANNOUNCE_DEALER:
        return AnnounceDealerScene(
            chosen_cards=dict(state.cut_cards),
            chosen_slots=(state.cut_slots[Player.HUMAN], state.cut_slots[Player.CPU]),
            first_dealer=state.dealer,
        )
    if phase is GamePhase.CHOOSE_CRIB:
        return ChooseCribScene(
            human_cards=_slots(human_hand, 6),
            human_crib_choices=(state.crib_choices[0], state.crib_choices[1]),
            ready_to_proceed=state.crib_ready,
            crib_player=state.dealer,
            scores=scores,
        )
    if phase is GamePhase.ANNOUNCE_NIBS:
        return AnnounceNibsScene(
            human_cards=_slots(_kept_cards(state), 4),
            up_card=state.up_card,
            scores=scores,
            dealer=state.dealer,
        )
    if phase in (GamePhase.PEGGING, GamePhase.ANNOUNCE_LAST_CARD, GamePhase.ANNOUNCE_THIRTY_ONE):
        return PeggingScene(
            human_cards=_slots(human_hand, 4),
            up_card=state.up_card,
            scores=scores,
            dealer=state.dealer,
            played_cards=tuple(state.pile),
            pegging_count=state.pegging_count,
            current_player=state.current_player,
            called_go=dict(state.called_go),
            remaining_cpu_cards=state.remaining_cards[Player.CPU],
            last_card=phase is GamePhase.ANNOUNCE_LAST_CARD,
            last_card_player=state.last_card_player,
        )
    if phase is GamePhase.COUNTING:
        return CountingScene(counts=tuple(state.counts), up_card=state.up_card, scores=scores, dealer=state.dealer)
    return BlankScene()
