"""Game state models for cribbage."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .cards import Card, sort_cards
from .rules import RulesConfig
from .scoring import CountResult, ScoreEvent

__all__ = [
    "Player",
    "GamePhase",
    "AdvanceResult",
    "Step",
    "GameData",
    "PEGGING_LIMIT",
    "MAX_PILE",
    "create_initial_state",
]

PEGGING_LIMIT = 31
# Each player pegs at most four cards per hand.
MAX_PILE = 8
CRIB_SIZE = 4


class Player(Enum):
    """The two seats at the table."""

    HUMAN = "human"
    CPU = "cpu"

    def other(self) -> "Player":
        return Player.CPU if self is Player.HUMAN else Player.HUMAN


class GamePhase(Enum):
    """Phases of a hand, in the order they are normally visited."""

    CHOOSE_DEALER = "choose_dealer"
    ANNOUNCE_DEALER = "announce_dealer"
    CHOOSE_CRIB = "choose_crib"
    ANNOUNCE_NIBS = "announce_nibs"
    PEGGING = "pegging"
    ANNOUNCE_LAST_CARD = "announce_last_card"
    ANNOUNCE_THIRTY_ONE = "announce_thirty_one"
    COUNTING = "counting"
    WINNER = "winner"


class AdvanceResult(Enum):
    """Tells the driver whether to call again at once or wait for input."""

    CONTINUE = "continue"
    WAIT_FOR_USER = "wait_for_user"


@dataclass(frozen=True)
class Step:
    """Outcome of one advance action: the signal plus an optional transition."""

    result: AdvanceResult
    next_phase: Optional[GamePhase] = None


@dataclass
class GameData:
    """Complete mutable state of one game."""

    rules: RulesConfig
    rng: random.Random = field(default_factory=random.Random)
    phase: GamePhase = GamePhase.CHOOSE_DEALER
    scores: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    dealer: Optional[Player] = None
    current_player: Optional[Player] = None
    hands: Dict[Player, List[Card]] = field(default_factory=lambda: {p: [] for p in Player})
    original_hands: Dict[Player, List[Card]] = field(default_factory=lambda: {p: [] for p in Player})
    crib: List[Card] = field(default_factory=list)
    up_card: Optional[Card] = None
    cut_cards: Dict[Player, Optional[Card]] = field(default_factory=lambda: {p: None for p in Player})
    cut_slots: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    crib_choices: List[int] = field(default_factory=lambda: [0, 0])
    pile: List[Card] = field(default_factory=list)
    pegging_count: int = 0
    called_go: Dict[Player, bool] = field(default_factory=lambda: {p: False for p in Player})
    remaining_cards: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    last_card_player: Optional[Player] = None
    score_events: List[ScoreEvent] = field(default_factory=list)
    counts: List[CountResult] = field(default_factory=list)

    def __repr__(self) -> str:  # pragma: no cover - simple
        return (
            f"GameData(phase={self.phase.name}, scores={self.scores}, dealer={self.dealer}, "
            f"current_player={self.current_player}, pegging_count={self.pegging_count})"
        )

    @property
    def pone(self) -> Optional[Player]:
        """Return the non-dealer, who leads the pegging and counts first."""

        return None if self.dealer is None else self.dealer.other()

    @property
    def crib_ready(self) -> bool:
        return all(choice != 0 for choice in self.crib_choices)

    def set_hands(self, hands: Dict[Player, Sequence[Card]]) -> None:
        """Set player hands keeping them sorted."""

        self.hands = {player: sort_cards(cards) for player, cards in hands.items()}

    def add_score(self, player: Player, points: int) -> None:
        self.scores[player] += points

    def is_playable(self, card: Card) -> bool:
        """Return whether the card fits under the pegging limit."""

        return card.value + self.pegging_count <= PEGGING_LIMIT

    def has_valid_play(self, player: Player) -> bool:
        return any(self.is_playable(card) for card in self.hands[player])

    def hands_exhausted(self) -> bool:
        return all(self.remaining_cards[player] == 0 for player in Player)


def create_initial_state(rules: RulesConfig, seed: Optional[int] = None) -> GameData:
    """Create a fresh game state sitting before the cut for deal."""

    return GameData(rules=rules, rng=random.Random(seed))


__all__.append("CRIB_SIZE")
