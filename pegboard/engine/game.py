"""Game controller: the single entry point that mutates a game."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..bots import OpponentStrategy, build_strategy
from .exceptions import GameDestroyedError, InvariantViolation
from .phases.counting import CountingPhase
from .phases.crib import CribPhase
from .phases.deal import CutForDealPhase
from .phases.pegging import PeggingPhase
from .rules import RulesConfig, load_rules
from .scenes import BlankScene, RenderScene, project_scene
from .state import AdvanceResult, GameData, GamePhase, Step, create_initial_state

__all__ = ["CribbageGame", "run_until_wait"]

logger = logging.getLogger(__name__)


@dataclass
class CribbageGame:
    """State machine for one hand of human-versus-computer cribbage.

    Callers feed :meth:`advance` one integer per call (0 for no selection,
    otherwise a 1-based slot) and keep calling with 0 while it answers
    ``CONTINUE``. Bad choices are ignored rather than rejected.
    """

    rules: RulesConfig
    deal: CutForDealPhase
    crib: CribPhase
    pegging: PeggingPhase
    counting: CountingPhase
    state: GameData
    destroyed: bool = False

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"CribbageGame(phase={self.state.phase.name}, scores={self.state.scores})"

    @classmethod
    def new(
        cls,
        rules: Optional[RulesConfig] = None,
        seed: Optional[int] = None,
        strategy: Optional[OpponentStrategy] = None,
    ) -> "CribbageGame":
        """Construct a new game sitting at the cut for deal."""

        cfg = rules or load_rules()
        opponent = strategy or build_strategy(cfg.opponent.strategy, seed=seed)
        game = cls(
            rules=cfg,
            deal=CutForDealPhase(),
            crib=CribPhase(),
            pegging=PeggingPhase(strategy=opponent),
            counting=CountingPhase(),
            state=create_initial_state(cfg, seed=seed),
        )
        game._transition(GamePhase.CHOOSE_DEALER)
        return game

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def destroy(self) -> None:
        """Release the game; it can no longer be advanced."""

        self.destroyed = True
        logger.debug("Game destroyed in phase %s", self.state.phase.name)

    def render_scene(self) -> RenderScene:
        """Return a read-only snapshot for the current phase."""

        if self.destroyed:
            return BlankScene()
        return project_scene(self.state)

    def advance(self, choice: int = 0) -> AdvanceResult:
        """Run the current phase's advance action with the given choice."""

        if self.destroyed:
            raise GameDestroyedError("Cannot advance a destroyed game")
        state = self.state
        logger.debug(
            "Advancing %s with choice %d, current player %s",
            state.phase.name,
            choice,
            state.current_player,
        )
        step = self._dispatch(choice)
        if step.next_phase is not None:
            self._transition(step.next_phase)
        logger.debug("Advanced: %s, current player %s", step.result.name, state.current_player)
        return step.result

    def _dispatch(self, choice: int) -> Step:
        state = self.state
        phase = state.phase
        if phase is GamePhase.CHOOSE_DEALER:
            return self.deal.cut(state, choice)
        if phase is GamePhase.ANNOUNCE_DEALER:
            return self.deal.acknowledge(state, choice)
        if phase is GamePhase.CHOOSE_CRIB:
            return self.crib.choose(state, choice)
        if phase is GamePhase.ANNOUNCE_NIBS:
            return self.crib.acknowledge_nibs(state, choice)
        if phase is GamePhase.PEGGING:
            return self.pegging.play(state, choice)
        if phase in (GamePhase.ANNOUNCE_LAST_CARD, GamePhase.ANNOUNCE_THIRTY_ONE):
            return self.pegging.finish_segment(state, choice)
        if phase is GamePhase.COUNTING:
            return self.counting.wait(state, choice)
        if phase is GamePhase.WINNER:
            return Step(AdvanceResult.WAIT_FOR_USER)
        logger.critical("No advance action for phase %r", phase)
        raise InvariantViolation(f"Unknown phase: {phase!r}")

    def _transition(self, phase: GamePhase) -> None:
        """Enter ``phase`` and run its entry action once."""

        state = self.state
        logger.debug("Transitioning from %s to %s", state.phase.name, phase.name)
        state.phase = phase
        if phase is GamePhase.CHOOSE_DEALER:
            self.deal.start(state)
        elif phase is GamePhase.ANNOUNCE_DEALER:
            self.deal.announce(state)
        elif phase is GamePhase.CHOOSE_CRIB:
            self.crib.deal(state)
        elif phase is GamePhase.ANNOUNCE_NIBS:
            self.crib.award_nibs(state)
        elif phase is GamePhase.PEGGING:
            self.pegging.start(state)
        elif phase is GamePhase.ANNOUNCE_LAST_CARD:
            self.pegging.announce_last_card(state)
        elif phase is GamePhase.ANNOUNCE_THIRTY_ONE:
            self.pegging.announce_thirty_one(state)
        elif phase is GamePhase.COUNTING:
            self.counting.count_hands(state)
        elif phase is GamePhase.WINNER:
            pass
        else:
            logger.critical("No entry action for phase %r", phase)
            raise InvariantViolation(f"Unknown phase: {phase!r}")


def run_until_wait(
    game: CribbageGame,
    choice: int = 0,
    on_step: Optional[Callable[[RenderScene], None]] = None,
) -> int:
    """Advance with ``choice`` then with 0 until the game waits for the user.

    ``on_step`` receives the scene after every autonomous step, which lets a
    renderer pace the computer's moves. Returns the number of advance calls.
    """

    limit = game.rules.engine.max_autonomous_steps
    steps = 1
    result = game.advance(choice)
    while result is AdvanceResult.CONTINUE:
        if on_step is not None:
            on_step(game.render_scene())
        if steps >= limit:
            logger.critical("Game kept running for %d steps without waiting", steps)
            raise InvariantViolation(f"No pause for user input after {steps} steps")
        result = game.advance(0)
        steps += 1
    return steps
