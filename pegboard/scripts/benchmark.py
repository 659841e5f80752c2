"""Benchmark: play hands with a strategy sitting in the human seat."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Optional

from ..bots import OpponentStrategy, build_strategy
from ..engine.game import CribbageGame, run_until_wait
from ..engine.rules import STRATEGY_NAMES, load_rules
from ..engine.state import GamePhase, Player
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


def autopilot_choice(game: CribbageGame, pilot: OpponentStrategy) -> int:
    """Translate the pilot's decision for the human seat into a choice."""

    state = game.state
    hand = state.hands[Player.HUMAN]
    if state.phase is GamePhase.CHOOSE_DEALER:
        return 1
    if state.phase is GamePhase.CHOOSE_CRIB:
        if state.crib_ready:
            return 0
        first, second = pilot.choose_discards(list(hand), state.dealer is Player.HUMAN)
        for card in (first, second):
            slot = hand.index(card) + 1
            if slot not in state.crib_choices:
                return slot
        return 0
    if state.phase is GamePhase.PEGGING and state.current_player is Player.HUMAN and state.has_valid_play(Player.HUMAN):
        card = pilot.choose_play(list(hand), list(state.pile), state.pegging_count)
        return hand.index(card) + 1
    return 0


def play_hand(game: CribbageGame, pilot: OpponentStrategy, max_inputs: int = 200) -> None:
    """Feed autopilot choices until the hand has been counted."""

    for _ in range(max_inputs):
        if game.phase is GamePhase.COUNTING:
            return
        run_until_wait(game, autopilot_choice(game, pilot))
    raise RuntimeError(f"Hand did not reach counting within {max_inputs} inputs")


def main(argv: Optional[list[str]] = None) -> None:
    """Run benchmark hands and report throughput."""

    parser = argparse.ArgumentParser()
    parser.add_argument("--hands", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--pilot", choices=STRATEGY_NAMES, default="greedy")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    rules = load_rules()
    pilot = build_strategy(args.pilot, seed=args.seed)
    totals = {player: 0 for player in Player}
    start = time.perf_counter()
    for index in range(args.hands):
        seed = None if args.seed is None else args.seed + index
        game = CribbageGame.new(rules=rules, seed=seed)
        play_hand(game, pilot)
        for player in Player:
            totals[player] += game.state.scores[player]
        game.destroy()
    duration = time.perf_counter() - start
    print(f"Played {args.hands} hands in {duration:.2f}s")
    for player, total in totals.items():
        print(f"{player.value}: {total / max(args.hands, 1):.2f} points per hand")


if __name__ == "__main__":
    main()
