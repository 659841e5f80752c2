"""Streamlit application entry point."""

from __future__ import annotations

import streamlit as st

from ..bots import build_strategy
from ..engine.game import CribbageGame, run_until_wait
from ..engine.rules import STRATEGY_NAMES, load_rules
from ..engine.scenes import (
    AnnounceDealerScene,
    AnnounceNibsScene,
    ChooseCribScene,
    CountingScene,
    DeckCutScene,
    PeggingScene,
)
from ..logging_config import setup_logging
from .components.game_status import render_status
from .components.hand_display import render_cards, render_hand
from .components.pegging_view import render_counts, render_pile


def _new_game(strategy_name: str) -> CribbageGame:
    previous = st.session_state.get("game")
    if previous is not None:
        previous.destroy()
    game = CribbageGame.new(rules=load_rules(), strategy=build_strategy(strategy_name))
    st.session_state["game"] = game
    return game


def _render(game: CribbageGame) -> int:
    """Draw the current scene and return the choice the human made, if any."""

    scene = game.render_scene()
    if isinstance(scene, DeckCutScene):
        st.write("Cut the deck for the deal.")
        return _cut_slots(game)
    if isinstance(scene, AnnounceDealerScene):
        render_cards([scene.chosen_cards[player] for player in scene.chosen_cards])
        st.write(f"{scene.first_dealer.value} deals first.")
        return 0 if st.button("Deal") else -1
    if isinstance(scene, ChooseCribScene):
        render_status(scene.scores, scene.crib_player)
        st.write("Choose two cards for the crib.")
        choice = render_hand(scene.human_cards, key="crib", selected=scene.human_crib_choices)
        if scene.ready_to_proceed and st.button("Lay away"):
            return 0
        return choice or -1
    if isinstance(scene, AnnounceNibsScene):
        render_status(scene.scores, scene.dealer)
        st.write(f"Up-card {scene.up_card.label}: two for his heels to {scene.dealer.value}.")
        render_cards(scene.human_cards)
        return 0 if st.button("Continue") else -1
    if isinstance(scene, PeggingScene):
        render_status(scene.scores, scene.dealer)
        st.write(f"Up-card: {scene.up_card.label}")
        render_pile(scene)
        choice = render_hand(scene.human_cards, key="peg")
        if scene.last_card:
            return 0 if st.button("Continue") else -1
        return choice or -1
    if isinstance(scene, CountingScene):
        render_status(scene.scores, scene.dealer)
        render_counts(scene.counts)
        return -1
    return -1


def _cut_slots(game: CribbageGame) -> int:
    slots = game.rules.game.cut_slots
    cols = st.columns(slots)
    for slot, col in enumerate(cols, start=1):
        if col.button("🂠", key=f"cut-{slot}"):
            return slot
    return -1


def main() -> None:
    """Run the Streamlit UI."""

    st.set_page_config(page_title="Pegboard", layout="wide")
    st.title("Pegboard")
    if "logging" not in st.session_state:
        setup_logging("INFO")
        st.session_state["logging"] = True
    strategy_name = st.sidebar.selectbox("Opponent", list(STRATEGY_NAMES))
    game = st.session_state.get("game")
    if game is None or st.sidebar.button("New game"):
        game = _new_game(strategy_name)
    st.sidebar.json(game.rules.model_dump())
    choice = _render(game)
    if choice >= 0:
        run_until_wait(game, choice)
        st.rerun()


if __name__ == "__main__":
    main()
