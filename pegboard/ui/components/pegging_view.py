"""Pegging pile and count breakdown components."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from ...engine.scenes import PeggingScene
from ...engine.scoring import CountResult
from .hand_display import render_cards


def render_pile(scene: PeggingScene) -> None:
    """Render the cards pegged since the count last reset."""

    st.subheader(f"Count: {scene.pegging_count}")
    render_cards(scene.played_cards)
    calls = [player.value for player, called in scene.called_go.items() if called]
    if calls:
        st.write(f"Go: {', '.join(calls)}")
    if scene.last_card and scene.last_card_player is not None:
        st.info(f"One for last card to {scene.last_card_player.value}")
    st.caption(f"Opponent has {scene.remaining_cpu_cards} cards left")


def render_counts(counts: Sequence[CountResult]) -> None:
    """Render each counted hand with its scoring combinations."""

    st.subheader("The count")
    for result in counts:
        title = "crib" if result.is_crib else "hand"
        st.write(f"**{result.owner.value} {title}**: {result.points}")
        render_cards([*result.cards, result.up_card])
        for event in result.events:
            st.write(f"- {event.value} for {event.points}")
