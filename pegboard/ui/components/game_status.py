"""Score board panel."""

from __future__ import annotations

from typing import Dict, Optional

import streamlit as st

from ...engine.state import Player


def render_status(scores: Dict[Player, int], dealer: Optional[Player]) -> None:
    """Render scores and the dealer."""

    st.subheader("Scores")
    cols = st.columns(len(scores))
    for col, (player, score) in zip(cols, scores.items()):
        col.metric(player.value.title(), score)
    if dealer is not None:
        st.write(f"Dealer: {dealer.value}")
