"""Hand display utilities."""

from __future__ import annotations

from typing import Optional, Sequence

import streamlit as st

from ...engine.cards import Card


def card_label(card: Optional[Card]) -> str:
    return "·" if card is None else card.label


def render_hand(cards: Sequence[Optional[Card]], key: str, selected: Sequence[int] = ()) -> int:
    """Render hand slots as buttons and return the clicked slot, or 0."""

    cols = st.columns(len(cards) or 1)
    clicked = 0
    for slot, (col, card) in enumerate(zip(cols, cards), start=1):
        label = card_label(card)
        if slot in selected:
            label = f"[{label}]"
        if col.button(label, key=f"{key}-{slot}", disabled=card is None):
            clicked = slot
    return clicked


def render_cards(cards: Sequence[Optional[Card]]) -> None:
    """Render cards as plain text, for hands the human cannot act on."""

    st.write("  ".join(card_label(card) for card in cards) or "No cards")
