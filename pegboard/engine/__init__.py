"""Cribbage engine: cards, scoring, state and phases."""
