"""Pegboard package."""

from __future__ import annotations

from .engine.game import CribbageGame, run_until_wait
from .engine.rules import load_rules

__all__ = ["CribbageGame", "load_rules", "run_until_wait"]
