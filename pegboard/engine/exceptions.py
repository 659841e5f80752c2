"""Exception hierarchy for Pegboard."""

from __future__ import annotations

__all__ = [
    "CribbageError",
    "InvalidActionError",
    "InvariantViolation",
    "GameDestroyedError",
    "RulesError",
]


class CribbageError(Exception):
    """Base exception for the project."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{self.__class__.__name__}({self.args})"


class InvalidActionError(CribbageError):
    """Raised when a strategy is asked for a move that does not exist."""


class InvariantViolation(CribbageError):
    """Raised when the engine reaches a state it can never legally be in.

    Not meant to be caught: it signals a programming defect.
    """


class GameDestroyedError(CribbageError):
    """Raised when a released game is advanced again."""


class RulesError(CribbageError):
    """Raised when a rules file cannot be turned into a configuration."""
