"""Rule configuration models for cribbage."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .exceptions import RulesError

__all__ = [
    "GameRules",
    "OpponentRules",
    "EngineRules",
    "RulesConfig",
    "load_rules",
    "STRATEGY_NAMES",
]

STRATEGY_NAMES = ("first_legal", "random", "greedy")


@dataclass
class GameRules:
    """Table parameters for a single hand."""

    nibs_points: int = 2
    cut_slots: int = 13

    def __post_init__(self) -> None:
        if self.cut_slots < 2:
            msg = f"Need at least two cut slots, got {self.cut_slots}"
            raise RulesError(msg)
        if self.nibs_points < 0:
            msg = f"Nibs cannot be negative: {self.nibs_points}"
            raise RulesError(msg)

    def model_dump(self) -> Dict[str, Any]:
        return {
            "nibs_points": self.nibs_points,
            "cut_slots": self.cut_slots,
        }


@dataclass
class OpponentRules:
    """Which automated strategy sits opposite the human."""

    strategy: str = "first_legal"

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGY_NAMES:
            msg = f"Unknown opponent strategy: {self.strategy}"
            raise RulesError(msg)

    def model_dump(self) -> Dict[str, Any]:
        return {"strategy": self.strategy}


@dataclass
class EngineRules:
    """Guards on the driver loop."""

    max_autonomous_steps: int = 64

    def __post_init__(self) -> None:
        if self.max_autonomous_steps < 1:
            msg = "max_autonomous_steps must be positive"
            raise RulesError(msg)

    def model_dump(self) -> Dict[str, Any]:
        return {"max_autonomous_steps": self.max_autonomous_steps}


@dataclass
class RulesConfig:
    """Aggregate rule model for the game."""

    game: GameRules = field(default_factory=GameRules)
    opponent: OpponentRules = field(default_factory=OpponentRules)
    engine: EngineRules = field(default_factory=EngineRules)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"RulesConfig(game={self.game}, opponent={self.opponent}, engine={self.engine})"

    def model_dump(self) -> Dict[str, Any]:
        return {
            "game": self.game.model_dump(),
            "opponent": self.opponent.model_dump(),
            "engine": self.engine.model_dump(),
        }

    @classmethod
    def model_validate(cls, data: Dict[str, Any]) -> "RulesConfig":
        """Create a configuration instance from raw data."""

        if not isinstance(data, dict):
            msg = f"Rules must be a mapping, got {type(data).__name__}"
            raise RulesError(msg)

        def build(model_cls, values):
            if values is None:
                return model_cls()
            if not isinstance(values, dict):
                msg = f"Section for {model_cls.__name__} must be a mapping"
                raise RulesError(msg)
            try:
                return model_cls(**values)
            except TypeError as exc:
                raise RulesError(str(exc)) from exc

        return cls(
            game=build(GameRules, data.get("game")),
            opponent=build(OpponentRules, data.get("opponent")),
            engine=build(EngineRules, data.get("engine")),
        )


DEFAULT_RULES_PATH = Path(__file__).with_name("rules_cribbage.yaml")


def load_rules(path: Path | str | None = None) -> RulesConfig:
    """Load rule configuration from YAML, falling back to defaults."""

    cfg_path = Path(path) if path is not None else DEFAULT_RULES_PATH
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                msg = f"Could not parse rules file {cfg_path}: {exc}"
                raise RulesError(msg) from exc
    return RulesConfig.model_validate(data)

