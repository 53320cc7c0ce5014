"""Rule configuration models for Euchre."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .exceptions import ConfigurationError

__all__ = [
    "DIFFICULTIES",
    "GameRules",
    "DifficultyProfile",
    "AloneRules",
    "AIRules",
    "RulesConfig",
    "load_rules",
]

DIFFICULTIES = ("easy", "medium", "hard", "expert")


@dataclass
class GameRules:
    """Global game parameters."""

    target_score: int = 10
    stick_the_dealer: bool = True
    max_redeals: int = 10

    def model_dump(self) -> Dict[str, Any]:
        return {
            "target_score": self.target_score,
            "stick_the_dealer": self.stick_the_dealer,
            "max_redeals": self.max_redeals,
        }


@dataclass(frozen=True)
class DifficultyProfile:
    """Probabilities driving one AI difficulty tier."""

    order_up: float
    call_trump: float
    play_skill: float

    def __post_init__(self) -> None:
        for name in ("order_up", "call_trump", "play_skill"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                msg = f"{name} must be within [0, 1], got {value}"
                raise ConfigurationError(msg)

    def model_dump(self) -> Dict[str, Any]:
        return {
            "order_up": self.order_up,
            "call_trump": self.call_trump,
            "play_skill": self.play_skill,
        }


def _default_difficulties() -> Dict[str, DifficultyProfile]:
    return {
        "easy": DifficultyProfile(order_up=0.2, call_trump=0.3, play_skill=0.3),
        "medium": DifficultyProfile(order_up=0.3, call_trump=0.5, play_skill=0.6),
        "hard": DifficultyProfile(order_up=0.4, call_trump=0.7, play_skill=0.8),
        "expert": DifficultyProfile(order_up=0.5, call_trump=0.8, play_skill=0.95),
    }


@dataclass
class AloneRules:
    """Chance that an AI seat goes alone after taking the bid."""

    round1_partner: float = 0.15
    round1_opponent: float = 0.08
    round2_partner: float = 0.10
    round2_opponent: float = 0.05

    def chance(self, round_number: int, partner_team: bool) -> float:
        if round_number == 1:
            return self.round1_partner if partner_team else self.round1_opponent
        return self.round2_partner if partner_team else self.round2_opponent

    def model_dump(self) -> Dict[str, Any]:
        return {
            "round1_partner": self.round1_partner,
            "round1_opponent": self.round1_opponent,
            "round2_partner": self.round2_partner,
            "round2_opponent": self.round2_opponent,
        }


@dataclass
class AIRules:
    """Configuration of the computer players."""

    default_difficulty: str = "medium"
    human_seat: str = "south"
    difficulties: Dict[str, DifficultyProfile] = field(default_factory=_default_difficulties)
    alone: AloneRules = field(default_factory=AloneRules)

    def profile(self, difficulty: str) -> DifficultyProfile:
        """Return the profile for ``difficulty``."""

        try:
            return self.difficulties[difficulty]
        except KeyError:
            msg = f"Unknown difficulty: {difficulty}"
            raise ConfigurationError(msg) from None

    def model_dump(self) -> Dict[str, Any]:
        return {
            "default_difficulty": self.default_difficulty,
            "human_seat": self.human_seat,
            "difficulties": {name: profile.model_dump() for name, profile in self.difficulties.items()},
            "alone": self.alone.model_dump(),
        }


@dataclass
class RulesConfig:
    """Aggregate rule model for the game."""

    game: GameRules = field(default_factory=GameRules)
    ai: AIRules = field(default_factory=AIRules)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"RulesConfig(game={self.game}, ai={self.ai})"

    def model_dump(self) -> Dict[str, Any]:
        return {
            "game": self.game.model_dump(),
            "ai": self.ai.model_dump(),
        }

    @classmethod
    def model_validate(cls, data: Dict[str, Any]) -> "RulesConfig":
        """Create a configuration instance from raw data."""

        if not isinstance(data, dict):
            msg = f"Rules must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)
        try:
            game = GameRules(**data.get("game", {}))
            ai_data = dict(data.get("ai", {}))
            difficulties = _default_difficulties()
            for name, values in (ai_data.pop("difficulties", None) or {}).items():
                difficulties[name] = DifficultyProfile(**values)
            alone = AloneRules(**(ai_data.pop("alone", None) or {}))
            ai = AIRules(difficulties=difficulties, alone=alone, **ai_data)
        except TypeError as exc:
            raise ConfigurationError(f"Malformed rules: {exc}") from exc
        if ai.default_difficulty not in ai.difficulties:
            msg = f"Unknown default difficulty: {ai.default_difficulty}"
            raise ConfigurationError(msg)
        return cls(game=game, ai=ai)


DEFAULT_RULES_PATH = Path(__file__).with_name("rules_euchre.yaml")


def load_rules(path: Path | str | None = None) -> RulesConfig:
    """Load rule configuration from YAML, falling back to defaults."""

    cfg_path = Path(path) if path is not None else DEFAULT_RULES_PATH
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Cannot parse {cfg_path}: {exc}") from exc
    return RulesConfig.model_validate(data)
