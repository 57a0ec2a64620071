"""
Coach DTO for the game engine.
All traits are scored 1-100 (50 = league average). The coaching side owns how a coach
comes to exist; the engine only turns traits into per-match CoachModifiers.
"""
from dataclasses import dataclass
from typing import Dict, Any

from .constants import COACH_TRAITS

TRAIT_MIN = 1
TRAIT_MAX = 100


@dataclass
class Coach:
    """A head coach: overall grade plus seven style traits."""

    id: int | str | None = None
    name: str = ""
    overall: int = 50
    pace: int = 50
    three_point_tendency: int = 50
    defensive_intensity: int = 50
    ball_movement: int = 50
    bench_usage: int = 50
    player_development: int = 50
    adaptability: int = 50

    def __post_init__(self) -> None:
        for key in COACH_TRAITS:
            val = getattr(self, key)
            if not TRAIT_MIN <= val <= TRAIT_MAX:
                raise ValueError(f"{key} must be between {TRAIT_MIN} and {TRAIT_MAX}, got {val}")
        if not 0 <= self.overall <= 99:
            raise ValueError(f"overall must be between 0 and 99, got {self.overall}")

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"name": self.name, "overall": self.overall}
        if self.id is not None:
            d["id"] = self.id
        d["traits"] = {key: getattr(self, key) for key in COACH_TRAITS}
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coach":
        traits = data.get("traits") or {}
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            overall=data.get("overall", 50),
            **{key: traits.get(key, data.get(key, 50)) for key in COACH_TRAITS},
        )


@dataclass(frozen=True)
class CoachModifiers:
    """Per-match coaching constants. The default instance is the neutral (no coach) set."""

    pace_modifier: float = 0.0
    three_pt_rate_modifier: float = 0.0
    defense_modifier: float = 0.0  # applied to the *opponent's* shooting percentages
    steal_block_multiplier: float = 1.0
    foul_modifier: float = 1.0
    assist_multiplier: float = 1.0
    turnover_modifier: float = 1.0
    bench_depth: float = 0.5
    adaptability_bonus: float = 0.0
    overall_bonus: float = 0.0
