"""
Player DTO for the game engine.
Ratings 40-99, attributes 1-99. Loose records are normalized once in from_dict so the
engine never has to default a missing value at the point of use.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from .constants import (
    ATTRIBUTE_RANGE,
    DEFAULT_CHEMISTRY,
    DEFAULT_HEIGHT,
    DEFAULT_WEIGHT,
    DEFAULT_WINGSPAN,
    INJURY_STATUSES,
    NEUTRAL_ATTRIBUTE,
    PLAYER_ATTRIBUTES,
    RATING_RANGE,
)


def _clamp_int(value: Any, lo: int, hi: int, default: int) -> int:
    if value is None:
        return default
    try:
        return min(hi, max(lo, int(round(float(value)))))
    except (TypeError, ValueError):
        return default


@dataclass
class PlayerAttributes:
    """Optional attribute block (1-99, 50 = neutral)."""

    speed: int = NEUTRAL_ATTRIBUTE
    strength: int = NEUTRAL_ATTRIBUTE
    verticality: int = NEUTRAL_ATTRIBUTE
    endurance: int = NEUTRAL_ATTRIBUTE
    basketball_iq: int = NEUTRAL_ATTRIBUTE
    clutch: int = NEUTRAL_ATTRIBUTE
    coachability: int = NEUTRAL_ATTRIBUTE
    collaboration: int = NEUTRAL_ATTRIBUTE

    def to_dict(self) -> Dict[str, int]:
        return {key: getattr(self, key) for key in PLAYER_ATTRIBUTES}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerAttributes":
        lo, hi = ATTRIBUTE_RANGE
        # accept the camelCase key older saves use for basketball IQ
        if "basketball_iq" not in data and "basketballIQ" in data:
            data = {**data, "basketball_iq": data["basketballIQ"]}
        return cls(**{
            key: _clamp_int(data.get(key), lo, hi, NEUTRAL_ATTRIBUTE)
            for key in PLAYER_ATTRIBUTES
        })


@dataclass
class Measurables:
    """Physical measurables in inches (height, wingspan) and pounds (weight)."""

    height: int = DEFAULT_HEIGHT
    weight: int = DEFAULT_WEIGHT
    wingspan: int = DEFAULT_WINGSPAN

    def to_dict(self) -> Dict[str, int]:
        return {"height": self.height, "weight": self.weight, "wingspan": self.wingspan}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Measurables":
        return cls(
            height=_clamp_int(data.get("height"), 60, 96, DEFAULT_HEIGHT),
            weight=_clamp_int(data.get("weight"), 120, 400, DEFAULT_WEIGHT),
            wingspan=_clamp_int(data.get("wingspan"), 60, 100, DEFAULT_WINGSPAN),
        )


@dataclass
class Player:
    """A rostered player. Availability and effective rating are derived in models.ratings."""

    id: int | str = 0
    name: str = ""
    position: str = "SF"
    rating: int = 75  # composite 40-99
    effective_rating: Optional[float] = None  # already-penalized override from the fatigue/injury side
    fatigue: float = 0.0  # 0-100
    injury_status: str = "healthy"  # healthy | day-to-day | out
    injury_rating_penalty: float = 0.0  # <= 0, only applied while day-to-day
    resting: bool = False
    chemistry: int = DEFAULT_CHEMISTRY  # 0-100
    age: int = 25
    attributes: Optional[PlayerAttributes] = None
    measurables: Measurables = field(default_factory=Measurables)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "rating": self.rating,
            "fatigue": self.fatigue,
            "injury_status": self.injury_status,
            "injury_rating_penalty": self.injury_rating_penalty,
            "resting": self.resting,
            "chemistry": self.chemistry,
            "age": self.age,
            "measurables": self.measurables.to_dict(),
        }
        if self.effective_rating is not None:
            d["effective_rating"] = self.effective_rating
        if self.attributes is not None:
            d["attributes"] = self.attributes.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        lo, hi = RATING_RANGE
        status = str(data.get("injury_status") or "healthy").lower()
        if status not in INJURY_STATUSES:
            status = "healthy"
        attrs = data.get("attributes")
        effective = data.get("effective_rating")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            position=str(data.get("position") or "SF").upper(),
            rating=_clamp_int(data.get("rating"), lo, hi, 75),
            effective_rating=float(effective) if effective is not None else None,
            fatigue=min(100.0, max(0.0, float(data.get("fatigue") or 0.0))),
            injury_status=status,
            injury_rating_penalty=min(0.0, float(data.get("injury_rating_penalty") or 0.0)),
            resting=bool(data.get("resting", False)),
            chemistry=_clamp_int(data.get("chemistry"), 0, 100, DEFAULT_CHEMISTRY),
            age=_clamp_int(data.get("age"), 15, 50, 25),
            attributes=PlayerAttributes.from_dict(attrs) if attrs else None,
            measurables=Measurables.from_dict(data.get("measurables") or {}),
        )
