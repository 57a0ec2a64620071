"""
Team DTO for the game engine.
A team is a tier, a roster, and an optional coach; an explicit minutes template
overrides the coach-derived one.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .coach import Coach
from .constants import DEFAULT_TIER, TIERS
from .player import Player


@dataclass
class Team:
    """A team in one of the three tiers."""

    id: int | str = 0
    name: str = ""
    tier: int = DEFAULT_TIER  # 1-3
    roster: List[Player] = field(default_factory=list)
    coach: Optional[Coach] = None
    minutes_template: Optional[List[int]] = None  # 13 decreasing slot values

    def __post_init__(self) -> None:
        if self.minutes_template is not None and any(m < 0 for m in self.minutes_template):
            raise ValueError(f"minutes_template values must be >= 0, got {self.minutes_template}")

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "tier": self.tier,
            "roster": [p.to_dict() for p in self.roster],
        }
        if self.coach is not None:
            d["coach"] = self.coach.to_dict()
        if self.minutes_template is not None:
            d["minutes_template"] = list(self.minutes_template)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        tier = data.get("tier", DEFAULT_TIER)
        coach = data.get("coach")
        template = data.get("minutes_template")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            tier=tier if tier in TIERS else DEFAULT_TIER,
            roster=[Player.from_dict(p) for p in data.get("roster") or []],
            coach=Coach.from_dict(coach) if coach else None,
            minutes_template=list(template) if template is not None else None,
        )
