"""
Game result DTOs for the game engine.

PlayerGameStats holds the box-score line for a single player in a single game.
TeamGameResult holds one side's score plus its list of player stats.
GameResult wraps home and away TeamGameResults and is the only artifact handed downstream.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List


@dataclass
class PlayerGameStats:
    """One player's stat line for a single game (box-score entry)."""

    player_id: int | str = 0
    team_id: int | str = 0
    name: str = ""
    position: str = ""

    games_played: int = 0
    games_started: int = 0
    minutes: int = 0

    # --- Counting stats ---
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fouls: int = 0

    # --- Shooting ---
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    three_pointers_made: int = 0
    three_pointers_attempted: int = 0
    free_throws_made: int = 0
    free_throws_attempted: int = 0

    @property
    def two_pointers_made(self) -> int:
        return self.field_goals_made - self.three_pointers_made

    @property
    def two_pointers_attempted(self) -> int:
        return self.field_goals_attempted - self.three_pointers_attempted

    def recompute_points(self) -> None:
        self.points = 2 * self.two_pointers_made + 3 * self.three_pointers_made + self.free_throws_made

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "team_id": self.team_id,
            "name": self.name,
            "position": self.position,
            "games_played": self.games_played,
            "games_started": self.games_started,
            "minutes": self.minutes,
            "points": self.points,
            "rebounds": self.rebounds,
            "assists": self.assists,
            "steals": self.steals,
            "blocks": self.blocks,
            "turnovers": self.turnovers,
            "fouls": self.fouls,
            "field_goals_made": self.field_goals_made,
            "field_goals_attempted": self.field_goals_attempted,
            "three_pointers_made": self.three_pointers_made,
            "three_pointers_attempted": self.three_pointers_attempted,
            "free_throws_made": self.free_throws_made,
            "free_throws_attempted": self.free_throws_attempted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerGameStats":
        return cls(**{k: data.get(k, getattr(cls(), k)) for k in cls.__dataclass_fields__})


@dataclass
class TeamGameResult:
    """One side of a game: final score plus individual player stats.

    ``score`` equals the sum of player points, except when neither side had an
    available player: home is then awarded a bare point with no stat line.
    """

    team_id: int | str = 0
    team_name: str = ""
    score: int = 0

    player_stats: List[PlayerGameStats] = field(default_factory=list)

    @property
    def minutes(self) -> int:
        return sum(ps.minutes for ps in self.player_stats)

    @property
    def field_goals_made(self) -> int:
        return sum(ps.field_goals_made for ps in self.player_stats)

    @property
    def assists(self) -> int:
        return sum(ps.assists for ps in self.player_stats)

    @property
    def rebounds(self) -> int:
        return sum(ps.rebounds for ps in self.player_stats)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "team_name": self.team_name,
            "score": self.score,
            "player_stats": [ps.to_dict() for ps in self.player_stats],
        }


@dataclass
class GameResult:
    """Full result of a simulated game: home and away team results."""

    home: TeamGameResult = field(default_factory=TeamGameResult)
    away: TeamGameResult = field(default_factory=TeamGameResult)
    tier: int = 1
    is_playoffs: bool = False

    @property
    def home_score(self) -> int:
        return self.home.score

    @property
    def away_score(self) -> int:
        return self.away.score

    @property
    def home_won(self) -> bool:
        return self.home.score > self.away.score

    @property
    def winner(self) -> TeamGameResult:
        return self.home if self.home_won else self.away

    @property
    def loser(self) -> TeamGameResult:
        return self.away if self.home_won else self.home

    @property
    def point_diff(self) -> int:
        """Home score minus away score."""
        return self.home.score - self.away.score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home": self.home.to_dict(),
            "away": self.away.to_dict(),
            "tier": self.tier,
            "is_playoffs": self.is_playoffs,
            "home_won": self.home_won,
            "point_diff": self.point_diff,
        }
