"""
Season stat accumulation.

Folds per-game box-score lines into season totals and derives per-game averages
and shooting percentages for the season driver.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from models.constants import COUNTING_STATS
from models.game_result import GameResult, PlayerGameStats

_TOTAL_FIELDS = [
    "games_played", "games_started", "minutes", *COUNTING_STATS,
    "field_goals_made", "field_goals_attempted",
    "three_pointers_made", "three_pointers_attempted",
    "free_throws_made", "free_throws_attempted",
]


@dataclass
class SeasonStats:
    """Running season totals for one player."""

    player_id: int | str = 0
    totals: Dict[str, int] = field(default_factory=lambda: {k: 0 for k in _TOTAL_FIELDS})

    @property
    def games_played(self) -> int:
        return self.totals["games_played"]

    def accumulate(self, line: PlayerGameStats) -> None:
        for key in _TOTAL_FIELDS:
            self.totals[key] += getattr(line, key)

    def averages(self) -> Dict[str, Any] | None:
        """Per-game averages (1 decimal) and shooting percentages (3 decimals)."""
        gp = self.games_played
        if gp == 0:
            return None
        t = self.totals
        avg: Dict[str, Any] = {"games_played": gp, "games_started": t["games_started"]}
        for key in ["minutes", *COUNTING_STATS]:
            avg[key] = round(t[key] / gp, 1)
        avg["fg_pct"] = _pct(t["field_goals_made"], t["field_goals_attempted"])
        avg["three_pct"] = _pct(t["three_pointers_made"], t["three_pointers_attempted"])
        avg["ft_pct"] = _pct(t["free_throws_made"], t["free_throws_attempted"])
        return avg

    def to_dict(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "totals": dict(self.totals)}


def _pct(made: int, attempted: int) -> float:
    return round(made / attempted, 3) if attempted > 0 else 0.0


def accumulate_game(result: GameResult, ledger: Dict[int | str, SeasonStats]) -> None:
    """Add every player line from both sides of *result* to *ledger*, in place."""
    for side in (result.home, result.away):
        for line in side.player_stats:
            # a DNP line still counts nothing toward games played
            if line.games_played == 0:
                continue
            stats = ledger.setdefault(line.player_id, SeasonStats(player_id=line.player_id))
            stats.accumulate(line)
