"""
Team-level inputs the engine consumes: coach game modifiers, the coach's minutes
template, and the team chemistry scalar.
"""
from __future__ import annotations

import random

from models.coach import Coach, CoachModifiers
from models.constants import (
    DEFAULT_CHEMISTRY,
    MINUTES_DEEP,
    MINUTES_NORMAL,
    MINUTES_TIGHT,
)
from models.team import Team

from .randomness import clamp


def game_modifiers(coach: Coach | None, rng: random.Random) -> CoachModifiers:
    """Translate coach traits into fixed per-match modifiers.

    The adaptability bonus is rolled once per match; everything else is a
    linear function of a trait around the league average of 50.
    """
    if coach is None:
        return CoachModifiers()
    intensity = coach.defensive_intensity - 50
    movement = coach.ball_movement - 50
    return CoachModifiers(
        pace_modifier=(coach.pace - 50) * 0.16,
        three_pt_rate_modifier=(coach.three_point_tendency - 50) * 0.0027,
        defense_modifier=intensity * -0.0005,
        steal_block_multiplier=1.0 + intensity * 0.0045,
        foul_modifier=1.0 + intensity * 0.003,
        assist_multiplier=1.0 + movement * 0.0055,
        turnover_modifier=1.0 + movement * 0.002,
        bench_depth=coach.bench_usage / 100,
        adaptability_bonus=_roll_adaptability_bonus(coach.adaptability, rng),
        overall_bonus=(coach.overall - 50) * 0.06,
    )


def _roll_adaptability_bonus(adaptability: int, rng: random.Random) -> float:
    normalized = (adaptability - 50) / 50
    return clamp((rng.random() - 0.3) * 3 * normalized, -2.0, 3.0)


def minutes_distribution(coach: Coach | None, is_playoffs: bool = False) -> list[int]:
    """13-slot minutes template: deep benches spread minutes, playoffs tighten."""
    if coach is None:
        return list(MINUTES_TIGHT if is_playoffs else MINUTES_NORMAL)
    depth = coach.bench_usage
    if is_playoffs:
        return list(MINUTES_NORMAL if depth >= 70 else MINUTES_TIGHT)
    if depth >= 75:
        return list(MINUTES_DEEP)
    if depth >= 55:
        return list(MINUTES_NORMAL)
    return list(MINUTES_TIGHT)


def team_minutes_template(team: Team, is_playoffs: bool = False) -> list[int]:
    if team.minutes_template is not None:
        return list(team.minutes_template)
    return minutes_distribution(team.coach, is_playoffs)


def chemistry_modifier(team: Team, is_playoffs: bool = False) -> float:
    """Scalar applied to every counting stat. 75 average chemistry is neutral."""
    if not team.roster:
        return 1.0
    avg_chem = sum(p.chemistry for p in team.roster) / len(team.roster)
    modifier = (avg_chem - DEFAULT_CHEMISTRY) / 500
    if is_playoffs:
        modifier *= 2
    return 1.0 + modifier
