"""
Team normalizer and reconciler.

Pulls each team's raw box score toward a tier-appropriate target score by
rescaling attempts and redrawing makes at each player's observed percentages,
caps assists against made field goals, and breaks ties so no game ends level.
"""
from __future__ import annotations

import logging
import math
import random

from models.constants import (
    ASSIST_TO_FGM_CAP,
    BASELINE_RATING,
    DEFAULT_FT_PCT,
    DEFAULT_THREE_PCT,
    DEFAULT_TWO_PCT,
    HOME_TIEBREAK_WEIGHT,
    TIEBREAK_POINTS_RANGE,
    TIER_NORMALIZATION_CLAMP,
    TIER_STRENGTH_MULTIPLIER,
)
from models.game_result import PlayerGameStats

from .randomness import binomial_roll, clamp

logger = logging.getLogger(__name__)


def team_points(lines: list[PlayerGameStats]) -> int:
    return sum(s.points for s in lines)


def quick_team_strength(lines: list[PlayerGameStats]) -> float:
    """Approximate team strength on the rating scale from observed points per minute."""
    active = [s for s in lines if s.minutes > 0]
    if not active:
        return float(BASELINE_RATING)
    total_points = sum(s.points for s in active)
    total_minutes = sum(s.minutes for s in active)
    ppm = total_points / max(1, total_minutes)
    return 50 + ppm * 80


def target_score(
    lines: list[PlayerGameStats],
    target_points: float,
    variance: float,
    tier: int,
    rng: random.Random,
) -> float:
    strength_bonus = (quick_team_strength(lines) - BASELINE_RATING) * TIER_STRENGTH_MULTIPLIER[tier]
    return target_points + strength_bonus + rng.uniform(-variance, variance)


def _rescale_line(stat: PlayerGameStats, factor: float, rng: random.Random) -> None:
    fg_pct_two = (
        stat.two_pointers_made / max(1, stat.two_pointers_attempted)
        if stat.field_goals_attempted > 0
        else DEFAULT_TWO_PCT
    )
    three_pct = (
        stat.three_pointers_made / stat.three_pointers_attempted
        if stat.three_pointers_attempted > 0
        else DEFAULT_THREE_PCT
    )
    ft_pct = (
        stat.free_throws_made / stat.free_throws_attempted
        if stat.free_throws_attempted > 0
        else DEFAULT_FT_PCT
    )

    fga = max(1, round(stat.field_goals_attempted * factor))
    three_pa = min(fga, max(0, round(stat.three_pointers_attempted * factor)))
    fta = max(0, round(stat.free_throws_attempted * factor))

    two_pm = binomial_roll(rng, fga - three_pa, fg_pct_two)
    three_pm = binomial_roll(rng, three_pa, three_pct)
    ftm = binomial_roll(rng, fta, ft_pct)

    stat.field_goals_attempted = fga
    stat.three_pointers_attempted = three_pa
    stat.free_throws_attempted = fta
    stat.field_goals_made = two_pm + three_pm
    stat.three_pointers_made = three_pm
    stat.free_throws_made = ftm
    stat.recompute_points()


def normalize_team_stats(
    lines: list[PlayerGameStats],
    target_points: float,
    variance: float,
    tier: int,
    rng: random.Random,
) -> float | None:
    """Rescale attempts toward a target team score, in place.

    Returns the applied scale factor, or None when the raw score is zero and
    normalization is skipped.
    """
    raw_total = team_points(lines)
    if raw_total == 0:
        logger.debug("Raw team score is zero, skipping normalization")
        return None

    target = target_score(lines, target_points, variance, tier, rng)
    band = TIER_NORMALIZATION_CLAMP[tier]
    factor = clamp(target / raw_total, 1 - band, 1 + band)
    logger.debug("Normalizing raw %d toward %.1f (factor %.3f)", raw_total, target, factor)

    for stat in lines:
        if stat.minutes > 0:
            _rescale_line(stat, factor, rng)
    return factor


def reconcile_assists(lines: list[PlayerGameStats]) -> None:
    """Cap team assists at 65% of team made field goals, scaling every player down."""
    total_fgm = sum(s.field_goals_made for s in lines)
    total_assists = sum(s.assists for s in lines)
    max_assists = math.floor(total_fgm * ASSIST_TO_FGM_CAP)
    if total_assists <= max_assists or total_assists == 0:
        return

    scale = max_assists / total_assists
    for stat in lines:
        stat.assists = max(0, round(stat.assists * scale))
    # rounding can leave a small excess; take it from the top assisters
    excess = sum(s.assists for s in lines) - max_assists
    while excess > 0:
        top = max(lines, key=lambda s: s.assists)
        top.assists -= 1
        excess -= 1


def _award_basket(stat: PlayerGameStats, points: int) -> None:
    """Credit *points* (2-5) as converted field goals."""
    threes = 1 if points in (3, 5) else 0
    twos = (points - 3 * threes) // 2
    stat.field_goals_made += twos + threes
    stat.field_goals_attempted += twos + threes
    stat.three_pointers_made += threes
    stat.three_pointers_attempted += threes
    stat.recompute_points()


def _first_starter(lines: list[PlayerGameStats]) -> PlayerGameStats | None:
    return next((s for s in lines if s.games_started > 0), lines[0] if lines else None)


def resolve_tie(
    home_lines: list[PlayerGameStats],
    away_lines: list[PlayerGameStats],
    rng: random.Random,
) -> tuple[int, int]:
    """Return final (home, away) scores, breaking a tie with an extra basket.

    A 55/45 home-weighted coin flip picks the side whose first starter scores
    2-5 points. If neither side has a stat line the home side gets one point.
    """
    home_score = team_points(home_lines)
    away_score = team_points(away_lines)
    if home_score != away_score:
        return home_score, away_score

    home_first = rng.random() < HOME_TIEBREAK_WEIGHT
    chosen, other = (home_lines, away_lines) if home_first else (away_lines, home_lines)
    starter = _first_starter(chosen) or _first_starter(other)
    if starter is not None:
        _award_basket(starter, rng.randint(*TIEBREAK_POINTS_RANGE))
        home_score = team_points(home_lines)
        away_score = team_points(away_lines)

    if home_score == away_score:
        logger.warning("Tie persisted with empty box scores, awarding home a free throw")
        if home_lines:
            home_lines[0].free_throws_made += 1
            home_lines[0].free_throws_attempted += 1
            home_lines[0].recompute_points()
        home_score += 1
    return home_score, away_score
