"""
Game simulation engine.

Simulates a full basketball game between two teams, producing a final score and
a per-player box score without play-by-play. Key design goals:

1. **Rating-driven**: effective rating, usage, matchups, chemistry and coaching
   shape every player's line; position archetypes supply the baselines.
2. **Internally consistent**: makes never exceed attempts, points are derived
   from makes, each team plays exactly 240 minutes, team assists stay within
   65% of made field goals, and the final score is never tied.
3. **Reproducible**: one ``random.Random`` is threaded through every stage, so
   a seeded game is byte-for-byte repeatable; inputs are never mutated.

Pipeline per match: rotation -> usage -> matchups -> raw player lines (per team),
then normalization, assist reconciliation and tie-break across both teams.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from models.coach import CoachModifiers
from models.constants import (
    AWAY_TARGET_ADJUSTMENT,
    DEFAULT_HOME_COURT_BONUS,
    DEFAULT_TIER,
    HOME_TARGET_ADJUSTMENT,
    OPPONENT_PACE_INFLUENCE,
    TIER_PACE,
)
from models.game_result import GameResult, PlayerGameStats, TeamGameResult
from models.ratings import FatiguePenaltyFn, fatigue_penalty
from models.team import Team

from .matchups import apply_matchup_modifiers
from .modifiers import chemistry_modifier, game_modifiers, team_minutes_template
from .normalization import normalize_team_stats, reconcile_assists, resolve_tie
from .player_stats import MAX_FOULS, GameContext, generate_player_stats
from .rotation import RotationEntry, build_rotation, calculate_usage_shares

logger = logging.getLogger(__name__)


@dataclass
class GameOptions:
    """Per-call knobs supplied by the season driver."""

    is_playoffs: bool = False
    tier: int | None = None  # None -> home team's tier
    home_court_bonus: float = DEFAULT_HOME_COURT_BONUS
    fatigue_penalty: FatiguePenaltyFn = field(default=fatigue_penalty)
    seed: int | None = None


# ===================================================================
# Stat-line merging helper
# ===================================================================

_ADDITIVE_INT_FIELDS = [
    "minutes", "points", "rebounds", "assists", "steals", "blocks", "turnovers", "fouls",
    "field_goals_made", "field_goals_attempted",
    "three_pointers_made", "three_pointers_attempted",
    "free_throws_made", "free_throws_attempted",
]


def _merge_stats(stats_list: list[PlayerGameStats]) -> list[PlayerGameStats]:
    """Merge multiple stat entries for the same player into one.

    Only short rosters produce duplicates (a player reused across starter slots).
    """
    by_id: dict[int | str, PlayerGameStats] = {}
    for s in stats_list:
        if s.player_id in by_id:
            existing = by_id[s.player_id]
            for fld in _ADDITIVE_INT_FIELDS:
                setattr(existing, fld, getattr(existing, fld) + getattr(s, fld))
            existing.games_played = max(existing.games_played, s.games_played)
            existing.games_started = max(existing.games_started, s.games_started)
            existing.fouls = min(MAX_FOULS, existing.fouls)
        else:
            by_id[s.player_id] = s
    return list(by_id.values())


# ===================================================================
# Team-local stages
# ===================================================================

def _resolve_tier(options: GameOptions, home: Team) -> int:
    tier = options.tier if options.tier is not None else (home.tier or DEFAULT_TIER)
    if tier not in TIER_PACE:
        logger.warning("Unknown tier %r, falling back to tier %d", tier, DEFAULT_TIER)
        tier = DEFAULT_TIER
    return tier


def _prepare_rotation(
    team: Team,
    options: GameOptions,
    rng: random.Random,
) -> list[RotationEntry]:
    template = team_minutes_template(team, options.is_playoffs)
    rotation = build_rotation(team, template, rng, options.fatigue_penalty)
    calculate_usage_shares(rotation)
    return rotation


def _raw_team_lines(
    rotation: list[RotationEntry],
    ctx: GameContext,
    rng: random.Random,
) -> list[PlayerGameStats]:
    lines = [generate_player_stats(entry, ctx, rng) for entry in rotation]
    return _merge_stats(lines)


def _pace_target(
    tier: int,
    own: CoachModifiers,
    opponent: CoachModifiers,
    venue_adjustment: float,
) -> float:
    pace_adj = own.pace_modifier + opponent.pace_modifier * OPPONENT_PACE_INFLUENCE
    return (
        TIER_PACE[tier]["target_points"]
        + venue_adjustment
        + pace_adj
        + own.overall_bonus
        + own.adaptability_bonus
    )


# ===================================================================
# Public API
# ===================================================================

def simulate_game(
    home_team: Team,
    away_team: Team,
    options: GameOptions | None = None,
    *,
    rng: random.Random | None = None,
) -> GameResult:
    """Simulate a single basketball game between two teams.

    Parameters
    ----------
    home_team : Team
        Home side; its tier is used when ``options.tier`` is unset.
    away_team : Team
        Away side.
    options : GameOptions | None
        Playoff flag, tier, home-court bonus, fatigue-penalty lookup and seed.
    rng : random.Random | None
        Explicit generator; takes precedence over ``options.seed``.

    Returns
    -------
    GameResult
        Final unequal scores with complete box scores for both teams.
    """
    options = options or GameOptions()
    rng = rng or random.Random(options.seed)
    tier = _resolve_tier(options, home_team)

    # === Team-local stages ===
    home_rotation = _prepare_rotation(home_team, options, rng)
    away_rotation = _prepare_rotation(away_team, options, rng)

    home_mods = game_modifiers(home_team.coach, rng)
    away_mods = game_modifiers(away_team.coach, rng)

    apply_matchup_modifiers(home_rotation, away_rotation)
    apply_matchup_modifiers(away_rotation, home_rotation)

    home_ctx = GameContext(
        team_id=home_team.id,
        chemistry=chemistry_modifier(home_team, options.is_playoffs),
        home_boost=options.home_court_bonus,
        is_playoffs=options.is_playoffs,
        team_mods=home_mods,
        opponent_mods=away_mods,
    )
    away_ctx = GameContext(
        team_id=away_team.id,
        chemistry=chemistry_modifier(away_team, options.is_playoffs),
        home_boost=0.0,
        is_playoffs=options.is_playoffs,
        team_mods=away_mods,
        opponent_mods=home_mods,
    )
    home_lines = _raw_team_lines(home_rotation, home_ctx, rng)
    away_lines = _raw_team_lines(away_rotation, away_ctx, rng)

    # === Cross-team stages ===
    variance = TIER_PACE[tier]["variance"]
    home_target = _pace_target(tier, home_mods, away_mods, HOME_TARGET_ADJUSTMENT)
    away_target = _pace_target(tier, away_mods, home_mods, AWAY_TARGET_ADJUSTMENT)
    normalize_team_stats(home_lines, home_target, variance, tier, rng)
    normalize_team_stats(away_lines, away_target, variance, tier, rng)

    reconcile_assists(home_lines)
    reconcile_assists(away_lines)

    home_score, away_score = resolve_tie(home_lines, away_lines, rng)

    result = GameResult(
        home=TeamGameResult(
            team_id=home_team.id,
            team_name=home_team.name,
            score=home_score,
            player_stats=home_lines,
        ),
        away=TeamGameResult(
            team_id=away_team.id,
            team_name=away_team.name,
            score=away_score,
            player_stats=away_lines,
        ),
        tier=tier,
        is_playoffs=options.is_playoffs,
    )
    logger.debug(
        "%s %d - %d %s (tier %d%s)",
        home_team.name, home_score, away_score, away_team.name,
        tier, ", playoffs" if options.is_playoffs else "",
    )
    return result
