"""
Per-player stat generator.

Each rotation entry with minutes gets a raw box-score line built from its
position archetype, scaled by rating, minutes, usage, chemistry and coaching,
then nudged by attribute cross-effects. Shooting is generated separately and
points are always derived from makes.
"""
from __future__ import annotations

import random
from dataclasses import dataclass

from models.coach import CoachModifiers
from models.constants import BASELINE_RATING, NEUTRAL_ATTRIBUTE
from models.game_result import PlayerGameStats
from models.player import PlayerAttributes
from models.ratings import archetype_for_position

from .randomness import binomial_roll, clamp, normal_random
from .rotation import RotationEntry

PRIMARY_SCALE_PER_POINT = 0.020
SECONDARY_SCALE_PER_POINT = 0.008
SECONDARY_USAGE_DAMPING = 0.3
STAT_NOISE = 0.40
FGA_NOISE = 0.25
FTA_NOISE = 0.40
SHOOTING_HEAT = 0.06
CLUTCH_PER_POINT = 0.05
MAX_FOULS = 6

TWO_PT_BONUS, TWO_PT_BAND = 0.003, (0.30, 0.62)
THREE_PT_BONUS, THREE_PT_BAND = 0.0015, (0.15, 0.45)
FT_BONUS, FT_BAND = 0.002, (0.40, 0.95)
TWO_PT_OVER_FG = 0.04  # two-point % sits above the blended archetype FG%
THREE_RATE_BAND = (0.05, 0.60)


@dataclass(frozen=True)
class GameContext:
    """Per-team constants shared by every player line in one match."""

    team_id: int | str
    chemistry: float
    home_boost: float
    is_playoffs: bool
    team_mods: CoachModifiers
    opponent_mods: CoachModifiers


def empty_stat_line(entry: RotationEntry, team_id: int | str) -> PlayerGameStats:
    return PlayerGameStats(
        player_id=entry.player.id,
        team_id=team_id,
        name=entry.player.name,
        position=entry.player.position,
    )


def _coach_effect_scale(attrs: PlayerAttributes | None) -> float:
    # 50 coachability = 1.0x, 20 = 0.82x, 90 = 1.24x; bounded to 0.7x-1.3x
    if attrs is None:
        return 1.0
    return 0.7 + (attrs.coachability / 100) * 0.6


def _clutch_modifier(attrs: PlayerAttributes | None, is_playoffs: bool) -> float:
    if not is_playoffs or attrs is None:
        return 0.0
    return (attrs.clutch - NEUTRAL_ATTRIBUTE) * CLUTCH_PER_POINT


def _apply_attribute_effects(line: PlayerGameStats, attrs: PlayerAttributes, minutes_factor: float) -> None:
    rebound_boost = ((attrs.verticality - 50) + (attrs.strength - 50)) * 0.015 * minutes_factor
    line.rebounds = max(0, round(line.rebounds + rebound_boost))

    iq = (attrs.basketball_iq - 50) * 0.01 * minutes_factor
    line.assists = max(0, round(line.assists + iq * 1.5))
    line.turnovers = max(0, round(line.turnovers - iq * 0.8))

    block_boost = (attrs.verticality - 50) * 0.008 * minutes_factor
    line.blocks = max(0, round(line.blocks + block_boost))

    steal_boost = (attrs.speed - 50) * 0.006 * minutes_factor
    line.steals = max(0, round(line.steals + steal_boost))


def generate_player_stats(
    entry: RotationEntry,
    ctx: GameContext,
    rng: random.Random,
) -> PlayerGameStats:
    """Raw stat line for one rotation entry; zero-minute entries get an empty line."""
    line = empty_stat_line(entry, ctx.team_id)
    if entry.minutes <= 0:
        return line

    player = entry.player
    attrs = player.attributes
    archetype = archetype_for_position(player.position)

    boosted = (
        entry.effective_rating
        + ctx.home_boost
        + entry.matchup_modifier
        + _clutch_modifier(attrs, ctx.is_playoffs)
    )
    entry.boosted_rating = boosted
    rating_delta = boosted - BASELINE_RATING
    primary_scale = 1.0 + rating_delta * PRIMARY_SCALE_PER_POINT
    secondary_scale = 1.0 + rating_delta * SECONDARY_SCALE_PER_POINT
    minutes_factor = entry.minutes / 36
    usage = entry.usage_share or 1.0

    # Coach modifiers pulled toward neutral by the player's own coachability
    scale = _coach_effect_scale(attrs)
    cm = ctx.team_mods
    assist_mult = 1.0 + (cm.assist_multiplier - 1.0) * scale
    steal_block_mult = 1.0 + (cm.steal_block_multiplier - 1.0) * scale
    turnover_mult = 1.0 + (cm.turnover_modifier - 1.0) * scale
    foul_mult = 1.0 + (cm.foul_modifier - 1.0) * scale
    three_rate_mod = cm.three_pt_rate_modifier * scale
    defense_penalty = ctx.opponent_mods.defense_modifier * scale

    def generate(stat: str, trait_mult: float) -> int:
        spec = archetype[stat]
        primary = spec["primary"]
        stat_scale = primary_scale if primary else secondary_scale
        usage_effect = usage if primary else 1.0 + (usage - 1.0) * SECONDARY_USAGE_DAMPING
        expected = spec["base"] * stat_scale * minutes_factor * ctx.chemistry * trait_mult * usage_effect
        noisy = expected * (1 + normal_random(rng) * STAT_NOISE)
        return max(0, round(noisy))

    line.games_played = 1
    line.games_started = 1 if entry.is_starter else 0
    line.minutes = entry.minutes
    line.rebounds = generate("rebounds", 1.0)
    line.assists = generate("assists", assist_mult)
    line.steals = generate("steals", steal_block_mult)
    line.blocks = generate("blocks", steal_block_mult)
    line.turnovers = generate("turnovers", turnover_mult)
    line.fouls = min(MAX_FOULS, generate("fouls", foul_mult))

    if attrs is not None:
        _apply_attribute_effects(line, attrs, minutes_factor)

    # --- Shooting ---
    fga_base = archetype["fga_per_36"] * minutes_factor * usage
    fga = max(1, round(fga_base * (1 + normal_random(rng) * FGA_NOISE)))
    three_rate = clamp(archetype["three_pt_rate"] + three_rate_mod, *THREE_RATE_BAND)
    three_pa = min(fga, round(fga * three_rate))
    two_pa = fga - three_pa

    heat = normal_random(rng) * SHOOTING_HEAT
    two_pct = clamp(
        archetype["base_fg_pct"] + TWO_PT_OVER_FG + rating_delta * TWO_PT_BONUS + heat + defense_penalty,
        *TWO_PT_BAND,
    )
    three_pct = clamp(
        archetype["base_three_pct"] + rating_delta * THREE_PT_BONUS + heat + defense_penalty * 0.8,
        *THREE_PT_BAND,
    )
    ft_pct = clamp(
        archetype["base_ft_pct"] + rating_delta * FT_BONUS + heat + defense_penalty,
        *FT_BAND,
    )

    two_pm = binomial_roll(rng, two_pa, two_pct)
    three_pm = binomial_roll(rng, three_pa, three_pct)
    fta = max(0, round(fga * archetype["ft_rate"] * (1 + normal_random(rng) * FTA_NOISE)))
    ftm = binomial_roll(rng, fta, ft_pct)

    line.field_goals_attempted = fga
    line.field_goals_made = two_pm + three_pm
    line.three_pointers_attempted = three_pa
    line.three_pointers_made = three_pm
    line.free_throws_attempted = fta
    line.free_throws_made = ftm
    line.recompute_points()
    return line
