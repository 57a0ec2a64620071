"""
Rotation builder and usage allocator.

Turns a roster into ordered rotation slots (5 starters, then the bench) with
minutes summing to exactly 240, then derives each player's usage share from
effective rating relative to the team's minutes-weighted average.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from models.constants import (
    BENCH_MINUTES_JITTER,
    POSITIONS,
    REPAIR_SLOTS,
    STARTER_MINUTES_JITTER,
    STARTERS_COUNT,
    TOTAL_MINUTES,
)
from models.player import Player
from models.ratings import FatiguePenaltyFn, effective_rating, fatigue_penalty, is_available
from models.team import Team

from .randomness import clamp

logger = logging.getLogger(__name__)

USAGE_MIN = 0.4
USAGE_MAX = 1.8
USAGE_RATING_SPREAD = 40.0


@dataclass
class RotationEntry:
    """One rotation slot for one match. Later stages fill in their own fields."""

    player: Player
    slot: int
    effective_rating: float
    minutes: int = 0
    is_starter: bool = False
    usage_share: float = 0.0
    matchup_modifier: float = 0.0
    boosted_rating: float | None = None


def _select_lineup(
    available: list[tuple[Player, float]],
) -> list[tuple[Player, float]]:
    """Starters by position (PG..C), then bench by effective rating.

    A position nobody plays is filled by the best unused player; with fewer than
    five players, players are reused in rating order so all five slots exist.
    """
    by_rating = sorted(available, key=lambda pr: pr[1], reverse=True)
    starters: list[tuple[Player, float]] = []
    used: set[int] = set()  # identity of Player objects, ids may repeat across sources

    for pos in POSITIONS:
        pick = next(
            (pr for pr in by_rating if pr[0].position == pos and id(pr[0]) not in used),
            None,
        )
        if pick is None:
            pick = next((pr for pr in by_rating if id(pr[0]) not in used), None)
        if pick is None:
            # short roster: cycle through players by rating
            pick = by_rating[len(starters) % len(by_rating)]
        starters.append(pick)
        used.add(id(pick[0]))

    bench = [pr for pr in by_rating if id(pr[0]) not in used]
    return starters + bench


def _assign_minutes(
    entries: list[RotationEntry],
    template: list[int],
    rng: random.Random,
) -> None:
    for entry in entries:
        if entry.slot >= len(template) or template[entry.slot] <= 0:
            entry.minutes = 0
            continue
        variance = STARTER_MINUTES_JITTER if entry.is_starter else BENCH_MINUTES_JITTER
        entry.minutes = max(0, template[entry.slot] + rng.randint(-variance, variance))
    _repair_minutes(entries)


def _nudge_minutes(slots: list[RotationEntry], diff: int) -> int:
    """Move single minutes round-robin across *slots*; returns what is left of *diff*."""
    idx = 0
    stalled = 0
    while diff != 0 and stalled < len(slots):
        entry = slots[idx % len(slots)]
        if diff > 0:
            entry.minutes += 1
            diff -= 1
            stalled = 0
        elif entry.minutes > 1:
            entry.minutes -= 1
            diff += 1
            stalled = 0
        else:
            stalled += 1
        idx += 1
    return diff


def _repair_minutes(entries: list[RotationEntry]) -> None:
    """Nudge single minutes across the first active slots until the total is 240.

    When those slots all reach one minute (a template heavy on deep bench
    slots), the remaining surplus comes off every active slot.
    """
    if not entries:
        return
    active = [e for e in entries if e.minutes > 0]
    diff = TOTAL_MINUTES - sum(e.minutes for e in entries)
    diff = _nudge_minutes(active[:REPAIR_SLOTS] or entries[:REPAIR_SLOTS], diff)
    if diff != 0 and len(active) > REPAIR_SLOTS:
        diff = _nudge_minutes(active, diff)
    if diff != 0:
        logger.warning("Minutes repair stalled %d minutes off target", -diff)


def build_rotation(
    team: Team,
    template: list[int],
    rng: random.Random,
    penalty_fn: FatiguePenaltyFn = fatigue_penalty,
) -> list[RotationEntry]:
    """Build the ordered rotation for *team* from its available players.

    Returns an empty list (and logs a warning) when nobody is available.
    """
    available = [(p, effective_rating(p, penalty_fn)) for p in team.roster if is_available(p)]
    if not available:
        logger.warning("Team %s (%s) has no available players", team.id, team.name)
        return []
    if len(available) < STARTERS_COUNT:
        logger.info(
            "Team %s has only %d available players, reusing starters", team.id, len(available)
        )

    lineup = _select_lineup(available)
    entries = [
        RotationEntry(player=p, slot=i, effective_rating=rating, is_starter=i < STARTERS_COUNT)
        for i, (p, rating) in enumerate(lineup)
    ]
    _assign_minutes(entries, template, rng)
    logger.debug(
        "Rotation for team %s: %s",
        team.id,
        [(e.player.name, e.minutes) for e in entries if e.minutes > 0],
    )
    return entries


def calculate_usage_shares(rotation: list[RotationEntry]) -> None:
    """Set usage_share in place: 1.0 at the minutes-weighted average rating,
    +/-0.025 per rating point, clamped to [0.4, 1.8]; zero-minute players get 0."""
    active = [e for e in rotation if e.minutes > 0]
    for entry in rotation:
        entry.usage_share = 0.0
    if not active:
        return
    total_minutes = sum(e.minutes for e in active)
    weighted_avg = sum(e.effective_rating * e.minutes for e in active) / total_minutes
    for entry in active:
        raw = 1.0 + (entry.effective_rating - weighted_avg) / USAGE_RATING_SPREAD
        entry.usage_share = clamp(raw, USAGE_MIN, USAGE_MAX)
