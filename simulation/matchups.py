"""
Matchup evaluator.

Pairs each starter with the opponent's starter in the same rotation slot and
scores the physical edge (height, wingspan, speed, strength). Bench players get a
diluted share of the starters' average edge.
"""
from __future__ import annotations

from models.constants import NEUTRAL_ATTRIBUTE, STARTERS_COUNT
from models.player import Player

from .randomness import clamp
from .rotation import RotationEntry

HEIGHT_WEIGHT, HEIGHT_CAP = 0.15, 2.0
WINGSPAN_WEIGHT, WINGSPAN_CAP = 0.12, 1.5
SPEED_WEIGHT, SPEED_CAP = 0.02, 1.5
STRENGTH_WEIGHT, STRENGTH_CAP = 0.015, 1.5
MATCHUP_CAP = 4.0
BENCH_DILUTION = 0.3


def _speed(p: Player) -> int:
    return p.attributes.speed if p.attributes else NEUTRAL_ATTRIBUTE


def _strength(p: Player) -> int:
    return p.attributes.strength if p.attributes else NEUTRAL_ATTRIBUTE


def matchup_edge(me: Player, them: Player) -> float:
    """Signed edge of *me* over *them*, within +/-4."""
    edge = clamp((me.measurables.height - them.measurables.height) * HEIGHT_WEIGHT, -HEIGHT_CAP, HEIGHT_CAP)
    edge += clamp((me.measurables.wingspan - them.measurables.wingspan) * WINGSPAN_WEIGHT, -WINGSPAN_CAP, WINGSPAN_CAP)
    edge += clamp((_speed(me) - _speed(them)) * SPEED_WEIGHT, -SPEED_CAP, SPEED_CAP)
    edge += clamp((_strength(me) - _strength(them)) * STRENGTH_WEIGHT, -STRENGTH_CAP, STRENGTH_CAP)
    return clamp(edge, -MATCHUP_CAP, MATCHUP_CAP)


def calculate_matchup_modifiers(
    mine: list[RotationEntry],
    theirs: list[RotationEntry],
) -> list[float]:
    """One modifier per slot of *mine* (0.0 everywhere if either side is empty)."""
    mods = [0.0] * len(mine)
    if not mine or not theirs:
        return mods

    my_starters = mine[:STARTERS_COUNT]
    their_starters = theirs[:STARTERS_COUNT]
    total_edge = 0.0
    for i, entry in enumerate(my_starters):
        if i >= len(their_starters):
            continue
        mods[i] = matchup_edge(entry.player, their_starters[i].player)
        total_edge += mods[i]

    bench_edge = (total_edge / len(my_starters)) * BENCH_DILUTION
    for i in range(STARTERS_COUNT, len(mods)):
        mods[i] = bench_edge
    return mods


def apply_matchup_modifiers(mine: list[RotationEntry], theirs: list[RotationEntry]) -> None:
    for entry, mod in zip(mine, calculate_matchup_modifiers(mine, theirs)):
        entry.matchup_modifier = mod
