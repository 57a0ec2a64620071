"""
Availability, effective-rating and archetype lookups.
Single source of truth for what rating the engine plays a player at: the upstream
override when the fatigue/injury side supplied one, otherwise composite rating plus
injury and fatigue penalties, floored so nobody drops below a playable level.
"""
import logging
from typing import Callable, Dict

from .constants import DEFAULT_POSITION, EFFECTIVE_RATING_FLOOR, POSITION_ARCHETYPES
from .player import Player

logger = logging.getLogger(__name__)

FatiguePenaltyFn = Callable[[float], float]


def fatigue_penalty(fatigue: float) -> int:
    """Rating penalty for a fatigue level (0-100). Returns 0 down to about -15."""
    if not fatigue or fatigue <= 25:
        return 0
    if fatigue <= 50:
        return -int((fatigue - 25) // 5)  # -1 to -5
    if fatigue <= 75:
        return -5 - int((fatigue - 50) // 5)  # -5 to -10
    return -10 - int((fatigue - 75) // 5)  # -10 to -15


def is_available(player: Player) -> bool:
    """Players ruled out or resting do not enter the rotation."""
    return player.injury_status != "out" and not player.resting


def effective_rating(player: Player, penalty_fn: FatiguePenaltyFn = fatigue_penalty) -> float:
    """Rating the engine uses for this player in this match."""
    if player.effective_rating is not None:
        return float(player.effective_rating)
    rating = float(player.rating)
    if player.injury_status == "day-to-day":
        rating += player.injury_rating_penalty
    rating += penalty_fn(player.fatigue)
    return max(float(EFFECTIVE_RATING_FLOOR), rating)


def archetype_for_position(position: str) -> Dict:
    """Position archetype; unknown positions play as a small forward."""
    archetype = POSITION_ARCHETYPES.get(position)
    if archetype is None:
        logger.debug("Unknown position %r, using %s archetype", position, DEFAULT_POSITION)
        archetype = POSITION_ARCHETYPES[DEFAULT_POSITION]
    return archetype
