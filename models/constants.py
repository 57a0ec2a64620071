"""
League structure and simulation constants for the game engine.
Same five positions at every tier; tiers differ in pace and normalization width.
"""
from typing import Dict

# Positions in starter-selection order (slot 0 = PG ... slot 4 = C)
POSITIONS = ["PG", "SG", "SF", "PF", "C"]
DEFAULT_POSITION = "SF"  # archetype used for unknown/invalid positions

STARTERS_COUNT = 5
TOTAL_MINUTES = 240  # 5 on-court slots x 48 minutes
REPAIR_SLOTS = 8  # minutes repair only touches the first 8 active slots

# Tiers: 1 = premier, 2 = regional, 3 = metro
TIERS = (1, 2, 3)
DEFAULT_TIER = 1

# Base stats per 36 minutes for a 75-rated player at each position.
# "primary" stats scale more aggressively with rating and take full usage effect.
BASELINE_RATING = 75
COUNTING_STATS = ("points", "rebounds", "assists", "steals", "blocks", "turnovers", "fouls")

POSITION_ARCHETYPES: Dict[str, Dict] = {
    "PG": {
        "points": {"base": 14.0, "primary": True},
        "rebounds": {"base": 3.0, "primary": False},
        "assists": {"base": 7.0, "primary": True},
        "steals": {"base": 1.5, "primary": False},
        "blocks": {"base": 0.3, "primary": False},
        "turnovers": {"base": 2.5, "primary": False},
        "fouls": {"base": 2.0, "primary": False},
        "fga_per_36": 15.0,
        "three_pt_rate": 0.40,
        "base_fg_pct": 0.430,
        "base_three_pct": 0.345,
        "ft_rate": 0.25,
        "base_ft_pct": 0.820,
    },
    "SG": {
        "points": {"base": 16.0, "primary": True},
        "rebounds": {"base": 3.5, "primary": False},
        "assists": {"base": 3.5, "primary": False},
        "steals": {"base": 1.2, "primary": False},
        "blocks": {"base": 0.3, "primary": False},
        "turnovers": {"base": 2.0, "primary": False},
        "fouls": {"base": 2.2, "primary": False},
        "fga_per_36": 16.0,
        "three_pt_rate": 0.42,
        "base_fg_pct": 0.435,
        "base_three_pct": 0.355,
        "ft_rate": 0.27,
        "base_ft_pct": 0.810,
    },
    "SF": {
        "points": {"base": 14.0, "primary": True},
        "rebounds": {"base": 5.0, "primary": False},
        "assists": {"base": 3.0, "primary": False},
        "steals": {"base": 1.1, "primary": False},
        "blocks": {"base": 0.5, "primary": False},
        "turnovers": {"base": 1.8, "primary": False},
        "fouls": {"base": 2.5, "primary": False},
        "fga_per_36": 14.5,
        "three_pt_rate": 0.32,
        "base_fg_pct": 0.445,
        "base_three_pct": 0.345,
        "ft_rate": 0.28,
        "base_ft_pct": 0.790,
    },
    "PF": {
        "points": {"base": 13.0, "primary": True},
        "rebounds": {"base": 7.5, "primary": True},
        "assists": {"base": 2.0, "primary": False},
        "steals": {"base": 0.8, "primary": False},
        "blocks": {"base": 1.0, "primary": True},
        "turnovers": {"base": 1.8, "primary": False},
        "fouls": {"base": 2.8, "primary": False},
        "fga_per_36": 13.5,
        "three_pt_rate": 0.22,
        "base_fg_pct": 0.475,
        "base_three_pct": 0.330,
        "ft_rate": 0.30,
        "base_ft_pct": 0.740,
    },
    "C": {
        "points": {"base": 12.0, "primary": True},
        "rebounds": {"base": 9.5, "primary": True},
        "assists": {"base": 1.5, "primary": False},
        "steals": {"base": 0.5, "primary": False},
        "blocks": {"base": 1.5, "primary": True},
        "turnovers": {"base": 1.6, "primary": False},
        "fouls": {"base": 3.0, "primary": False},
        "fga_per_36": 12.0,
        "three_pt_rate": 0.10,
        "base_fg_pct": 0.535,
        "base_three_pct": 0.305,
        "ft_rate": 0.32,
        "base_ft_pct": 0.700,
    },
}

# Tier pace profiles: target team points and +/- variance band.
# Higher tiers score more; home/away/coach adjustments are added on top.
TIER_PACE: Dict[int, Dict[str, float]] = {
    1: {"target_points": 104, "variance": 8},
    2: {"target_points": 86, "variance": 9},
    3: {"target_points": 72, "variance": 10},
}
# Max deviation of the team-wide attempt scale factor from 1.0
TIER_NORMALIZATION_CLAMP: Dict[int, float] = {1: 0.25, 2: 0.35, 3: 0.45}
# How much observed team strength moves the target (lower tiers: more)
TIER_STRENGTH_MULTIPLIER: Dict[int, float] = {1: 0.3, 2: 0.5, 3: 0.7}

HOME_TARGET_ADJUSTMENT = 3
AWAY_TARGET_ADJUSTMENT = -1
OPPONENT_PACE_INFLUENCE = 0.3
DEFAULT_HOME_COURT_BONUS = 3.0

# Minutes templates (13 rotation slots, decreasing)
MINUTES_TIGHT = [36, 36, 34, 32, 30, 16, 12, 8, 4, 2, 0, 0, 0]
MINUTES_NORMAL = [34, 34, 32, 30, 28, 18, 15, 12, 8, 5, 3, 1, 0]
MINUTES_DEEP = [32, 31, 30, 28, 26, 20, 18, 16, 14, 12, 8, 5, 0]
STARTER_MINUTES_JITTER = 2
BENCH_MINUTES_JITTER = 1

# Player input ranges and ingestion defaults
RATING_RANGE: tuple[int, int] = (40, 99)
ATTRIBUTE_RANGE: tuple[int, int] = (1, 99)
NEUTRAL_ATTRIBUTE = 50
EFFECTIVE_RATING_FLOOR = 50
DEFAULT_CHEMISTRY = 75
DEFAULT_HEIGHT = 78  # inches
DEFAULT_WEIGHT = 215  # lbs
DEFAULT_WINGSPAN = 82  # inches

PLAYER_ATTRIBUTES: tuple[str, ...] = (
    "speed", "strength", "verticality", "endurance",
    "basketball_iq", "clutch", "coachability", "collaboration",
)

INJURY_STATUSES: tuple[str, ...] = ("healthy", "day-to-day", "out")

# Coach traits, each 1-100 (50 = league average)
COACH_TRAITS: tuple[str, ...] = (
    "pace", "three_point_tendency", "defensive_intensity", "ball_movement",
    "bench_usage", "player_development", "adaptability",
)

# Team totals and assist economy
ASSIST_TO_FGM_CAP = 0.65
DEFAULT_TWO_PCT = 0.48
DEFAULT_THREE_PCT = 0.33
DEFAULT_FT_PCT = 0.75

# Tie-break
HOME_TIEBREAK_WEIGHT = 0.55
TIEBREAK_POINTS_RANGE: tuple[int, int] = (2, 5)
