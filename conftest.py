"""Shared roster factories for the game-sim test suite."""

import logging
import random

import pytest

from models import Coach, Measurables, Player, PlayerAttributes, Team
from models.constants import POSITIONS

# Typical measurables per position (height, weight, wingspan)
_BUILD = {
    "PG": (74, 190, 78),
    "SG": (77, 205, 81),
    "SF": (79, 220, 83),
    "PF": (81, 235, 85),
    "C": (84, 255, 88),
}


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

def build_player(pid, position="SF", rating=75, **overrides):
    height, weight, wingspan = _BUILD.get(position, _BUILD["SF"])
    defaults = {
        "id": pid,
        "name": f"Player {pid}",
        "position": position,
        "rating": rating,
        "measurables": Measurables(height=height, weight=weight, wingspan=wingspan),
    }
    defaults.update(overrides)
    return Player(**defaults)


def build_team(team_id, rating=75, size=13, tier=1, coach=None, **overrides):
    """Team whose roster cycles PG..C, every player at *rating*."""
    roster = [
        build_player(f"{team_id}-{i}", POSITIONS[i % len(POSITIONS)], rating)
        for i in range(size)
    ]
    defaults = {
        "id": team_id,
        "name": f"Team {team_id}",
        "tier": tier,
        "roster": roster,
        "coach": coach,
    }
    defaults.update(overrides)
    return Team(**defaults)


@pytest.fixture
def make_player():
    return build_player


@pytest.fixture
def make_team():
    return build_team


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def home_team():
    return build_team("home")


@pytest.fixture
def away_team():
    return build_team("away")


@pytest.fixture
def strong_team():
    return build_team("strong", rating=95)


@pytest.fixture
def weak_team():
    return build_team("weak", rating=55)


@pytest.fixture
def five_man_team():
    return build_team("five", size=5)


@pytest.fixture
def empty_team():
    return build_team("empty", size=0)


@pytest.fixture
def coach():
    return Coach(id="c1", name="Pat Riley", overall=80, pace=70, three_point_tendency=65,
                 defensive_intensity=75, ball_movement=60, bench_usage=60,
                 player_development=55, adaptability=70)


@pytest.fixture
def athletic_attributes():
    return PlayerAttributes(speed=80, strength=75, verticality=85, endurance=70,
                            basketball_iq=70, clutch=80, coachability=65, collaboration=60)


@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item):
    """Detach root handlers inside pytest's call-phase log capture for tests
    using ``bare_root_logger`` (pytest re-attaches its handlers after fixture setup)."""
    if "bare_root_logger" not in getattr(item, "fixturenames", ()):
        yield
        return
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    root.handlers = []
    try:
        yield
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
