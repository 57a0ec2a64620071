"""Tests for the physical matchup evaluator."""

import pytest

from models import Measurables, PlayerAttributes
from simulation.matchups import (
    BENCH_DILUTION,
    MATCHUP_CAP,
    apply_matchup_modifiers,
    calculate_matchup_modifiers,
    matchup_edge,
)
from simulation.rotation import RotationEntry


# ── Helpers ──────────────────────────────────────────────────────────

def _entries(players):
    return [RotationEntry(p, i, 75.0, minutes=20, is_starter=i < 5) for i, p in enumerate(players)]


class TestMatchupEdge:
    def test_identical_players_even(self, make_player):
        assert matchup_edge(make_player(1), make_player(2)) == 0

    def test_height_edge_is_capped(self, make_player):
        tall = make_player(1, measurables=Measurables(height=90, wingspan=82))
        short = make_player(2, measurables=Measurables(height=70, wingspan=82))
        assert matchup_edge(tall, short) == pytest.approx(2.0)
        assert matchup_edge(short, tall) == pytest.approx(-2.0)

    def test_total_edge_capped(self, make_player):
        giant = make_player(1, measurables=Measurables(height=90, wingspan=98),
                            attributes=PlayerAttributes(speed=99, strength=99))
        tiny = make_player(2, measurables=Measurables(height=66, wingspan=66),
                           attributes=PlayerAttributes(speed=1, strength=1))
        assert matchup_edge(giant, tiny) == MATCHUP_CAP
        assert matchup_edge(tiny, giant) == -MATCHUP_CAP

    def test_missing_attributes_count_as_neutral(self, make_player):
        quick = make_player(1, attributes=PlayerAttributes(speed=60))
        plain = make_player(2)
        assert matchup_edge(quick, plain) == pytest.approx(10 * 0.02)


class TestMatchupModifiers:
    def test_slot_pairing_and_bench_dilution(self, make_player):
        mine = _entries([make_player(i, measurables=Measurables(height=80)) for i in range(7)])
        theirs = _entries([make_player(i, measurables=Measurables(height=78)) for i in range(7)])
        mods = calculate_matchup_modifiers(mine, theirs)
        starter_edge = 2 * 0.15
        assert mods[:5] == pytest.approx([starter_edge] * 5)
        assert mods[5:] == pytest.approx([starter_edge * BENCH_DILUTION] * 2)

    def test_empty_opponent_gives_zero(self, make_player):
        mine = _entries([make_player(i) for i in range(6)])
        assert calculate_matchup_modifiers(mine, []) == [0.0] * 6
        assert calculate_matchup_modifiers([], mine) == []

    def test_short_opponent_leaves_extra_starters_even(self, make_player):
        mine = _entries([make_player(i, measurables=Measurables(height=80)) for i in range(5)])
        theirs = _entries([make_player(i) for i in range(3)])
        mods = calculate_matchup_modifiers(mine, theirs)
        assert mods[3:] == [0.0, 0.0]
        assert all(m > 0 for m in mods[:3])

    def test_apply_sets_entry_field(self, make_player):
        mine = _entries([make_player(i, measurables=Measurables(height=82)) for i in range(5)])
        theirs = _entries([make_player(i) for i in range(5)])
        apply_matchup_modifiers(mine, theirs)
        apply_matchup_modifiers(theirs, mine)
        assert all(e.matchup_modifier > 0 for e in mine)
        assert all(e.matchup_modifier < 0 for e in theirs)
