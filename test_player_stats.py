"""Tests for the per-player stat generator and the shared random draws."""

import random

import pytest

from models import CoachModifiers, PlayerAttributes
from simulation.player_stats import MAX_FOULS, GameContext, _coach_effect_scale, generate_player_stats
from simulation.randomness import binomial_roll, clamp, normal_random
from simulation.rotation import RotationEntry


# ── Helpers ──────────────────────────────────────────────────────────

def _make_context(**overrides):
    defaults = {
        "team_id": "t",
        "chemistry": 1.0,
        "home_boost": 0.0,
        "is_playoffs": False,
        "team_mods": CoachModifiers(),
        "opponent_mods": CoachModifiers(),
    }
    defaults.update(overrides)
    return GameContext(**defaults)


def _make_entry(player, minutes=32, rating=None, usage_share=1.0, **overrides):
    return RotationEntry(
        player=player,
        slot=0,
        effective_rating=rating if rating is not None else float(player.rating),
        minutes=minutes,
        is_starter=True,
        usage_share=usage_share,
        **overrides,
    )


def _average(values):
    values = list(values)
    return sum(values) / len(values)


class TestStatLineInvariants:
    @pytest.mark.parametrize("position", ["PG", "SG", "SF", "PF", "C", "G-F"])
    def test_shooting_is_consistent(self, make_player, position):
        rng = random.Random(11)
        ctx = _make_context()
        for rating in (50, 75, 99):
            entry = _make_entry(make_player(1, position, rating), usage_share=1.8)
            for _ in range(100):
                s = generate_player_stats(entry, ctx, rng)
                assert s.field_goals_attempted >= 1
                assert 0 <= s.field_goals_made <= s.field_goals_attempted
                assert 0 <= s.three_pointers_made <= s.three_pointers_attempted
                assert s.three_pointers_attempted <= s.field_goals_attempted
                assert s.three_pointers_made <= s.field_goals_made
                assert 0 <= s.free_throws_made <= s.free_throws_attempted
                assert s.points == 2 * s.two_pointers_made + 3 * s.three_pointers_made + s.free_throws_made
                assert 0 <= s.fouls <= MAX_FOULS
                for stat in ("rebounds", "assists", "steals", "blocks", "turnovers"):
                    assert getattr(s, stat) >= 0

    def test_line_identity(self, make_player, rng):
        s = generate_player_stats(_make_entry(make_player("p9", "C")), _make_context(team_id="x"), rng)
        assert s.player_id == "p9"
        assert s.team_id == "x"
        assert s.position == "C"
        assert s.games_played == 1
        assert s.games_started == 1
        assert s.minutes == 32

    def test_zero_minutes_gets_empty_line(self, make_player, rng):
        s = generate_player_stats(_make_entry(make_player(1), minutes=0), _make_context(), rng)
        assert s.games_played == 0
        assert s.minutes == 0
        assert s.points == 0
        assert s.field_goals_attempted == 0


class TestRatingEffects:
    def test_boosted_rating_recorded(self, make_player, rng):
        entry = _make_entry(make_player(1), rating=80.0, matchup_modifier=1.5)
        generate_player_stats(entry, _make_context(home_boost=3.0), rng)
        assert entry.boosted_rating == pytest.approx(84.5)

    def test_clutch_only_in_playoffs(self, make_player, rng):
        clutch = PlayerAttributes(clutch=90)
        entry = _make_entry(make_player(1, attributes=clutch), rating=75.0)
        generate_player_stats(entry, _make_context(), rng)
        assert entry.boosted_rating == pytest.approx(75.0)
        generate_player_stats(entry, _make_context(is_playoffs=True), rng)
        assert entry.boosted_rating == pytest.approx(75.0 + 40 * 0.05)

    def test_better_players_score_more(self, make_player):
        rng = random.Random(21)
        ctx = _make_context()
        star = _make_entry(make_player(1, "SG", 95))
        scrub = _make_entry(make_player(2, "SG", 55))
        star_pts = _average(generate_player_stats(star, ctx, rng).points for _ in range(300))
        scrub_pts = _average(generate_player_stats(scrub, ctx, rng).points for _ in range(300))
        assert star_pts > scrub_pts

    def test_minutes_drive_volume(self, make_player):
        rng = random.Random(4)
        ctx = _make_context()
        starter = _make_entry(make_player(1), minutes=36)
        reserve = _make_entry(make_player(2), minutes=8)
        assert _average(
            generate_player_stats(starter, ctx, rng).field_goals_attempted for _ in range(200)
        ) > _average(
            generate_player_stats(reserve, ctx, rng).field_goals_attempted for _ in range(200)
        )


class TestCoachEffects:
    def test_three_point_tendency_raises_share(self, make_player):
        rng = random.Random(8)
        entry = _make_entry(make_player(1, "SF"), minutes=36)
        neutral = _make_context()
        bombers = _make_context(team_mods=CoachModifiers(three_pt_rate_modifier=0.135))

        def share(ctx):
            lines = [generate_player_stats(entry, ctx, rng) for _ in range(200)]
            return sum(s.three_pointers_attempted for s in lines) / sum(s.field_goals_attempted for s in lines)

        assert share(bombers) > share(neutral) + 0.05

    def test_opponent_defense_lowers_percentages(self, make_player):
        rng = random.Random(13)
        entry = _make_entry(make_player(1, "PF"), minutes=36)
        open_floor = _make_context()
        clamped = _make_context(opponent_mods=CoachModifiers(defense_modifier=-0.05))

        def fg_pct(ctx):
            lines = [generate_player_stats(entry, ctx, rng) for _ in range(300)]
            return sum(s.field_goals_made for s in lines) / sum(s.field_goals_attempted for s in lines)

        assert fg_pct(clamped) < fg_pct(open_floor)


class TestAttributeEffects:
    # 48 minutes so these cross-effects clear the rounding of the base stat
    def _mean(self, make_player, attrs, stat, position="C", draws=300, seed=17):
        rng = random.Random(seed)
        entry = _make_entry(make_player(1, position, attributes=attrs), minutes=48)
        ctx = _make_context()
        return _average(getattr(generate_player_stats(entry, ctx, rng), stat) for _ in range(draws))

    def test_verticality_and_strength_raise_rebounds(self, make_player):
        high = PlayerAttributes(verticality=99, strength=99)
        low = PlayerAttributes(verticality=1, strength=1)
        assert self._mean(make_player, high, "rebounds") > self._mean(make_player, low, "rebounds") + 2

    def test_verticality_raises_blocks(self, make_player):
        high = PlayerAttributes(verticality=99)
        low = PlayerAttributes(verticality=1)
        assert self._mean(make_player, high, "blocks") > self._mean(make_player, low, "blocks") + 0.5

    def test_basketball_iq_trades_turnovers_for_assists(self, make_player):
        smart = PlayerAttributes(basketball_iq=99)
        raw = PlayerAttributes(basketball_iq=1)
        assert self._mean(make_player, smart, "assists", "PG") > self._mean(make_player, raw, "assists", "PG") + 1
        assert self._mean(make_player, smart, "turnovers", "PG") < self._mean(make_player, raw, "turnovers", "PG") - 1

    def test_neutral_block_matches_no_block(self, make_player):
        assert self._mean(make_player, PlayerAttributes(), "rebounds") == self._mean(make_player, None, "rebounds")


class TestCoachabilityAndChemistry:
    def test_coach_effect_scale_bounds(self):
        assert _coach_effect_scale(None) == 1.0
        assert _coach_effect_scale(PlayerAttributes(coachability=50)) == pytest.approx(1.0)
        assert _coach_effect_scale(PlayerAttributes(coachability=1)) == pytest.approx(0.706)
        assert _coach_effect_scale(PlayerAttributes(coachability=99)) == pytest.approx(1.294)
        for value in (1, 25, 75, 99):
            assert 0.7 <= _coach_effect_scale(PlayerAttributes(coachability=value)) <= 1.3

    def test_coachable_players_follow_the_system(self, make_player):
        rng = random.Random(23)
        ctx = _make_context(team_mods=CoachModifiers(assist_multiplier=1.5))

        def mean_assists(coachability):
            attrs = PlayerAttributes(coachability=coachability)
            entry = _make_entry(make_player(1, "PG", attributes=attrs), minutes=36)
            return _average(generate_player_stats(entry, ctx, rng).assists for _ in range(600))

        assert mean_assists(99) > mean_assists(1) + 1

    def test_chemistry_scales_counting_stats(self, make_player):
        rng = random.Random(29)
        entry = _make_entry(make_player(1, "C"), minutes=36)

        def mean_rebounds(chemistry):
            ctx = _make_context(chemistry=chemistry)
            return _average(generate_player_stats(entry, ctx, rng).rebounds for _ in range(600))

        assert mean_rebounds(1.1) > mean_rebounds(0.9) + 1


class TestRandomness:
    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(2, 0, 3) == 2

    def test_normal_draw_is_clamped(self):
        rng = random.Random(0)
        assert all(-2.5 <= normal_random(rng) <= 2.5 for _ in range(5000))

    @pytest.mark.parametrize("attempts", [0, 1, 7, 20, 21, 60])
    def test_binomial_within_attempts(self, attempts):
        rng = random.Random(attempts)
        for p in (-0.2, 0.0, 0.45, 1.0, 1.3):
            assert 0 <= binomial_roll(rng, attempts, p) <= attempts

    def test_binomial_extremes(self):
        rng = random.Random(1)
        assert binomial_roll(rng, 10, 0.0) == 0
        assert binomial_roll(rng, 10, 1.0) == 10
        assert binomial_roll(rng, 50, 1.0) == 50
        assert binomial_roll(rng, -3, 0.5) == 0
