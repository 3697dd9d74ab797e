"""Tests for the per-log reward roll."""

import pytest

from liferpg.gamification.rewards import (
    LOOT_TABLE,
    RewardType,
    roll_reward,
)

from helpers import ScriptedRandom


class TestRollTable:

    @pytest.mark.parametrize("r", [0.0, 0.05, 0.0999])
    def test_critical_doubles(self, r):
        out = roll_reward(40, ScriptedRandom(rolls=[r]))
        assert out.critical
        assert out.xp == 80
        assert out.event.kind is RewardType.CRITICAL
        assert out.event.xp == 80

    @pytest.mark.parametrize("r", [0.10, 0.2, 0.2499])
    def test_bonus_adds_10_to_29(self, r):
        rng = ScriptedRandom(rolls=[r], ints=[17])
        out = roll_reward(40, rng)
        assert not out.critical
        assert out.xp == 57
        assert out.event.kind is RewardType.BONUS
        assert out.event.xp == 17
        assert rng.randint_calls == [(10, 29)]

    @pytest.mark.parametrize("r", [0.25, 0.29])
    def test_loot_leaves_xp_alone(self, r):
        out = roll_reward(40, ScriptedRandom(rolls=[r], picks=[2]))
        assert out.xp == 40
        assert out.event.kind is RewardType.LOOT
        assert out.event.item == LOOT_TABLE[2]
        assert out.event.xp is None

    @pytest.mark.parametrize("r", [0.30, 0.5, 0.999])
    def test_nothing(self, r):
        out = roll_reward(40, ScriptedRandom(rolls=[r]))
        assert out.xp == 40
        assert out.event is None
        assert not out.critical

    def test_single_draw_per_roll(self):
        rng = ScriptedRandom(rolls=[0.5, 0.01])
        roll_reward(40, rng)
        assert rng.rolls == [0.01]

    def test_default_source_stays_in_range(self):
        for _ in range(200):
            out = roll_reward(40)
            assert 40 <= out.xp <= 80

    def test_loot_table_has_six_items(self):
        assert len(LOOT_TABLE) == 6
