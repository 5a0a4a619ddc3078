"""Tests for the pacemaker stint cycle and timeline."""

import pytest

from drillrota.errors import InvalidConfiguration
from drillrota.models import DayState, ScheduleConfig
from drillrota.pacemaker import build_pacemaker_timeline, build_stint_cycle


def _codes(states):
    return "".join(s.code for s in states)


def test_stint_cycle_layout(default_config):
    cycle = build_stint_cycle(default_config)
    assert _codes(cycle) == "S" + "I" * 5 + "P" * 8 + "B" + "D" * 6
    assert len(cycle) == default_config.cycle_length


def test_stint_cycle_without_induction(no_induction_config):
    cycle = build_stint_cycle(no_induction_config)
    assert DayState.INDUCTION not in cycle
    assert _codes(cycle) == "S" + "P" * 9 + "B" + "DDDD"


def test_single_rest_day_has_no_rest_state():
    cycle = build_stint_cycle(ScheduleConfig(work_days=4, rest_days=1, induction_days=1))
    assert _codes(cycle) == "SIPPB"


def test_negative_drilling_count_is_rejected():
    with pytest.raises(InvalidConfiguration) as exc:
        build_stint_cycle(ScheduleConfig(work_days=3, rest_days=7, induction_days=5))
    assert "-3" in str(exc.value)


def test_timeline_starts_like_scenario_a(default_config):
    timeline = build_pacemaker_timeline(default_config)
    assert _codes(timeline) == "SIIIIIPPPPPPPPBDDDDDDSIIIIIPPP"


def test_timeline_is_cycle_repetition():
    config = ScheduleConfig(work_days=9, rest_days=4, induction_days=2, horizon_days=100)
    cycle = build_stint_cycle(config)
    timeline = build_pacemaker_timeline(config)
    assert len(timeline) == 100
    assert all(timeline[d] == cycle[d % len(cycle)] for d in range(100))


@pytest.mark.parametrize("horizon", [1, 2, 5, 13, 20, 21, 22])
def test_timeline_truncates_short_horizons(horizon):
    config = ScheduleConfig(14, 7, 5, horizon)
    timeline = build_pacemaker_timeline(config)
    assert len(timeline) == horizon
    assert timeline[0] is DayState.TRAVEL_UP
