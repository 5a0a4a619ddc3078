"""
Pacemaker cycle builder.
The pacemaker's stint cycle is fixed and dictates the hand-off rhythm for the
two coverage supervisors.
"""

from typing import List, Tuple

from loguru import logger

from .errors import InvalidConfiguration
from .models import DayState, ScheduleConfig


def build_stint_cycle(config: ScheduleConfig) -> Tuple[DayState, ...]:
    """
    One stint followed by its rest interval:
    S, I x induction, P x (N - 1 - induction), B, D x (M - 1).
    """
    drilling = config.drilling_days
    if drilling < 0:
        raise InvalidConfiguration([
            f"work_days - 1 - induction_days = {drilling} (must be >= 0)"
        ])

    cycle: List[DayState] = [DayState.TRAVEL_UP]
    cycle.extend([DayState.INDUCTION] * config.induction_days)
    cycle.extend([DayState.DRILLING] * drilling)
    cycle.append(DayState.TRAVEL_DOWN)
    cycle.extend([DayState.REST] * max(config.rest_days - 1, 0))
    return tuple(cycle)


def build_pacemaker_timeline(config: ScheduleConfig) -> Tuple[DayState, ...]:
    """Repeat the stint cycle end-to-end and truncate to horizon_days."""
    cycle = build_stint_cycle(config)
    repeats = -(-config.horizon_days // len(cycle))
    timeline = (cycle * repeats)[:config.horizon_days]
    logger.debug(
        "Pacemaker cycle: {} days, {} repeat(s) over {} day horizon",
        len(cycle), repeats, config.horizon_days,
    )
    return timeline
