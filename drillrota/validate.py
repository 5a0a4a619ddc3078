"""
Post-generation coverage checks.
"""

from typing import List, Sequence, Tuple

from loguru import logger

from .models import REQUIRED_DRILLING, DayState, SupervisorSchedule


def drilling_counts(schedules: Sequence[SupervisorSchedule]) -> List[int]:
    """Number of supervisors drilling on each day."""
    if not schedules:
        return []
    horizon = max(len(s.days) for s in schedules)
    return [
        sum(1 for s in schedules if d < len(s.days) and s.days[d] is DayState.DRILLING)
        for d in range(horizon)
    ]


def ramp_up_days(pacemaker: SupervisorSchedule) -> int:
    """Days before the pacemaker first drills; nobody can be ready earlier."""
    for day, state in enumerate(pacemaker.days):
        if state is DayState.DRILLING:
            return day
    return len(pacemaker.days)


def validate_coverage(
    schedules: Sequence[SupervisorSchedule],
) -> Tuple[bool, List[str]]:
    """
    Check the two-drilling-per-day rule outside the opening ramp-up.
    Returns (is_valid, list_of_violation_messages).
    """
    violations = []
    if len(schedules) != 3:
        violations.append(f"expected 3 supervisors, got {len(schedules)}")
        return False, violations

    horizon = len(schedules[0].days)
    for s in schedules:
        if len(s.days) != horizon:
            violations.append(f"{s.name}: {len(s.days)} days (expected {horizon})")

    pacemaker = next((s for s in schedules if s.is_pacemaker), schedules[0])
    start = ramp_up_days(pacemaker)
    counts = drilling_counts(schedules)

    # Ramp-up: nobody drills before the pacemaker does
    for day in range(min(start, len(counts))):
        if counts[day] != 0:
            violations.append(
                f"Day {day}: drilling count = {counts[day]} during ramp-up (expected 0)")
    if start >= len(pacemaker.days) and DayState.TRAVEL_DOWN in pacemaker.days:
        violations.append(f"{pacemaker.name}: completes a stint without drilling")

    for day in range(start, len(counts)):
        if counts[day] != REQUIRED_DRILLING:
            violations.append(
                f"Day {day}: drilling count = {counts[day]} (expected {REQUIRED_DRILLING})")

    if violations:
        logger.warning("Coverage validation found {} issue(s)", len(violations))
    return len(violations) == 0, violations
