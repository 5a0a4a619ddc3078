"""
Coverage scheduler: derives the two coverage supervisors from the pacemaker.

Milestones are read off the pacemaker timeline, the horizon is cut into
coverage segments that alternate between supervisors A and B, and each
segment is framed with its own travel, induction and travel-down days.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from .errors import InfeasibleHandoff
from .models import (
    ASSIGNEE_IDS, COVERAGE_A, COVERAGE_B, SUPERVISOR_NAMES,
    CoverageSegment, DayState, Milestones, ScheduleConfig,
)

# Cells the backward framing walk may claim
_CLAIMABLE = (None, DayState.REST)


def detect_milestones(timeline: Sequence[DayState]) -> Milestones:
    """
    drill_starts: days entering Drilling (day 0 counts if it is Drilling).
    drill_ends: first day after each Drilling run; a run still open at the
    end of the horizon has no end.
    """
    starts: List[int] = []
    ends: List[int] = []
    previous = None
    for day, state in enumerate(timeline):
        drilling = state is DayState.DRILLING
        was_drilling = previous is DayState.DRILLING
        if drilling and not was_drilling:
            starts.append(day)
        elif was_drilling and not drilling:
            ends.append(day)
        previous = state
    return Milestones(drill_starts=tuple(starts), drill_ends=tuple(ends))


def _end_before(drill_starts: Sequence[int], index: int, horizon_days: int) -> int:
    """Day before the index-th drill start, or the last horizon day."""
    if index < len(drill_starts):
        return drill_starts[index] - 1
    return horizon_days - 1


def derive_segments(milestones: Milestones, horizon_days: int) -> Tuple[CoverageSegment, ...]:
    """
    Segment 0 belongs to A and runs from day 0 until the pacemaker's second
    stint starts drilling. Segment k starts on the k-th drill end and runs
    until the (k+2)-th drill start; even k goes to B, odd k to A.
    """
    starts = milestones.drill_starts
    segments = [
        CoverageSegment(0, _end_before(starts, 1, horizon_days), COVERAGE_A)
    ]
    for k, end in enumerate(milestones.drill_ends):
        assignee = COVERAGE_B if k % 2 == 0 else COVERAGE_A
        segments.append(
            CoverageSegment(end, _end_before(starts, k + 2, horizon_days), assignee)
        )
    return tuple(segments)


def _backfill(
    cells: List[Optional[DayState]],
    first_drilling: int,
    induction_days: int,
    supervisor: str,
    segment: CoverageSegment,
) -> None:
    """Write I x induction_days then one S backwards from first_drilling - 1."""
    framing = [DayState.INDUCTION] * induction_days + [DayState.TRAVEL_UP]
    day = first_drilling - 1
    for state in framing:
        if day < 0:
            break
        if day < len(cells):
            existing = cells[day]
            if existing not in _CLAIMABLE:
                raise InfeasibleHandoff(supervisor, day, existing.code, segment)
            cells[day] = state
        day -= 1


def _realign_day_zero(
    cells: List[Optional[DayState]],
    pacemaker: Sequence[DayState],
    config: ScheduleConfig,
    supervisor: str,
    segment: CoverageSegment,
) -> int:
    """
    First Drilling day for a segment opening at day 0.

    Raises InfeasibleHandoff when the pacemaker's stint has no Drilling days
    but the horizon reaches the day its drilling would start.
    """
    try:
        first = pacemaker.index(DayState.DRILLING)
    except ValueError:
        # Horizon ends before the pacemaker drills; use where the cycle puts it
        first = 1 + config.induction_days
        if first < len(pacemaker):
            raise InfeasibleHandoff(supervisor, first, pacemaker[first].code, segment)
    for day in range(min(first, len(cells))):
        if cells[day] is DayState.DRILLING:
            cells[day] = None
    return first


def materialize_segments(
    segments: Sequence[CoverageSegment],
    config: ScheduleConfig,
    pacemaker: Sequence[DayState],
) -> Dict[str, Tuple[DayState, ...]]:
    """
    Return {assignee: day sequence} for coverage supervisors A and B.

    Raises InfeasibleHandoff when a segment cannot be framed without
    overwriting a day committed by an earlier segment.
    """
    horizon = config.horizon_days
    grids: Dict[str, List[Optional[DayState]]] = {
        COVERAGE_A: [None] * horizon,
        COVERAGE_B: [None] * horizon,
    }

    for seg in sorted(segments, key=lambda s: s.start_day):
        if seg.is_empty:
            logger.debug("Skipping empty segment {}", seg)
            continue
        cells = grids[seg.assignee]
        supervisor = SUPERVISOR_NAMES[ASSIGNEE_IDS[seg.assignee]]

        for day in range(seg.start_day, min(seg.end_day, horizon - 1) + 1):
            cells[day] = DayState.DRILLING
        if seg.end_day + 1 < horizon:
            cells[seg.end_day + 1] = DayState.TRAVEL_DOWN

        first_drilling = seg.start_day
        if seg.start_day == 0:
            first_drilling = _realign_day_zero(cells, pacemaker, config, supervisor, seg)
        _backfill(cells, first_drilling, config.induction_days, supervisor, seg)

    return {
        assignee: tuple(DayState.REST if c is None else c for c in cells)
        for assignee, cells in grids.items()
    }
