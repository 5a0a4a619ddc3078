"""
Data models for the drilling rotation scheduler.
Day states, the input configuration and the per-supervisor result records.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Optional, Tuple


class DayState(Enum):
    """One day of a supervisor's schedule, keyed by its one-letter code."""
    TRAVEL_UP = "S"
    INDUCTION = "I"
    DRILLING = "P"
    TRAVEL_DOWN = "B"
    REST = "D"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return STATE_LABELS[self]

    @property
    def color(self) -> str:
        return STATE_COLORS[self]

    @classmethod
    def from_code(cls, code: str) -> "DayState":
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown day code: {code!r}") from None


STATE_LABELS = {
    DayState.TRAVEL_UP: "Travel up",
    DayState.INDUCTION: "Induction",
    DayState.DRILLING: "Drilling",
    DayState.TRAVEL_DOWN: "Travel down",
    DayState.REST: "Rest",
}

# Fill colours for the grid (hex RGB, no leading '#')
STATE_COLORS = {
    DayState.TRAVEL_UP: "DBEAFE",    # blue
    DayState.INDUCTION: "FEF9C3",    # yellow
    DayState.DRILLING: "DCFCE7",     # green
    DayState.TRAVEL_DOWN: "FFEDD5",  # orange
    DayState.REST: "F3F4F6",         # grey
}

# Required number of supervisors drilling on any day
REQUIRED_DRILLING = 2

PACEMAKER_ID = 1
COVERAGE_A_ID = 2
COVERAGE_B_ID = 3

SUPERVISOR_NAMES = {
    PACEMAKER_ID: "Supervisor 1",
    COVERAGE_A_ID: "Supervisor 2",
    COVERAGE_B_ID: "Supervisor 3",
}

ROLE_PACEMAKER = "pacemaker"
ROLE_COVERAGE = "coverage"

# Coverage assignees as used by segments
COVERAGE_A = "A"
COVERAGE_B = "B"
ASSIGNEE_IDS = {COVERAGE_A: COVERAGE_A_ID, COVERAGE_B: COVERAGE_B_ID}


@dataclass(frozen=True)
class ScheduleConfig:
    """Scheduling parameters. Defaults match the planning form's initial values."""
    work_days: int = 14                  # N: TravelUp + Induction + Drilling
    rest_days: int = 7                   # M: TravelDown + Rest
    induction_days: int = 5
    horizon_days: int = 30
    start_date: Optional[date] = None    # display anchor only

    @property
    def drilling_days(self) -> int:
        return self.work_days - 1 - self.induction_days

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.rest_days

    def date_for(self, day: int) -> Optional[date]:
        """Calendar date of a day offset, or None without a start date."""
        if self.start_date is None:
            return None
        return self.start_date + timedelta(days=day)


@dataclass(frozen=True)
class SupervisorSchedule:
    """One supervisor's materialized day sequence over the horizon."""
    supervisor_id: int
    name: str
    role: str
    days: Tuple[DayState, ...] = field(default_factory=tuple)

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(d.code for d in self.days)

    @property
    def code_string(self) -> str:
        return "".join(self.codes)

    @property
    def is_pacemaker(self) -> bool:
        return self.role == ROLE_PACEMAKER

    def __len__(self) -> int:
        return len(self.days)


@dataclass(frozen=True)
class Milestones:
    """Day offsets where the pacemaker enters and leaves Drilling."""
    drill_starts: Tuple[int, ...]
    drill_ends: Tuple[int, ...]


@dataclass(frozen=True)
class CoverageSegment:
    """Closed interval [start_day, end_day] the assignee must be Drilling."""
    start_day: int
    end_day: int
    assignee: str                        # COVERAGE_A or COVERAGE_B

    @property
    def is_empty(self) -> bool:
        return self.end_day < self.start_day

    def __len__(self) -> int:
        return 0 if self.is_empty else self.end_day - self.start_day + 1
