"""
Error types for rotation generation.

Generation either returns all three schedules or raises one of these.
"""

from typing import List, Optional


class RotaError(Exception):
    """Base exception for rotation scheduling errors."""

    pass


class InvalidConfiguration(RotaError):
    """Raised before generation when the parameters cannot describe a stint.

    Attributes:
        problems: One message per failed check
    """

    def __init__(self, problems: List[str]) -> None:
        self.problems = list(problems)
        super().__init__("Invalid configuration: " + "; ".join(self.problems))


class InfeasibleHandoff(RotaError):
    """Raised when travel/induction framing would overwrite a committed day.

    The coverage supervisor cannot travel and complete induction between
    leaving one segment and the start of its next one.

    Attributes:
        supervisor: Name of the coverage supervisor
        day: Day offset the framing walk needed
        existing: Code already committed on that day
        segment: The segment being framed
    """

    def __init__(self, supervisor: str, day: int, existing: str, segment: Optional[object] = None) -> None:
        self.supervisor = supervisor
        self.day = day
        self.existing = existing
        self.segment = segment
        super().__init__(
            f"{supervisor}: day {day} already holds '{existing}'; "
            f"not enough days to travel and complete induction before the hand-off"
        )
