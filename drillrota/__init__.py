"""
drill-rota: three-supervisor drilling rotation scheduler.
Builds the pacemaker's fixed stint cycle and derives two coverage supervisors
so that exactly two supervisors are drilling every day.

Pure pipeline: pacemaker -> milestones -> segments -> materialized schedules.
"""

from .errors import InfeasibleHandoff, InvalidConfiguration, RotaError
from .generator import generate_schedules, validate_config
from .models import DayState, ScheduleConfig, SupervisorSchedule

__version__ = "1.0.0"

__all__ = [
    "DayState",
    "ScheduleConfig",
    "SupervisorSchedule",
    "RotaError",
    "InvalidConfiguration",
    "InfeasibleHandoff",
    "generate_schedules",
    "validate_config",
]
