"""
Rotation generation entry point.
Validates the configuration, then runs the pacemaker -> milestones ->
segments -> materialization pipeline and returns the three schedules.
"""

from typing import List, Tuple

from loguru import logger

from .coverage import derive_segments, detect_milestones, materialize_segments
from .errors import InvalidConfiguration
from .models import (
    COVERAGE_A, COVERAGE_A_ID, COVERAGE_B, COVERAGE_B_ID, PACEMAKER_ID,
    ROLE_COVERAGE, ROLE_PACEMAKER, SUPERVISOR_NAMES,
    ScheduleConfig, SupervisorSchedule,
)
from .pacemaker import build_pacemaker_timeline


def validate_config(config: ScheduleConfig) -> List[str]:
    """Return a list of configuration problems (empty when valid)."""
    problems = []
    fields = {
        "work_days": config.work_days,
        "rest_days": config.rest_days,
        "induction_days": config.induction_days,
        "horizon_days": config.horizon_days,
    }
    for name, value in fields.items():
        if isinstance(value, bool) or not isinstance(value, int):
            problems.append(f"{name} must be an integer (got {value!r})")
    if problems:
        return problems

    for name in ("work_days", "rest_days", "horizon_days"):
        if fields[name] < 1:
            problems.append(f"{name} = {fields[name]} (must be >= 1)")
    if config.induction_days < 0:
        problems.append(f"induction_days = {config.induction_days} (must be >= 0)")
    if config.drilling_days < 0:
        problems.append(
            f"work_days - 1 - induction_days = {config.drilling_days} "
            f"(work_days={config.work_days} leaves no room for "
            f"{config.induction_days} induction day(s))"
        )
    return problems


def generate_schedules(config: ScheduleConfig) -> Tuple[SupervisorSchedule, ...]:
    """
    Build the pacemaker and both coverage supervisors.
    Returns (pacemaker, coverage A, coverage B).

    Raises InvalidConfiguration before any work, or InfeasibleHandoff when
    the coverage supervisors cannot be framed without breaking a hand-off.
    """
    problems = validate_config(config)
    if problems:
        raise InvalidConfiguration(problems)

    pacemaker = build_pacemaker_timeline(config)
    milestones = detect_milestones(pacemaker)
    logger.debug(
        "Milestones: drill starts {}, drill ends {}",
        milestones.drill_starts, milestones.drill_ends,
    )
    segments = derive_segments(milestones, config.horizon_days)
    logger.debug("Coverage segments: {}", segments)
    coverage = materialize_segments(segments, config, pacemaker)

    result = (
        SupervisorSchedule(
            supervisor_id=PACEMAKER_ID,
            name=SUPERVISOR_NAMES[PACEMAKER_ID],
            role=ROLE_PACEMAKER,
            days=pacemaker,
        ),
        SupervisorSchedule(
            supervisor_id=COVERAGE_A_ID,
            name=SUPERVISOR_NAMES[COVERAGE_A_ID],
            role=ROLE_COVERAGE,
            days=coverage[COVERAGE_A],
        ),
        SupervisorSchedule(
            supervisor_id=COVERAGE_B_ID,
            name=SUPERVISOR_NAMES[COVERAGE_B_ID],
            role=ROLE_COVERAGE,
            days=coverage[COVERAGE_B],
        ),
    )
    logger.info(
        "Generated rotation: N={} M={} induction={} horizon={} ({} segments)",
        config.work_days, config.rest_days, config.induction_days,
        config.horizon_days, len(segments),
    )
    return result
