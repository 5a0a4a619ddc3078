"""Generate a rotation from posted parameters."""
from fastapi import APIRouter, HTTPException

from drillrota.errors import InfeasibleHandoff, InvalidConfiguration
from drillrota.generator import generate_schedules
from drillrota.models import DayState
from drillrota.validate import drilling_counts, validate_coverage
from schemas import LegendItem, ScheduleOut, ScheduleRequest, SupervisorOut

router = APIRouter()


def run_generation(req: ScheduleRequest):
    """Generate schedules, translating rotation errors into HTTP errors."""
    config = req.to_config()
    try:
        return config, generate_schedules(config)
    except InvalidConfiguration as e:
        raise HTTPException(422, {"error": "invalid_configuration", "problems": e.problems})
    except InfeasibleHandoff as e:
        raise HTTPException(409, {
            "error": "infeasible_handoff",
            "supervisor": e.supervisor,
            "day": e.day,
            "message": str(e),
        })


@router.get("/legend")
def get_legend():
    return [LegendItem(code=s.code, label=s.label, color=f"#{s.color}") for s in DayState]


@router.post("/", response_model=ScheduleOut)
def create_schedule(req: ScheduleRequest):
    config, schedules = run_generation(req)
    valid, issues = validate_coverage(schedules)
    dates = None
    if config.start_date is not None:
        dates = [config.date_for(d) for d in range(config.horizon_days)]
    return ScheduleOut(
        supervisors=[
            SupervisorOut(id=s.supervisor_id, name=s.name, role=s.role, schedule=list(s.codes))
            for s in schedules
        ],
        drilling_per_day=drilling_counts(schedules),
        dates=dates,
        valid=valid,
        issues=issues,
        legend=get_legend(),
    )
