"""Export a generated rotation to Excel."""
import io

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from drillrota.write_schedule import workbook_bytes
from routers.schedule import run_generation
from schemas import ScheduleRequest

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.post("/excel")
def export_excel(req: ScheduleRequest):
    """Colour-coded grid: rows=supervisors, cols=days, plus the drilling count row."""
    config, schedules = run_generation(req)
    content = workbook_bytes(schedules, config)
    filename = f"rota_{config.work_days}x{config.rest_days}_{config.horizon_days}d.xlsx"
    return StreamingResponse(
        io.BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
