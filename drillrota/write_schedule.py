"""
Write generated rotations out: a colour-coded Excel grid, or a plain-text
grid for terminals. Both show the daily drilling count under the supervisors.
Adds a CONFLICTS sheet when generation or validation reports issues.
"""

from io import BytesIO
from pathlib import Path
from typing import List, Optional, Sequence, Union

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .models import REQUIRED_DRILLING, ScheduleConfig, SupervisorSchedule
from .validate import drilling_counts
from .workbook_sheets import (
    HEADER_FILL, HEADER_FONT, write_legend_sheet, write_parameters_sheet,
)


SCHEDULE_SHEET = "SCHEDULE"
CONFLICTS_SHEET = "CONFLICTS"

DAY_START_COL = 2
THIN = Side(border_style="thin", color="CBD5E1")
CELL_BORDER = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)
OK_FONT = Font(bold=True, color="16A34A")
BAD_FONT = Font(bold=True, color="DC2626")
BAD_FILL = PatternFill("solid", fgColor="FEE2E2")


def _fill_schedule_sheet(
    ws,
    schedules: Sequence[SupervisorSchedule],
    config: Optional[ScheduleConfig],
) -> None:
    horizon = len(schedules[0].days) if schedules else 0
    has_dates = config is not None and config.start_date is not None
    center = Alignment(horizontal="center", vertical="center")

    ws.cell(1, 1, "Day").font = HEADER_FONT
    ws.cell(1, 1).fill = HEADER_FILL
    for day in range(horizon):
        col = DAY_START_COL + day
        cell = ws.cell(1, col, day)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
        cell.alignment = center
        if has_dates:
            date_cell = ws.cell(2, col, config.date_for(day))
            date_cell.number_format = "dd-mmm"
            date_cell.alignment = center
        ws.column_dimensions[get_column_letter(col)].width = 6.5 if has_dates else 4
    if has_dates:
        ws.cell(2, 1, "Date").font = Font(bold=True)

    row = 3 if has_dates else 2
    for sched in schedules:
        ws.cell(row, 1, sched.name).font = Font(bold=True)
        for day, state in enumerate(sched.days):
            cell = ws.cell(row, DAY_START_COL + day, state.code)
            cell.fill = PatternFill("solid", fgColor=state.color)
            cell.alignment = center
            cell.border = CELL_BORDER
        row += 1

    ws.cell(row, 1, "Drilling").font = Font(bold=True)
    for day, count in enumerate(drilling_counts(schedules)):
        cell = ws.cell(row, DAY_START_COL + day, count)
        cell.alignment = center
        if count == REQUIRED_DRILLING:
            cell.font = OK_FONT
        else:
            cell.font = BAD_FONT
            cell.fill = BAD_FILL

    ws.column_dimensions["A"].width = 16
    ws.freeze_panes = ws.cell(row=3 if has_dates else 2, column=DAY_START_COL)


def build_workbook(
    schedules: Sequence[SupervisorSchedule],
    config: Optional[ScheduleConfig] = None,
    conflicts: Optional[List[str]] = None,
):
    """Return an openpyxl Workbook with SCHEDULE, LEGEND and (optionally) PARAMETERS."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = SCHEDULE_SHEET
    _fill_schedule_sheet(ws, schedules, config)
    write_legend_sheet(wb)
    if config is not None:
        write_parameters_sheet(wb, config)
        wb.active = wb.sheetnames.index(SCHEDULE_SHEET)
    if conflicts:
        _fill_conflicts_sheet(wb, conflicts)
    return wb


def write_schedule(
    output_path: Union[str, Path],
    schedules: Sequence[SupervisorSchedule],
    config: Optional[ScheduleConfig] = None,
    conflicts: Optional[List[str]] = None,
) -> str:
    """Write the rotation workbook to output_path and return the path."""
    output = Path(output_path)
    wb = build_workbook(schedules, config, conflicts)
    wb.save(output)
    return str(output)


def workbook_bytes(
    schedules: Sequence[SupervisorSchedule],
    config: Optional[ScheduleConfig] = None,
) -> bytes:
    """Serialized .xlsx content, for streaming responses."""
    buf = BytesIO()
    build_workbook(schedules, config).save(buf)
    return buf.getvalue()


def _fill_conflicts_sheet(wb, conflicts: List[str]) -> None:
    if CONFLICTS_SHEET in wb.sheetnames:
        del wb[CONFLICTS_SHEET]
    ws = wb.create_sheet(CONFLICTS_SHEET)
    ws.cell(1, 1, "Conflict / Issue")
    for i, msg in enumerate(conflicts, 2):
        ws.cell(i, 1, msg)
    ws.column_dimensions["A"].width = 90


def add_conflicts_sheet(wb_path: Union[str, Path], conflicts: List[str]) -> None:
    """Add a CONFLICTS sheet listing generation or coverage issues."""
    path = Path(wb_path)
    if path.exists():
        wb = openpyxl.load_workbook(path)
    else:
        wb = openpyxl.Workbook()
        wb.remove(wb.active)
    _fill_conflicts_sheet(wb, conflicts)
    wb.save(path)


def render_text_grid(schedules: Sequence[SupervisorSchedule], width: int = 0) -> str:
    """
    Plain-text grid: one row per supervisor plus the drilling count row.
    width > 0 wraps the days into blocks of that many columns.
    """
    if not schedules:
        return ""
    horizon = len(schedules[0].days)
    counts = drilling_counts(schedules)
    label_w = max(len("Drilling"), *(len(s.name) for s in schedules)) + 2
    block = width if width > 0 else max(horizon, 1)

    lines = []
    for start in range(0, horizon, block):
        stop = min(start + block, horizon)
        days = range(start, stop)
        lines.append("Day".ljust(label_w) + " ".join(f"{d:>3}" for d in days))
        for sched in schedules:
            lines.append(sched.name.ljust(label_w) + " ".join(f"{sched.days[d].code:>3}" for d in days))
        lines.append("Drilling".ljust(label_w) + " ".join(
            f"{counts[d]:>3}" if counts[d] == REQUIRED_DRILLING else f"{'!' + str(counts[d]):>3}"
            for d in days
        ))
        if stop < horizon:
            lines.append("")
    return "\n".join(lines)
