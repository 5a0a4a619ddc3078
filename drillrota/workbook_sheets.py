"""
Add the data-entry PARAMETERS sheet and the LEGEND sheet to a workbook.
Existing sheets other than these two are never touched.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .models import DayState, ScheduleConfig


PARAMETERS_SHEET = "PARAMETERS"
LEGEND_SHEET = "LEGEND"

HEADER_FILL = PatternFill("solid", fgColor="1E293B")
HEADER_FONT = Font(bold=True, color="FFFFFF")

# key, description
PARAMETER_ROWS: List[Tuple[str, str]] = [
    ("work_days", "N: days from travel up through the last drilling day"),
    ("rest_days", "M: days from travel down through the day before travel up"),
    ("induction_days", "Induction days at the start of every stint"),
    ("horizon_days", "Total days to schedule"),
    ("start_date", "Optional calendar date for day 0 (display only)"),
]


def _replace_sheet(wb, title: str, index: Optional[int] = None):
    if title in wb.sheetnames:
        idx = wb.sheetnames.index(title)
        del wb[title]
        return wb.create_sheet(title, idx)
    return wb.create_sheet(title, index)


def _write_header(ws, labels: List[str]) -> None:
    for col, label in enumerate(labels, 1):
        cell = ws.cell(1, col, label)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT


def write_parameters_sheet(wb, config: ScheduleConfig) -> None:
    """(Re)create PARAMETERS with one key/value/description row per parameter."""
    ws = _replace_sheet(wb, PARAMETERS_SHEET, 0)
    _write_header(ws, ["Parameter", "Value", "Description"])
    for row, (key, desc) in enumerate(PARAMETER_ROWS, 2):
        value = getattr(config, key)
        ws.cell(row, 1, key).font = Font(bold=True)
        cell = ws.cell(row, 2, value)
        if key == "start_date" and value is not None:
            cell.number_format = "yyyy-mm-dd"
        ws.cell(row, 3, desc)
    ws.column_dimensions["A"].width = 18
    ws.column_dimensions["B"].width = 14
    ws.column_dimensions["C"].width = 64


def write_legend_sheet(wb) -> None:
    """(Re)create LEGEND: code, label and colour swatch for each day state."""
    ws = _replace_sheet(wb, LEGEND_SHEET)
    _write_header(ws, ["Code", "State"])
    for row, state in enumerate(DayState, 2):
        code = ws.cell(row, 1, state.code)
        code.fill = PatternFill("solid", fgColor=state.color)
        code.font = Font(bold=True)
        code.alignment = Alignment(horizontal="center")
        ws.cell(row, 2, state.label)
    ws.column_dimensions[get_column_letter(2)].width = 16


def setup_parameters_sheet(wb_path: str, config: Optional[ScheduleConfig] = None) -> str:
    """
    Add/refresh PARAMETERS and LEGEND in the workbook at wb_path.
    Creates the workbook when it does not exist yet.
    """
    path = Path(wb_path)
    if path.exists():
        wb = openpyxl.load_workbook(path)
    else:
        wb = openpyxl.Workbook()
        wb.remove(wb.active)
    write_parameters_sheet(wb, config or ScheduleConfig())
    write_legend_sheet(wb)
    wb.save(path)
    return str(path)
