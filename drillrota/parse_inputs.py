"""
Read scheduling parameters from a workbook's PARAMETERS sheet.
Missing sheet, missing keys and blank values fall back to ScheduleConfig
defaults; values are not validated here (generate_schedules does that).
"""

from dataclasses import fields, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

import openpyxl

from .errors import InvalidConfiguration
from .models import ScheduleConfig
from .workbook_sheets import PARAMETERS_SHEET


INT_KEYS = ("work_days", "rest_days", "induction_days", "horizon_days")


def parse_date(value: Any) -> Optional[date]:
    """Excel date/datetime or ISO 'YYYY-MM-DD' string -> date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        raise InvalidConfiguration([f"start_date {value!r} is not a YYYY-MM-DD date"]) from None


def _parse_int(key: str, value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidConfiguration([f"{key} {value!r} is not an integer"]) from None


def _read_parameters(wb) -> Dict[str, Any]:
    if PARAMETERS_SHEET not in wb.sheetnames:
        return {}
    ws = wb[PARAMETERS_SHEET]
    values = {}
    for row in range(2, ws.max_row + 1):
        key = ws.cell(row, 1).value
        if not key or not str(key).strip():
            continue
        values[str(key).strip().lower()] = ws.cell(row, 2).value
    return values


def config_from_mapping(values: Dict[str, Any], base: Optional[ScheduleConfig] = None) -> ScheduleConfig:
    """Overlay known, non-blank keys from values onto base (or the defaults)."""
    known = {f.name for f in fields(ScheduleConfig)}
    updates = {}
    for key, value in values.items():
        if key not in known or value is None or value == "":
            continue
        if key == "start_date":
            updates[key] = parse_date(value)
        elif key in INT_KEYS:
            updates[key] = _parse_int(key, value)
    return replace(base or ScheduleConfig(), **updates)


def parse_workbook(wb_path: str) -> ScheduleConfig:
    """Read the PARAMETERS sheet of wb_path into a ScheduleConfig."""
    wb = openpyxl.load_workbook(wb_path, data_only=True)
    try:
        return config_from_mapping(_read_parameters(wb))
    finally:
        wb.close()
