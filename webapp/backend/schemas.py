"""Pydantic schemas for API."""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from drillrota.models import ScheduleConfig


class ScheduleRequest(BaseModel):
    work_days: int = Field(14, description="N: travel up + induction + drilling")
    rest_days: int = Field(7, description="M: travel down + rest")
    induction_days: int = 5
    horizon_days: int = 30
    start_date: Optional[date] = None

    def to_config(self) -> ScheduleConfig:
        return ScheduleConfig(
            work_days=self.work_days,
            rest_days=self.rest_days,
            induction_days=self.induction_days,
            horizon_days=self.horizon_days,
            start_date=self.start_date,
        )


class SupervisorOut(BaseModel):
    id: int
    name: str
    role: str
    schedule: List[str]


class LegendItem(BaseModel):
    code: str
    label: str
    color: str


class ScheduleOut(BaseModel):
    supervisors: List[SupervisorOut]
    drilling_per_day: List[int]
    dates: Optional[List[date]] = None
    valid: bool
    issues: List[str] = []
    legend: List[LegendItem] = []
