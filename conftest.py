"""Root conftest: shared configuration fixtures and the API import path."""

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "webapp" / "backend"))

from drillrota.models import ScheduleConfig  # noqa: E402


@pytest.fixture
def default_config():
    """14 work / 7 rest / 5 induction over 30 days."""
    return ScheduleConfig(work_days=14, rest_days=7, induction_days=5, horizon_days=30)


@pytest.fixture
def no_induction_config():
    return ScheduleConfig(work_days=10, rest_days=5, induction_days=0, horizon_days=45)


@pytest.fixture
def infeasible_config():
    """Two drilling days cannot cover travel plus five induction days."""
    return ScheduleConfig(work_days=8, rest_days=7, induction_days=5, horizon_days=60)


@pytest.fixture
def dated_config():
    return ScheduleConfig(
        work_days=14, rest_days=7, induction_days=5, horizon_days=30,
        start_date=date(2026, 3, 2),
    )
