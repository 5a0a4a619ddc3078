"""Tests for the rotation HTTP API."""

import io

import openpyxl
import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Drill Rota" in resp.json()["message"]


def test_create_schedule_with_defaults(client):
    resp = client.post("/api/schedule/", json={})
    assert resp.status_code == 200
    data = resp.json()
    assert [s["id"] for s in data["supervisors"]] == [1, 2, 3]
    assert data["supervisors"][0]["role"] == "pacemaker"
    assert "".join(data["supervisors"][0]["schedule"][:7]) == "SIIIIIP"
    assert all(len(s["schedule"]) == 30 for s in data["supervisors"])
    assert data["drilling_per_day"][6:] == [2] * 24
    assert data["valid"] is True
    assert data["issues"] == []
    assert data["dates"] is None
    assert [item["code"] for item in data["legend"]] == ["S", "I", "P", "B", "D"]


def test_create_schedule_with_start_date(client):
    resp = client.post("/api/schedule/", json={"horizon_days": 10, "start_date": "2026-03-02"})
    assert resp.status_code == 200
    dates = resp.json()["dates"]
    assert dates[0] == "2026-03-02"
    assert dates[-1] == "2026-03-11"


def test_invalid_configuration_is_422(client):
    resp = client.post("/api/schedule/", json={"work_days": 3, "induction_days": 5})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["error"] == "invalid_configuration"
    assert any("induction" in p for p in detail["problems"])


def test_infeasible_handoff_is_409(client):
    resp = client.post("/api/schedule/", json={
        "work_days": 8, "rest_days": 7, "induction_days": 5, "horizon_days": 60,
    })
    assert resp.status_code == 409
    detail = resp.json()["detail"]
    assert detail["error"] == "infeasible_handoff"
    assert detail["day"] == 21


def test_stint_without_drilling_is_409(client):
    resp = client.post("/api/schedule/", json={
        "work_days": 6, "rest_days": 7, "induction_days": 5, "horizon_days": 40,
    })
    assert resp.status_code == 409
    detail = resp.json()["detail"]
    assert detail["supervisor"] == "Supervisor 2"
    assert detail["day"] == 6


def test_legend(client):
    resp = client.get("/api/schedule/legend")
    assert resp.status_code == 200
    assert resp.json()[2] == {"code": "P", "label": "Drilling", "color": "#DCFCE7"}


def test_export_excel(client):
    resp = client.post("/api/export/excel", json={"work_days": 10, "rest_days": 5,
                                                   "induction_days": 0, "horizon_days": 45})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
    assert "rota_10x5_45d.xlsx" in resp.headers["content-disposition"]
    wb = openpyxl.load_workbook(io.BytesIO(resp.content))
    assert wb["SCHEDULE"].cell(2, 1).value == "Supervisor 1"
