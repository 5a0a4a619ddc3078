"""Tests for the run_rota command-line interface."""

import openpyxl

import run_rota


def test_generate_prints_grid_and_coverage(capsys):
    code = run_rota.main(["generate", "--work-days", "14", "--rest-days", "7",
                          "--induction-days", "5", "--horizon-days", "30", "--width", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Supervisor 3" in out
    assert "Coverage: OK" in out


def test_generate_writes_workbook(tmp_path, capsys):
    out_path = tmp_path / "rota.xlsx"
    code = run_rota.main(["generate", "--out", str(out_path), "--start-date", "2026-03-02"])
    assert code == 0
    wb = openpyxl.load_workbook(out_path)
    assert "SCHEDULE" in wb.sheetnames
    assert "CONFLICTS" not in wb.sheetnames
    assert "Writing rotation to" in capsys.readouterr().out


def test_check_rejects_short_work_days(capsys):
    code = run_rota.main(["check", "--work-days", "3", "--induction-days", "5"])
    out = capsys.readouterr().out
    assert code == 1
    assert "work_days - 1 - induction_days = -3" in out


def test_infeasible_generate_writes_conflicts(tmp_path, capsys):
    out_path = tmp_path / "bad.xlsx"
    code = run_rota.main(["generate", "--work-days", "8", "--rest-days", "7",
                          "--induction-days", "5", "--horizon-days", "60",
                          "--out", str(out_path)])
    assert code == 1
    assert "INFEASIBLE" in capsys.readouterr().out
    ws = openpyxl.load_workbook(out_path)["CONFLICTS"]
    assert "Supervisor 2" in ws.cell(2, 1).value


def test_setup_then_check_reads_workbook(tmp_path, capsys):
    path = tmp_path / "params.xlsx"
    assert run_rota.main(["setup", "--workbook", str(path), "--work-days", "10",
                          "--rest-days", "5", "--induction-days", "0",
                          "--horizon-days", "45"]) == 0
    capsys.readouterr()

    assert run_rota.main(["check", "--workbook", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Work days (N): 10" in out
    assert "Induction days: 0" in out
    assert "Coverage: OK" in out


def test_flags_override_workbook(tmp_path, capsys):
    path = tmp_path / "params.xlsx"
    run_rota.main(["setup", "--workbook", str(path), "--horizon-days", "45"])
    capsys.readouterr()
    run_rota.main(["check", "--workbook", str(path), "--horizon-days", "60"])
    assert "Horizon: 60 days" in capsys.readouterr().out


def test_bad_start_date(capsys):
    assert run_rota.main(["generate", "--start-date", "soon"]) == 1
    assert "not a YYYY-MM-DD date" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert run_rota.main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_generate_exits_nonzero_on_coverage_violations(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(run_rota, "validate_coverage",
                        lambda schedules: (False, ["Day 9: drilling count = 1 (expected 2)"]))
    out_path = tmp_path / "gaps.xlsx"
    code = run_rota.main(["generate", "--out", str(out_path), "--width", "0"])
    out = capsys.readouterr().out
    assert code == 1
    assert "Day 9: drilling count = 1 (expected 2)" in out
    assert "Coverage: OK" not in out
    ws = openpyxl.load_workbook(out_path)["CONFLICTS"]
    assert ws.cell(2, 1).value == "Day 9: drilling count = 1 (expected 2)"


def test_check_rejects_stint_without_drilling(capsys):
    code = run_rota.main(["check", "--work-days", "6", "--induction-days", "5",
                          "--horizon-days", "40"])
    assert code == 1
    assert "INFEASIBLE" in capsys.readouterr().out
