#!/usr/bin/env python3
"""
Drill rota CLI: three-supervisor drilling rotation.

Parameters come from ScheduleConfig defaults, then the workbook's PARAMETERS
sheet (when --workbook is given), then command-line flags.

Usage:
  # Step 1 (optional): create/refresh the PARAMETERS and LEGEND sheets
  python run_rota.py setup --workbook "rota.xlsx" --work-days 14 --rest-days 7

  # Step 2: check a configuration without writing anything
  python run_rota.py check --workbook "rota.xlsx"

  # Step 3: print the rotation and write the colour-coded workbook
  python run_rota.py generate --workbook "rota.xlsx" --out "rota - generated.xlsx"
  python run_rota.py generate --work-days 14 --rest-days 7 --induction-days 5 --horizon-days 30
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from drillrota.errors import InfeasibleHandoff, InvalidConfiguration
from drillrota.generator import generate_schedules, validate_config
from drillrota.models import ScheduleConfig
from drillrota.parse_inputs import parse_date, parse_workbook
from drillrota.validate import ramp_up_days, validate_coverage
from drillrota.workbook_sheets import setup_parameters_sheet
from drillrota.write_schedule import add_conflicts_sheet, render_text_grid, write_schedule


def _resolve(p: str) -> Path:
    pp = Path(p)
    if pp.is_absolute():
        return pp
    return Path.cwd() / pp


def build_config(args) -> ScheduleConfig:
    """Defaults <- PARAMETERS sheet <- command-line flags."""
    workbook = getattr(args, "workbook", None)
    if workbook and _resolve(workbook).exists():
        config = parse_workbook(str(_resolve(workbook)))
    else:
        config = ScheduleConfig()
    overrides = {}
    for key in ("work_days", "rest_days", "induction_days", "horizon_days"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    if getattr(args, "start_date", None):
        overrides["start_date"] = parse_date(args.start_date)
    return replace(config, **overrides)


def _print_config(config: ScheduleConfig) -> None:
    print(f"  Work days (N): {config.work_days}")
    print(f"  Rest days (M): {config.rest_days}")
    print(f"  Induction days: {config.induction_days}")
    print(f"  Horizon: {config.horizon_days} days")
    if config.start_date:
        print(f"  Start date: {config.start_date.isoformat()}")


def _print_issues(title: str, msgs) -> None:
    print(f"  {title}: {len(msgs)} issue(s)")
    for m in msgs[:15]:
        print(f"    {m}")
    if len(msgs) > 15:
        print(f"    ... and {len(msgs) - 15} more")


def cmd_setup(args):
    """Create/refresh the PARAMETERS and LEGEND sheets."""
    wb_path = str(_resolve(args.workbook))
    config = build_config(args)
    problems = validate_config(config)
    if problems:
        _print_issues("Configuration", problems)
        return 1
    print(f"Setting up sheets in: {wb_path}")
    setup_parameters_sheet(wb_path, config)
    print("Done. Sheets added/refreshed: PARAMETERS, LEGEND")
    return 0


def cmd_check(args):
    """Validate the configuration and coverage without writing output."""
    config = build_config(args)
    print("Configuration:")
    _print_config(config)
    try:
        schedules = generate_schedules(config)
    except InvalidConfiguration as e:
        _print_issues("Configuration", e.problems)
        return 1
    except InfeasibleHandoff as e:
        print(f"\nHand-off INFEASIBLE: {e}")
        return 1

    print(f"\nRamp-up: {ramp_up_days(schedules[0])} day(s) before drilling starts")
    valid, violations = validate_coverage(schedules)
    if valid:
        print("Coverage: OK")
        return 0
    _print_issues("Coverage", violations)
    return 1


def cmd_generate(args):
    """Generate the rotation, print it and optionally write a workbook."""
    config = build_config(args)
    print("Configuration:")
    _print_config(config)

    out_path = str(_resolve(args.out)) if args.out else None
    try:
        schedules = generate_schedules(config)
    except InvalidConfiguration as e:
        _print_issues("Configuration", e.problems)
        return 1
    except InfeasibleHandoff as e:
        print(f"\nHand-off INFEASIBLE: {e}")
        if out_path:
            add_conflicts_sheet(out_path, [str(e)])
            print(f"Conflicts written to: {out_path}")
        return 1

    print()
    print(render_text_grid(schedules, width=args.width))
    print()

    valid, violations = validate_coverage(schedules)
    if valid:
        print("  Coverage: OK")
    else:
        _print_issues("Coverage", violations)

    if out_path:
        print(f"\nWriting rotation to: {out_path}")
        write_schedule(out_path, schedules, config, conflicts=violations or None)
    print("Done.")
    return 0 if valid else 1


def _add_config_flags(p):
    p.add_argument("--workbook", default=None, help="Workbook with a PARAMETERS sheet")
    p.add_argument("--work-days", dest="work_days", type=int, default=None, help="N")
    p.add_argument("--rest-days", dest="rest_days", type=int, default=None, help="M")
    p.add_argument("--induction-days", dest="induction_days", type=int, default=None)
    p.add_argument("--horizon-days", dest="horizon_days", type=int, default=None)
    p.add_argument("--start-date", dest="start_date", default=None, help="YYYY-MM-DD for day 0")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Drill rota: three-supervisor drilling rotation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", help="Command")

    # setup
    p_setup = sub.add_parser("setup", help="Add/refresh PARAMETERS and LEGEND sheets")
    _add_config_flags(p_setup)

    # check
    p_check = sub.add_parser("check", help="Validate configuration and coverage")
    _add_config_flags(p_check)

    # generate
    p_gen = sub.add_parser("generate", help="Generate and print the rotation")
    _add_config_flags(p_gen)
    p_gen.add_argument("--out", default=None, help="Write an .xlsx workbook here")
    p_gen.add_argument("--width", type=int, default=31, help="Days per printed block (0 = no wrap)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1
    if args.command == "setup" and not args.workbook:
        parser.error("setup requires --workbook")

    dispatch = {
        "setup": cmd_setup,
        "check": cmd_check,
        "generate": cmd_generate,
    }
    try:
        return dispatch[args.command](args)
    except InvalidConfiguration as e:
        _print_issues("Configuration", e.problems)
        return 1


if __name__ == "__main__":
    sys.exit(main())
