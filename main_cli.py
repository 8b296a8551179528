# main_cli.py
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from dateutil.parser import isoparse

from planning_core.config import DEFAULT_CONFIG
from planning_core.io_layer.loader import load_planning
from planning_core.reporting.export_xlsx import export_report_xlsx
from planning_core.reporting.printer import print_planning_statistics
from planning_core.reporting.report import build_report_tables
from planning_core.validation.validator import ValidationError, validate_integrity, validate_not_empty


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Project planning statistics")
    p.add_argument("--config", required=True, help="planning configuration (.xml or .xlsx)")
    p.add_argument("--out", default=None, help="write the report tables to this xlsx")
    p.add_argument("--holiday", action="append", default=[],
                   help="non-working date, e.g. 2019-04-22 (repeatable)")
    p.add_argument("--junior-wage", type=int, default=DEFAULT_CONFIG.report.junior_wage_threshold,
                   help="hourly wage up to which a manager counts as junior")
    p.add_argument("--log-level", default="WARNING", help="DEBUG / INFO / WARNING / ERROR")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        holidays = tuple(isoparse(h).date() for h in args.holiday)
    except ValueError as e:
        print(f"[ERROR] invalid --holiday: {e}")
        return 1

    cfg = replace(
        DEFAULT_CONFIG,
        calendar=replace(DEFAULT_CONFIG.calendar, holidays=holidays),
        report=replace(DEFAULT_CONFIG.report, junior_wage_threshold=args.junior_wage),
    )

    pps = load_planning(args.config, cfg)
    if pps is None:
        print(f"[ERROR] could not import '{args.config}'")
        return 1

    for w in validate_integrity(pps):
        print(f"[WARN] {w.message}")

    print_planning_statistics(pps, cfg)
    try:
        validate_not_empty(pps)
    except ValidationError as e:
        print(f"[RESULT] {e.message}")
        return 2

    if args.out:
        out_path = export_report_xlsx(args.out, build_report_tables(pps, cfg))
        print(f"[RESULT] OK: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
