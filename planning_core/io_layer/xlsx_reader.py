# planning_core/io_layer/xlsx_reader.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from planning_core.config import AppConfig, DEFAULT_CONFIG
from planning_core.domain.models import Employee, Project, UNSET_WAGE
from planning_core.domain.planning_system import PlanningSystem, PlanningSystemBuilder
from planning_core.domain.working_calendar import WorkingCalendar

logger = logging.getLogger(__name__)


def _infer_year_from_filename(path: str) -> Optional[int]:
    """
    e.g. HvA2019_e5_p5.xlsx / planning_2019.xlsx
    """
    m = re.search(r"(20\d{2})", Path(path).name)
    if not m:
        return None
    return int(m.group(1))


def _require_columns(df: pd.DataFrame, path: str, sheet_name: str, columns: List[str]) -> None:
    for c in columns:
        if c not in df.columns:
            raise ValueError(f"{path}:{sheet_name} has no column {c}")


def _whole_number(value, what: str) -> int:
    # 20.5 is rejected rather than truncated, the same as in the XML reader
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{what} is not a whole number: {value!r}")
    return int(number)


def _required_date(row: pd.Series, column: str, what: str) -> date:
    if pd.isna(row[column]):
        raise ValueError(f"{what} has no {column}")
    return pd.to_datetime(row[column]).date()


@dataclass(frozen=True)
class PlanningXlsxReader:
    cfg: AppConfig = DEFAULT_CONFIG

    def read_projects(self, path: str) -> List[Tuple[Project, Optional[Employee]]]:
        """
        projects sheet columns (with header row):
        code, name, start_date, end_date, manager_number
        A blank manager_number skips the project.
        """
        sheet = self.cfg.sheets.projects_sheet
        df = pd.read_excel(path, sheet_name=sheet)
        _require_columns(df, path, sheet, ["code", "name", "start_date", "end_date", "manager_number"])

        calendar = WorkingCalendar.with_holidays(self.cfg.calendar.holidays)
        out: List[Tuple[Project, Optional[Employee]]] = []
        for _, row in df.iterrows():
            if pd.isna(row["code"]):
                continue
            code = str(row["code"]).strip()
            where = f"{path}:{sheet} project {code}"
            project = Project(
                code=code,
                name=str(row["name"]).strip() if pd.notna(row["name"]) else code,
                start_date=_required_date(row, "start_date", where),
                end_date=_required_date(row, "end_date", where),
                calendar=calendar,
            )
            manager = None
            if pd.notna(row["manager_number"]):
                manager = Employee(_whole_number(row["manager_number"], f"{where} manager_number"))
            out.append((project, manager))
        return out

    def read_employees(self, path: str) -> List[Employee]:
        """
        employees sheet columns: number, name, hourly_wage
        A blank hourly_wage keeps the wage unset.
        """
        sheet = self.cfg.sheets.employees_sheet
        df = pd.read_excel(path, sheet_name=sheet)
        _require_columns(df, path, sheet, ["number", "hourly_wage"])

        employees: List[Employee] = []
        for _, row in df.iterrows():
            if pd.isna(row["number"]):
                continue
            name = row.get("name")
            number = _whole_number(row["number"], f"{path}:{sheet} number")
            wage = UNSET_WAGE
            if pd.notna(row["hourly_wage"]):
                wage = _whole_number(row["hourly_wage"], f"{path}:{sheet} employee {number} hourly_wage")
            employees.append(Employee(
                number=number,
                hourly_wage=wage,
                name=str(name).strip() if name is not None and pd.notna(name) else "",
            ))
        return employees

    def read_commitments(self, path: str) -> List[Tuple[str, int, int]]:
        """
        commitments sheet columns: project_code, employee_number, hours_per_day
        """
        sheet = self.cfg.sheets.commitments_sheet
        df = pd.read_excel(path, sheet_name=sheet)
        _require_columns(df, path, sheet, ["project_code", "employee_number", "hours_per_day"])

        return [
            (
                str(row["project_code"]).strip(),
                _whole_number(row["employee_number"], f"{path}:{sheet} employee_number"),
                _whole_number(row["hours_per_day"], f"{path}:{sheet} hours_per_day"),
            )
            for _, row in df.iterrows()
            if pd.notna(row["project_code"]) and pd.notna(row["employee_number"])
        ]

    def build_planning_system(self, path: str) -> PlanningSystem:
        year = _infer_year_from_filename(path)
        if year is None:
            year = self.cfg.default_year

        builder = PlanningSystemBuilder(Path(path).name, year)
        for project, manager in self.read_projects(path):
            builder.add_project(project, manager)
        for employee in self.read_employees(path):
            builder.add_employee(employee)
        for code, number, hours in self.read_commitments(path):
            builder.add_commitment(code, number, hours)
        return builder.build()


def import_from_xlsx(path: str, cfg: AppConfig = DEFAULT_CONFIG) -> Optional[PlanningSystem]:
    try:
        pps = PlanningXlsxReader(cfg=cfg).build_planning_system(path)
    except (OSError, ValueError, KeyError) as e:
        logger.exception("Workbook error in '%s': %s", path, e)
        return None
    logger.info("Imported %s from '%s' (year %d)", pps, path, pps.planning_year)
    return pps
