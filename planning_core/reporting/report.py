# planning_core/reporting/report.py
from __future__ import annotations

import calendar
from typing import Callable, Dict, Optional

import pandas as pd

from planning_core.config import AppConfig, DEFAULT_CONFIG
from planning_core.domain.models import Employee, Project
from planning_core.domain.planning_system import PlanningSystem


def junior_manager_filter(cfg: AppConfig = DEFAULT_CONFIG) -> Callable[[Employee], bool]:
    threshold = cfg.report.junior_wage_threshold
    return lambda e: e.hourly_wage <= threshold and len(e.managed_projects) > 0


def _manager_of(pps: PlanningSystem, project: Project) -> Optional[Employee]:
    for e in pps.employees:
        if project in e.managed_projects:
            return e
    return None


def build_statistics_summary(pps: PlanningSystem, cfg: AppConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    longest = pps.calculate_longest_project()
    involved = sorted(pps.calculate_most_involved_employees())
    involvement = len(involved[0].assigned_projects) if involved else 0
    junior_budget = sum(pps.calculate_managed_budget_overview(junior_manager_filter(cfg)).values())

    rows = [
        dict(statistic="average_hourly_wage", value=round(pps.calculate_average_hourly_wage(), 2)),
        dict(statistic="longest_project", value=str(longest) if longest else ""),
        dict(statistic="longest_project_working_days", value=longest.num_working_days if longest else 0),
        dict(statistic="most_involved_employees", value=", ".join(str(e) for e in involved)),
        dict(statistic="most_involved_project_count", value=involvement),
        dict(statistic="total_manpower_budget", value=pps.calculate_total_manpower_budget()),
        dict(statistic="junior_managed_budget", value=junior_budget),
        dict(statistic="total_monthly_spend", value=sum(pps.calculate_cumulative_monthly_spends().values())),
    ]
    return pd.DataFrame(rows, columns=["statistic", "value"])


def build_employee_table(pps: PlanningSystem) -> pd.DataFrame:
    rows = []
    for e in pps.employees:
        rows.append(dict(
            number=e.number,
            name=e.name,
            hourly_wage=e.hourly_wage,
            assigned_projects=len(e.assigned_projects),
            managed_projects=len(e.managed_projects),
            managed_budget=e.calculate_managed_budget(),
        ))
    return pd.DataFrame(rows, columns=[
        "number", "name", "hourly_wage", "assigned_projects", "managed_projects", "managed_budget",
    ])


def build_project_table(pps: PlanningSystem) -> pd.DataFrame:
    rows = []
    for p in pps.projects:
        manager = _manager_of(pps, p)
        rows.append(dict(
            code=p.code,
            name=p.name,
            start_date=p.start_date.isoformat(),
            end_date=p.end_date.isoformat(),
            manager=str(manager) if manager else "",
            working_days=p.num_working_days,
            committed_employees=len(p.committed_hours_per_day),
            daily_cost=p.calculate_daily_cost(),
            manpower_budget=p.calculate_manpower_budget(),
        ))
    df = pd.DataFrame(rows, columns=[
        "code", "name", "start_date", "end_date", "manager",
        "working_days", "committed_employees", "daily_cost", "manpower_budget",
    ])
    if not df.empty:
        df = df.sort_values(["working_days", "code"], ascending=[False, True]).reset_index(drop=True)
    return df


def build_managed_budget_table(overview: Dict[Employee, int]) -> pd.DataFrame:
    rows = [
        dict(number=e.number, name=e.name, hourly_wage=e.hourly_wage, managed_budget=budget)
        for e, budget in sorted(overview.items())
    ]
    return pd.DataFrame(rows, columns=["number", "name", "hourly_wage", "managed_budget"])


def build_monthly_spend_table(spends: Dict[int, int]) -> pd.DataFrame:
    rows = [
        dict(month=m, month_name=calendar.month_name[m], spend=spend)
        for m, spend in sorted(spends.items())
    ]
    df = pd.DataFrame(rows, columns=["month", "month_name", "spend"])
    df["running_total"] = df["spend"].cumsum()
    return df


def build_report_tables(pps: PlanningSystem, cfg: AppConfig = DEFAULT_CONFIG) -> Dict[str, pd.DataFrame]:
    """All report tables keyed by their export sheet name."""
    sheets = cfg.sheets
    return {
        sheets.statistics_sheet: build_statistics_summary(pps, cfg),
        sheets.employee_table_sheet: build_employee_table(pps),
        sheets.project_table_sheet: build_project_table(pps),
        sheets.managed_budget_sheet: build_managed_budget_table(
            pps.calculate_managed_budget_overview(junior_manager_filter(cfg))
        ),
        sheets.monthly_spend_sheet: build_monthly_spend_table(pps.calculate_cumulative_monthly_spends()),
    }
