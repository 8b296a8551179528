# planning_core/reporting/printer.py
from __future__ import annotations

import calendar
import sys
from typing import List, Optional, TextIO

from planning_core.config import AppConfig, DEFAULT_CONFIG
from planning_core.domain.planning_system import PlanningSystem
from planning_core.reporting.report import junior_manager_filter


def format_planning_statistics(pps: PlanningSystem, cfg: AppConfig = DEFAULT_CONFIG) -> str:
    """Console report of the planning year; only the header for an empty system."""
    lines: List[str] = [
        f"Project Statistics of '{pps.name}' in the year {pps.planning_year}",
    ]
    if pps.is_empty:
        lines.append("No employees or projects have been set up...")
        return "\n".join(lines) + "\n"

    lines.append(f"{len(pps.employees)} employees have been assigned to {len(pps.projects)} projects:")
    lines.append("")

    longest = pps.calculate_longest_project()
    involved = sorted(pps.calculate_most_involved_employees())
    involvement = len(involved[0].assigned_projects) if involved else 0
    threshold = cfg.report.junior_wage_threshold
    overview = pps.calculate_managed_budget_overview(junior_manager_filter(cfg))
    spends = pps.calculate_cumulative_monthly_spends()

    lines.append(f"1. The average hourly wage of all employees is {pps.calculate_average_hourly_wage():.2f}")
    lines.append(f"2. The longest project is '{longest}' with {longest.num_working_days} available working days")
    lines.append(
        f"3. The following employees have the broadest assignment in no less than "
        f"{involvement} different projects:"
    )
    lines.append("   " + ", ".join(str(e) for e in involved))
    lines.append(f"4. The total budget of committed project manpower is {pps.calculate_total_manpower_budget()}")
    lines.append(
        f"5. Below is an overview of total managed budget by junior employees (hourly wage <= {threshold}):"
    )
    for e, budget in sorted(overview.items()):
        lines.append(f"   {e}: {budget}")
    lines.append("6. Below is an overview of cumulative monthly project spends:")
    for month, spend in spends.items():
        lines.append(f"   {calendar.month_name[month]}: {spend}")
    return "\n".join(lines) + "\n"


def print_planning_statistics(pps: PlanningSystem, cfg: AppConfig = DEFAULT_CONFIG, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write("\n" + format_planning_statistics(pps, cfg))
