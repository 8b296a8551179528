# planning_core/config.py
from dataclasses import dataclass
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class CalendarConfig:
    """Working-day policy shared by all projects of one configuration"""
    holidays: Tuple[date, ...] = ()


@dataclass(frozen=True)
class ReportConfig:
    # managed budget overview only lists juniors that manage something
    junior_wage_threshold: int = 30


@dataclass(frozen=True)
class SheetConfig:
    # xlsx import
    projects_sheet: str = "projects"
    employees_sheet: str = "employees"
    commitments_sheet: str = "commitments"

    # xlsx export
    statistics_sheet: str = "statistics"
    employee_table_sheet: str = "employees"
    project_table_sheet: str = "projects"
    managed_budget_sheet: str = "managed_budget"
    monthly_spend_sheet: str = "monthly_spends"


@dataclass(frozen=True)
class AppConfig:
    # an empty planning system before anything has been imported
    default_name: str = "none"
    default_year: int = 2000

    calendar: CalendarConfig = CalendarConfig()
    report: ReportConfig = ReportConfig()
    sheets: SheetConfig = SheetConfig()


DEFAULT_CONFIG = AppConfig()
