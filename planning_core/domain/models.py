# planning_core/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Set

from planning_core.domain.working_calendar import DEFAULT_CALENDAR, WorkingCalendar

# wage of an employee that is only known by number so far
UNSET_WAGE = 0


@dataclass(eq=False)
class Employee:
    """
    Identity is the employee number: two records with the same number are
    the same employee and get merged by the builder, never duplicated.

    assigned_projects / managed_projects are back-references kept up to date
    by Project.add_commitment and the builder. The commitment maps on the
    projects stay the source of truth.
    """
    number: int
    hourly_wage: int = UNSET_WAGE
    name: str = ""
    assigned_projects: Set["Project"] = field(default_factory=set, repr=False)
    managed_projects: Set["Project"] = field(default_factory=set, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.number == other.number

    def __hash__(self) -> int:
        return hash(self.number)

    def __lt__(self, other: "Employee") -> bool:
        return self.number < other.number

    def __str__(self) -> str:
        return f"{self.name}({self.number})"

    @property
    def has_wage(self) -> bool:
        return self.hourly_wage != UNSET_WAGE

    def merge(self, other: Optional["Employee"]) -> "Employee":
        """Take over wage and name from another record of the same employee if still unset here."""
        if other is None or other is self:
            return self
        if not self.has_wage and other.has_wage:
            self.hourly_wage = other.hourly_wage
        if not self.name and other.name:
            self.name = other.name
        return self

    def calculate_managed_budget(self) -> int:
        return sum(p.calculate_manpower_budget() for p in self.managed_projects)


@dataclass(eq=False)
class Project:
    code: str
    name: str
    start_date: date
    end_date: date
    calendar: WorkingCalendar = field(default=DEFAULT_CALENDAR, repr=False)
    # employee -> committed hours per day, one entry per employee
    committed_hours_per_day: Dict[Employee, int] = field(default_factory=dict, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __lt__(self, other: "Project") -> bool:
        return self.code < other.code

    def __str__(self) -> str:
        return f"{self.name}({self.code})"

    def add_commitment(self, employee: Employee, hours_per_day: int) -> None:
        """
        Repeated commitments of the same employee accumulate into one entry.
        Hours are taken as given, zero or negative values included.
        """
        self.committed_hours_per_day[employee] = (
            self.committed_hours_per_day.get(employee, 0) + hours_per_day
        )
        employee.assigned_projects.add(self)

    def get_working_days(self) -> List[date]:
        return self.calendar.working_days(self.start_date, self.end_date)

    @property
    def num_working_days(self) -> int:
        return len(self.get_working_days())

    def calculate_daily_cost(self) -> int:
        return sum(e.hourly_wage * hours for e, hours in self.committed_hours_per_day.items())

    def calculate_manpower_budget(self) -> int:
        return self.num_working_days * self.calculate_daily_cost()
