# planning_core/domain/planning_system.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Set

from planning_core.config import DEFAULT_CONFIG
from planning_core.domain.models import Employee, Project


class PlanningSystem:
    """
    Employees, projects and commitments of one planning year.

    Populated through PlanningSystemBuilder only; all calculate_* methods
    are side-effect free reads with a defined result for an empty system.
    """

    def __init__(self, name: str = DEFAULT_CONFIG.default_name,
                 planning_year: int = DEFAULT_CONFIG.default_year):
        self.name = name
        self.planning_year = planning_year
        self._employees: Dict[int, Employee] = {}
        self._projects: Dict[str, Project] = {}

    def __str__(self) -> str:
        return f"PPS_e{len(self._employees)}_p{len(self._projects)}"

    @property
    def employees(self) -> List[Employee]:
        return sorted(self._employees.values())

    @property
    def projects(self) -> List[Project]:
        return sorted(self._projects.values())

    @property
    def is_empty(self) -> bool:
        return not self._employees or not self._projects

    def find_employee(self, number: int) -> Optional[Employee]:
        return self._employees.get(number)

    def find_project(self, code: str) -> Optional[Project]:
        return self._projects.get(code)

    # --- statistics ---

    def calculate_average_hourly_wage(self) -> float:
        if not self._employees:
            return 0.0
        return sum(e.hourly_wage for e in self._employees.values()) / len(self._employees)

    def calculate_longest_project(self) -> Optional[Project]:
        """Project with the most working days; any one of them on a tie, None without projects."""
        return max(self._projects.values(), key=lambda p: p.num_working_days, default=None)

    def calculate_total_manpower_budget(self) -> int:
        return sum(p.calculate_manpower_budget() for p in self._projects.values())

    def calculate_most_involved_employees(self) -> Set[Employee]:
        """All employees tied for the highest number of assigned projects."""
        highest = max((len(e.assigned_projects) for e in self._employees.values()), default=0)
        return {e for e in self._employees.values() if len(e.assigned_projects) == highest}

    def calculate_managed_budget_overview(self, predicate: Callable[[Employee], bool]) -> Dict[Employee, int]:
        overview: Dict[Employee, int] = {}
        for e in self.employees:
            if not predicate(e):
                continue
            overview[e] = overview.get(e, 0) + e.calculate_managed_budget()
        return overview

    def calculate_cumulative_monthly_spends(self) -> Dict[int, int]:
        """
        Month number (1..12) -> summed daily cost of every project on each
        of its working days in that month, ordered by month.
        """
        spends: Dict[int, int] = {}
        for project in self._projects.values():
            cost_per_day = project.calculate_daily_cost()
            for d in project.get_working_days():
                spends[d.month] = spends.get(d.month, 0) + cost_per_day
        return dict(sorted(spends.items()))


class PlanningSystemBuilder:
    """
    Composes a PlanningSystem by chaining add_* calls.

    None arguments and commitments on unknown project codes are ignored so
    that loosely validated input lists can be fed in as they are.
    """

    def __init__(self, name: str = DEFAULT_CONFIG.default_name,
                 planning_year: int = DEFAULT_CONFIG.default_year):
        self._pps = PlanningSystem(name, planning_year)
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError(f"{self._pps} has already been built")

    def _find_or_add_employee(self, employee: Employee) -> Employee:
        # the instance already in the system wins so its wage and projects are kept
        found = self._pps._employees.get(employee.number)
        if found is None:
            self._pps._employees[employee.number] = employee
            return employee
        return found.merge(employee)

    def add_employee(self, employee: Optional[Employee]) -> "PlanningSystemBuilder":
        self._check_open()
        if employee is not None:
            self._find_or_add_employee(employee)
        return self

    def add_project(self, project: Optional[Project], manager: Optional[Employee]) -> "PlanningSystemBuilder":
        """Register the project and make manager (merged by number) its manager."""
        self._check_open()
        if project is None or manager is None:
            return self

        found = self._find_or_add_employee(manager)
        self._pps._projects.setdefault(project.code, project)
        found.managed_projects.add(self._pps._projects[project.code])
        return self

    def add_commitment(self, project_code: str, employee_nr: int, hours_per_day: int) -> "PlanningSystemBuilder":
        """
        Commit employee_nr to hours_per_day on the project, on top of any
        earlier commitment of that employee on the same project. An unknown
        employee number gets a stub employee without wage.
        """
        self._check_open()
        project = self._pps._projects.get(project_code)
        if project is None:
            return self

        employee = self._find_or_add_employee(Employee(employee_nr))
        project.add_commitment(employee, hours_per_day)
        return self

    def build(self) -> PlanningSystem:
        self._built = True
        return self._pps
