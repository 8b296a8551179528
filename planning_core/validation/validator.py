# planning_core/validation/validator.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from planning_core.domain.planning_system import PlanningSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationError(Exception):
    message: str


@dataclass(frozen=True)
class ValidationWarning:
    message: str


def validate_not_empty(pps: PlanningSystem) -> None:
    # statistics are only reported when there is something to report on
    if pps is None or pps.is_empty:
        raise ValidationError("No employees or projects have been set up...")


def validate_integrity(pps: PlanningSystem) -> List[ValidationWarning]:
    """
    Findings that do not stop the report. Nothing is rejected here:
    commitments and projects are reported on as they were imported.
    """
    warnings: List[ValidationWarning] = []

    for p in pps.projects:
        if p.end_date < p.start_date:
            warnings.append(ValidationWarning(
                f"Project {p} ends before it starts: {p.start_date} > {p.end_date}"
            ))
        elif p.num_working_days == 0:
            warnings.append(ValidationWarning(f"Project {p} has no working days"))

        if p.start_date.year != pps.planning_year or p.end_date.year != pps.planning_year:
            warnings.append(ValidationWarning(
                f"Project {p} runs outside planning year {pps.planning_year}: {p.start_date}..{p.end_date}"
            ))

        if not p.committed_hours_per_day:
            warnings.append(ValidationWarning(f"Project {p} has no commitments"))
        for e, hours in p.committed_hours_per_day.items():
            if hours <= 0:
                warnings.append(ValidationWarning(
                    f"Employee {e.number} commits {hours} hours/day to project {p}"
                ))

    for e in pps.employees:
        if not e.has_wage:
            warnings.append(ValidationWarning(f"Employee {e.number} has no hourly wage"))

    for w in warnings:
        logger.warning(w.message)
    return warnings
