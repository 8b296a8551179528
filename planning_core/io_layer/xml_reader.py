# planning_core/io_layer/xml_reader.py
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from dateutil.parser import isoparse

from planning_core.config import AppConfig, DEFAULT_CONFIG
from planning_core.domain.models import Employee, Project, UNSET_WAGE
from planning_core.domain.planning_system import PlanningSystem, PlanningSystemBuilder
from planning_core.domain.working_calendar import WorkingCalendar

logger = logging.getLogger(__name__)

ROOT_TAG = "projectPlanning"


class PlanningImportError(ValueError):
    """Structural problem in a planning source that makes the whole import fail."""


def _required_attr(elem: ET.Element, name: str) -> str:
    value = elem.get(name)
    if value is None or not value.strip():
        raise PlanningImportError(f"<{elem.tag}> without '{name}' attribute")
    return value.strip()


def _child_text(elem: ET.Element, tag: str, default: Optional[str] = None) -> Optional[str]:
    child = elem.find(tag)
    if child is None or child.text is None or not child.text.strip():
        return default
    return child.text.strip()


def _parse_date(elem: ET.Element, tag: str) -> date:
    text = _child_text(elem, tag)
    if text is None:
        raise PlanningImportError(f"<{elem.tag}> without <{tag}>")
    return isoparse(text).date()


def _read_project(elem: ET.Element, calendar: WorkingCalendar) -> Tuple[Project, Optional[Employee]]:
    code = _required_attr(elem, "code")
    project = Project(
        code=code,
        name=_child_text(elem, "name", default=code),
        start_date=_parse_date(elem, "startDate"),
        end_date=_parse_date(elem, "endDate"),
        calendar=calendar,
    )
    manager = None
    manager_elem = elem.find("manager")
    if manager_elem is not None:
        manager = Employee(int(_required_attr(manager_elem, "number")))
    return project, manager


def _read_employee(elem: ET.Element) -> Tuple[Employee, List[Tuple[str, int]]]:
    wage = _child_text(elem, "hourlyWage")
    employee = Employee(
        number=int(_required_attr(elem, "number")),
        hourly_wage=int(wage) if wage is not None else UNSET_WAGE,
        name=_child_text(elem, "name", default=""),
    )
    commitments = [
        (_required_attr(c, "project"), int(_required_attr(c, "hoursPerDay")))
        for c in elem.iterfind("commitments/commitment")
    ]
    return employee, commitments


def read_planning_xml(path: str, cfg: AppConfig = DEFAULT_CONFIG) -> PlanningSystem:
    """
    Parse a <projectPlanning> document. Raises on any malformed content;
    use import_from_xml for the logging variant that returns None.
    """
    root = ET.parse(path).getroot()
    if root.tag != ROOT_TAG:
        raise PlanningImportError(f"expected <{ROOT_TAG}> root element, found <{root.tag}>")

    year = int(root.get("year", cfg.default_year))
    calendar = WorkingCalendar.with_holidays(cfg.calendar.holidays)
    builder = PlanningSystemBuilder(Path(path).name, year)

    # managers first come in as stubs, employee records fill in their wages
    for elem in root.iterfind("projects/project"):
        project, manager = _read_project(elem, calendar)
        builder.add_project(project, manager)

    all_commitments: List[Tuple[str, int, int]] = []
    for elem in root.iterfind("employees/employee"):
        employee, commitments = _read_employee(elem)
        builder.add_employee(employee)
        all_commitments.extend((code, employee.number, hours) for code, hours in commitments)

    for code, number, hours in all_commitments:
        builder.add_commitment(code, number, hours)

    return builder.build()


def import_from_xml(path: str, cfg: AppConfig = DEFAULT_CONFIG) -> Optional[PlanningSystem]:
    try:
        pps = read_planning_xml(path, cfg)
    except (ET.ParseError, OSError, ValueError) as e:
        logger.exception("XML error in '%s': %s", path, e)
        return None
    logger.info("Imported %s from '%s' (year %d)", pps, path, pps.planning_year)
    return pps
