# tests/conftest.py
from datetime import date

import pytest

from planning_core.domain.models import Employee, Project
from planning_core.domain.planning_system import PlanningSystemBuilder


PLANNING_XML = """<?xml version="1.0" encoding="UTF-8"?>
<projectPlanning year="2019">
  <projects>
    <project code="P1001">
      <name>TestProject-1</name>
      <startDate>2019-02-01</startDate>
      <endDate>2019-04-30</endDate>
      <manager number="60006"/>
    </project>
    <project code="P2002">
      <name>TestProject-2</name>
      <startDate>2019-04-01</startDate>
      <endDate>2019-05-31</endDate>
      <manager number="60006"/>
    </project>
    <project code="P3003">
      <name>TestProject-3</name>
      <startDate>2019-03-15</startDate>
      <endDate>2019-04-15</endDate>
      <manager number="77007"/>
    </project>
  </projects>
  <employees>
    <employee number="60006">
      <name>Anne</name>
      <hourlyWage>20</hourlyWage>
      <commitments>
        <commitment project="P1001" hoursPerDay="4"/>
      </commitments>
    </employee>
    <employee number="77007">
      <name>Bram</name>
      <hourlyWage>25</hourlyWage>
      <commitments>
        <commitment project="P1001" hoursPerDay="3"/>
      </commitments>
    </employee>
    <employee number="88808">
      <name>Carla</name>
      <hourlyWage>30</hourlyWage>
      <commitments>
        <commitment project="P1001" hoursPerDay="2"/>
        <commitment project="P2002" hoursPerDay="3"/>
        <commitment project="P2002" hoursPerDay="1"/>
        <commitment project="P9999" hoursPerDay="8"/>
      </commitments>
    </employee>
  </employees>
</projectPlanning>
"""


@pytest.fixture
def projects():
    return (
        Project("P1001", "TestProject-1", date(2019, 2, 1), date(2019, 4, 30)),
        Project("P2002", "TestProject-2", date(2019, 4, 1), date(2019, 5, 31)),
        Project("P3003", "TestProject-3", date(2019, 3, 15), date(2019, 4, 15)),
    )


@pytest.fixture
def employees():
    return (
        Employee(60006, 20, "Anne"),
        Employee(77007, 25, "Bram"),
        Employee(88808, 30, "Carla"),
    )


@pytest.fixture
def pps(projects, employees):
    """
    P1001: 63 working days, 4*20 + 3*25 + 2*30 = 215 per day
    P2002: 45 working days, (3+1)*30 = 120 per day
    P3003: 22 working days, no commitments
    """
    p1, p2, p3 = projects
    e1, e2, e3 = employees
    return (
        PlanningSystemBuilder("test", 2019)
        .add_employee(e1)
        .add_employee(e3)
        .add_project(p1, e1)
        .add_project(p2, Employee(60006))
        .add_project(p3, e2)
        .add_commitment("P1001", 60006, 4)
        .add_commitment("P1001", 77007, 3)
        .add_commitment("P1001", 88808, 2)
        .add_commitment("P2002", 88808, 3)
        .add_commitment("P2002", 88808, 1)
        .build()
    )


@pytest.fixture
def planning_xml(tmp_path):
    path = tmp_path / "HvA2019_e3_p3.xml"
    path.write_text(PLANNING_XML, encoding="utf-8")
    return path
