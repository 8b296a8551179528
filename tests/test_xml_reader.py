# tests/test_xml_reader.py
import logging
from dataclasses import replace
from datetime import date

import pytest

from planning_core.config import DEFAULT_CONFIG
from planning_core.io_layer.loader import load_planning
from planning_core.io_layer.xml_reader import PlanningImportError, import_from_xml, read_planning_xml


def _write(tmp_path, text, name="planning.xml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_import_planning(planning_xml):
    pps = import_from_xml(str(planning_xml))

    assert pps.name == "HvA2019_e3_p3.xml"
    assert pps.planning_year == 2019
    assert str(pps) == "PPS_e3_p3"
    assert pps.calculate_average_hourly_wage() == 25.0
    assert str(pps.calculate_longest_project()) == "TestProject-1(P1001)"
    assert pps.calculate_total_manpower_budget() == 63 * 215 + 45 * 120
    assert {e.number for e in pps.calculate_most_involved_employees()} == {88808}


def test_manager_stubs_are_merged(planning_xml):
    pps = import_from_xml(str(planning_xml))

    anne = pps.find_employee(60006)
    assert (anne.name, anne.hourly_wage) == ("Anne", 20)
    assert {p.code for p in anne.managed_projects} == {"P1001", "P2002"}
    assert pps.find_project("P2002").committed_hours_per_day == {pps.find_employee(88808): 4}


def test_holidays_from_config(planning_xml):
    cfg = replace(DEFAULT_CONFIG, calendar=replace(DEFAULT_CONFIG.calendar, holidays=(date(2019, 4, 22),)))
    pps = import_from_xml(str(planning_xml), cfg)
    assert pps.find_project("P1001").num_working_days == 62


def test_default_year_and_name(tmp_path):
    path = _write(tmp_path, "<projectPlanning><projects/><employees/></projectPlanning>")
    pps = import_from_xml(path)
    assert pps.planning_year == 2000
    assert pps.is_empty


@pytest.mark.parametrize("text", [
    "<projectPlanning year='2019'><projects>",
    "<planning year='2019'/>",
    "<projectPlanning year='twenty'/>",
    """<projectPlanning year='2019'><projects>
         <project code='P1'><name>x</name><startDate>2019-01-01</startDate></project>
       </projects></projectPlanning>""",
    """<projectPlanning year='2019'><employees>
         <employee><hourlyWage>20</hourlyWage></employee>
       </employees></projectPlanning>""",
    """<projectPlanning year='2019'><projects>
         <project code='P1'><startDate>2019-01-01</startDate><endDate>2019-13-01</endDate></project>
       </projects></projectPlanning>""",
])
def test_malformed_source_fails_whole_import(tmp_path, caplog, text):
    path = _write(tmp_path, text)
    with caplog.at_level(logging.ERROR):
        assert import_from_xml(path) is None
    assert "XML error" in caplog.text


def test_missing_file_is_logged(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert import_from_xml(str(tmp_path / "missing.xml")) is None
    assert "missing.xml" in caplog.text


def test_read_raises_on_wrong_root(tmp_path):
    path = _write(tmp_path, "<planning/>")
    with pytest.raises(PlanningImportError):
        read_planning_xml(path)


def test_project_without_manager_is_skipped(tmp_path):
    path = _write(tmp_path, """<projectPlanning year="2019">
      <projects>
        <project code="P1"><name>one</name><startDate>2019-01-07</startDate><endDate>2019-01-11</endDate></project>
      </projects>
      <employees>
        <employee number="1"><hourlyWage>10</hourlyWage>
          <commitments><commitment project="P1" hoursPerDay="8"/></commitments>
        </employee>
      </employees>
    </projectPlanning>""")
    pps = import_from_xml(path)
    assert pps.projects == []
    assert [e.number for e in pps.employees] == [1]
    assert pps.find_employee(1).assigned_projects == set()


def test_loader_dispatches_on_suffix(planning_xml, tmp_path, caplog):
    assert str(load_planning(str(planning_xml))) == "PPS_e3_p3"
    with caplog.at_level(logging.ERROR):
        assert load_planning(str(tmp_path / "planning.json")) is None
    assert "Unsupported planning source" in caplog.text
