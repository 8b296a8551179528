# planning_core/gui/app.py
from __future__ import annotations

from dataclasses import replace

import streamlit as st
from dateutil.parser import isoparse

from planning_core.config import DEFAULT_CONFIG
from planning_core.io_layer.loader import load_planning
from planning_core.reporting.export_xlsx import export_report_bytes
from planning_core.reporting.printer import format_planning_statistics
from planning_core.reporting.report import build_report_tables
from planning_core.validation.validator import ValidationError, validate_integrity, validate_not_empty


def main():
    cfg = DEFAULT_CONFIG

    st.title("Project Planning Statistics")

    st.header("Input")
    config_path = st.text_input("Planning configuration (.xml / .xlsx)").strip()
    holiday_lines = st.text_area("Holidays (one YYYY-MM-DD per line)").strip().splitlines()
    junior_wage = st.number_input(
        "Junior hourly wage threshold", min_value=0, max_value=1000,
        value=cfg.report.junior_wage_threshold,
    )

    run = st.button("Calculate statistics")
    if not run:
        st.stop()

    if not config_path:
        st.error("No planning configuration given.")
        st.stop()

    try:
        holidays = tuple(isoparse(h.strip()).date() for h in holiday_lines if h.strip())
    except ValueError as e:
        st.error(f"Invalid holiday: {e}")
        st.stop()

    cfg2 = replace(
        cfg,
        calendar=replace(cfg.calendar, holidays=holidays),
        report=replace(cfg.report, junior_wage_threshold=int(junior_wage)),
    )

    pps = load_planning(config_path, cfg2)
    if pps is None:
        st.error(f"Could not import '{config_path}', see the log for details.")
        st.stop()

    for w in validate_integrity(pps):
        st.warning(w.message)

    try:
        validate_not_empty(pps)
    except ValidationError as e:
        st.info(e.message)
        st.stop()

    tables = build_report_tables(pps, cfg2)
    sheets = cfg2.sheets

    st.success(f"{len(pps.employees)} employees, {len(pps.projects)} projects in {pps.planning_year}")
    st.code(format_planning_statistics(pps, cfg2))

    tab1, tab2, tab3, tab4 = st.tabs(["Projects", "Employees", "Managed budget", "Monthly spends"])
    with tab1:
        st.dataframe(tables[sheets.project_table_sheet], use_container_width=True)
    with tab2:
        st.dataframe(tables[sheets.employee_table_sheet], use_container_width=True)
    with tab3:
        st.dataframe(tables[sheets.managed_budget_sheet], use_container_width=True)
    with tab4:
        spends = tables[sheets.monthly_spend_sheet]
        st.bar_chart(spends, x="month_name", y="spend")
        st.dataframe(spends, use_container_width=True)

    st.download_button(
        label="Download report xlsx",
        data=export_report_bytes(tables),
        file_name="planning_report.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )


if __name__ == "__main__":
    main()
