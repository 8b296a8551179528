# planning_core/reporting/export_xlsx.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Dict

import pandas as pd


def _write_tables(target, tables: Dict[str, pd.DataFrame]) -> None:
    with pd.ExcelWriter(target, engine="openpyxl") as w:
        for sheet_name, df in tables.items():
            df.to_excel(w, sheet_name=sheet_name, index=False)


def export_report_xlsx(out_path: str, tables: Dict[str, pd.DataFrame]) -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    _write_tables(out_path, tables)
    return out_path


def export_report_bytes(tables: Dict[str, pd.DataFrame]) -> bytes:
    """Same workbook in memory, for downloads."""
    buf = BytesIO()
    _write_tables(buf, tables)
    return buf.getvalue()
