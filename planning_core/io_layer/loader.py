# planning_core/io_layer/loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from planning_core.config import AppConfig, DEFAULT_CONFIG
from planning_core.domain.planning_system import PlanningSystem
from planning_core.io_layer.xlsx_reader import import_from_xlsx
from planning_core.io_layer.xml_reader import import_from_xml

logger = logging.getLogger(__name__)

IMPORTERS = {
    ".xml": import_from_xml,
    ".xlsx": import_from_xlsx,
}


def load_planning(path: str, cfg: AppConfig = DEFAULT_CONFIG) -> Optional[PlanningSystem]:
    """Import a planning configuration by file type; None when it cannot be imported."""
    importer = IMPORTERS.get(Path(path).suffix.lower())
    if importer is None:
        logger.error("Unsupported planning source '%s' (expected one of %s)", path, ", ".join(IMPORTERS))
        return None
    return importer(path, cfg)
