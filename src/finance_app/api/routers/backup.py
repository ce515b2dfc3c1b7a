"""Full data export and import."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from finance_app.api.deps import get_backup_exporter, get_backup_importer
from finance_app.api.schemas.backup import ImportResponse
from finance_app.backup import BackupExporter, BackupImporter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["backup"])


@router.get("/export-data")
def export_data(exporter: BackupExporter = Depends(get_backup_exporter)) -> dict[str, Any]:
    """Every table as JSON, with export metadata."""
    return exporter.export()


@router.post("/import-data", response_model=ImportResponse)
def import_data(
    payload: dict[str, Any] = Body(...),
    importer: BackupImporter = Depends(get_backup_importer),
):
    """
    Replace the tables present in the payload with its rows.

    Sections not in the payload are left untouched. Rows that fail to convert
    are reported in ``errors`` and skipped.
    """
    summary = importer.import_data(payload)
    logger.info(
        "Imported %d rows (%d errors) into %d sections",
        summary.imported_count,
        summary.error_count,
        len(summary.sections),
    )
    return ImportResponse.model_validate(summary)
