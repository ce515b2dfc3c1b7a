"""JSON backup export."""

import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from finance_app.backup.tables import BACKUP_SECTIONS, BACKUP_VERSION
from finance_app.core.timezone import now_local

logger = logging.getLogger(__name__)


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


class BackupExporter:
    """
    Full-database exporter.

    Produces one list of row dicts per table plus a ``metadata`` block; the
    result is plain JSON (money as strings, dates as ISO text).
    """

    def __init__(self, db: Session):
        self._db = db

    def export(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for section, orm_class in BACKUP_SECTIONS.items():
            attrs = [attr.key for attr in inspect(orm_class).column_attrs]
            data[section] = [
                {key: _to_json_value(getattr(row, key)) for key in attrs}
                for row in self._db.query(orm_class).all()
            ]

        data["metadata"] = {
            "exported_at": now_local().isoformat(),
            "version": BACKUP_VERSION,
            "sections": {section: len(data[section]) for section in BACKUP_SECTIONS},
        }
        logger.info(
            "Exported backup with %d rows",
            sum(data["metadata"]["sections"].values()),
        )
        return data
