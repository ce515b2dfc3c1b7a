"""JSON backup import."""

import logging
import uuid
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from dateutil import parser as date_parser
from sqlalchemy import inspect, Boolean, Date, DateTime, Integer, Numeric
from sqlalchemy import Enum as SqlEnum
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from finance_app.backup.tables import BACKUP_SECTIONS, SECTION_DEPENDENTS
from finance_app.core.exceptions import ValidationError
from finance_app.core.timezone import parse_date
from finance_app.domain.views import ImportSummary

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "y", "on"}


def _coerce(column, value: Any) -> Any:
    """Convert a JSON value to what the column type stores."""
    if value is None:
        return None
    col_type = column.type
    if isinstance(col_type, SqlEnum):
        enum_cls = col_type.enum_class
        return value if isinstance(value, Enum) else enum_cls(value)
    if isinstance(col_type, DateTime):
        return date_parser.parse(value) if isinstance(value, str) else value
    if isinstance(col_type, Date):
        return parse_date(value)
    if isinstance(col_type, Boolean):
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        return bool(value)
    if isinstance(col_type, Numeric):
        return Decimal(str(value))
    if isinstance(col_type, Integer):
        return int(value)
    return str(value)


class BackupImporter:
    """
    Full-database importer.

    Every section present in the payload replaces the contents of its table;
    sections that are absent are left alone and unknown keys are ignored.
    Rows of absent sections that would reference a replaced row that no
    longer exists are deleted or detached, as the API deletes would do.
    Rows that cannot be converted are skipped and reported; the remaining
    rows are written in a single transaction.
    """

    def __init__(self, db: Session):
        self._db = db

    def import_data(self, payload: dict[str, Any]) -> ImportSummary:
        if not isinstance(payload, dict):
            raise ValidationError("Backup must be a JSON object")

        present = [s for s in BACKUP_SECTIONS if s in payload]
        if not present:
            raise ValidationError("Backup contains no known sections")

        summary = ImportSummary()
        pending_rows = []
        for section in present:
            rows = payload[section]
            if not isinstance(rows, list):
                summary.errors.append(f"{section}: expected a list of rows")
                summary.error_count += 1
                continue
            summary.sections[section] = 0
            for index, row in enumerate(rows):
                try:
                    pending_rows.append((section, self._build_row(section, row)))
                except (ValueError, TypeError, InvalidOperation, OverflowError) as exc:
                    summary.errors.append(f"{section}[{index}]: {exc}")
                    summary.error_count += 1

        try:
            self._drop_dangling_references(present, pending_rows)
            for section in reversed(present):
                self._db.query(BACKUP_SECTIONS[section]).delete()
            for section, orm_row in pending_rows:
                self._db.add(orm_row)
                summary.sections[section] += 1
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.error("Backup import rolled back: %s", exc)
            raise ValidationError(f"Import failed: {exc.__class__.__name__}")

        summary.imported_count = sum(summary.sections.values())
        if summary.errors:
            logger.warning("Backup import skipped %d rows", summary.error_count)
        logger.info("Imported %d rows across %d sections", summary.imported_count, len(present))
        return summary

    def _drop_dangling_references(self, present: list[str], pending_rows: list) -> None:
        """Delete or detach rows of absent sections that reference replaced ids."""
        for section in present:
            parent_ids = [row.id for s, row in pending_rows if s == section]
            for dependent, fk_name, action in SECTION_DEPENDENTS.get(section, ()):
                if dependent in present:
                    continue
                orm_class = BACKUP_SECTIONS[dependent]
                fk = getattr(orm_class, fk_name)
                query = self._db.query(orm_class).filter(fk.isnot(None), fk.notin_(parent_ids))
                if action == "detach":
                    count = query.update({fk: None}, synchronize_session=False)
                else:
                    count = query.delete(synchronize_session=False)
                if count:
                    logger.info("Backup import: %s %d %s rows", action, count, dependent)

    @staticmethod
    def _build_row(section: str, row: Any):
        if not isinstance(row, dict):
            raise TypeError("row must be an object")

        orm_class = BACKUP_SECTIONS[section]
        values: dict[str, Any] = {}
        for attr in inspect(orm_class).column_attrs:
            column = attr.columns[0]
            if attr.key not in row:
                if attr.key == "id":
                    values["id"] = str(uuid.uuid4())
                elif not column.nullable and column.default is None:
                    raise ValueError(f"missing required field '{attr.key}'")
                continue
            value = _coerce(column, row[attr.key])
            if value is None and not column.nullable:
                if column.default is not None:
                    continue
                raise ValueError(f"field '{attr.key}' cannot be null")
            values[attr.key] = value
        return orm_class(**values)
