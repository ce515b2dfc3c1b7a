"""Full JSON backup export/import."""

from finance_app.backup.exporter import BackupExporter
from finance_app.backup.importer import BackupImporter
from finance_app.backup.tables import BACKUP_SECTIONS, BACKUP_VERSION

__all__ = [
    "BackupExporter",
    "BackupImporter",
    "BACKUP_SECTIONS",
    "BACKUP_VERSION",
]
