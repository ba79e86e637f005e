"""
Entites du domaine.
"""

from portfolio_backup.domain.entities.backup import (
    BACKUP_FORMAT_VERSION,
    BackupData,
    BackupMetadata,
    BackupResult,
    RestoreResult,
)

__all__ = [
    "BACKUP_FORMAT_VERSION",
    "BackupData",
    "BackupMetadata",
    "BackupResult",
    "RestoreResult",
]
