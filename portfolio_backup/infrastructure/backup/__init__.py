"""
Backup Infrastructure - Snapshots JSON des tables du portfolio.

Responsabilite:
---------------
Sauvegarder, lister, inspecter, restaurer et supprimer des snapshots
JSON de la base, et planifier des sauvegardes automatiques.

Features:
---------
- Snapshot best-effort: une table en erreur n'empeche pas les autres
- Restauration dans l'ordre des dependances
- Retention par nombre de snapshots
- Une seule sauvegarde/restauration a la fois
"""

from portfolio_backup.infrastructure.backup.config import BackupSettings, get_backup_settings
from portfolio_backup.infrastructure.backup.service import BackupService
from portfolio_backup.infrastructure.backup.scheduler import BackupScheduler

__all__ = ["BackupSettings", "get_backup_settings", "BackupService", "BackupScheduler"]
