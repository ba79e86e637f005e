"""
Backup Config - Configuration des sauvegardes.

Responsabilite unique:
----------------------
Configurer les parametres de backup.

Variables:
----------
- DATABASE_URL: Base a sauvegarder
- BACKUP_DIR: Repertoire des snapshots (relatif au repertoire courant)
- BACKUP_INTERVAL_HOURS: Intervalle des backups automatiques
- BACKUP_RETENTION_COUNT: Nombre de snapshots conserves apres un backup automatique
- AUTO_BACKUP_ENABLED: Demarre le scheduler avec l'API
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackupSettings(BaseSettings):
    """
    Configuration des sauvegardes.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base de donnees
    database_url: str = "sqlite:///portfolio.db"

    # Stockage local
    backup_dir: str = "backups"

    # Backups automatiques
    auto_backup_enabled: bool = False
    backup_interval_hours: float = Field(default=24, gt=0)
    backup_retention_count: int = Field(default=10, ge=1)

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @property
    def backup_path(self) -> Path:
        """Retourne le chemin de backup."""
        return Path(self.backup_dir)


@lru_cache
def get_backup_settings() -> BackupSettings:
    """Retourne la configuration backup (cached)."""
    return BackupSettings()
