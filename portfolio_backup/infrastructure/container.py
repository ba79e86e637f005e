"""
Container d'injection de dependances.

Ce module initialise et connecte les composants de backup: base de
donnees, TableStore, service et scheduler. L'API et la CLI partent
toutes deux d'un Container, jamais d'un singleton global.
"""

from dataclasses import dataclass
from typing import Optional

from apscheduler.schedulers.base import BaseScheduler

from portfolio_backup.domain.ports.table_store import TableStore
from portfolio_backup.infrastructure.backup.config import BackupSettings
from portfolio_backup.infrastructure.backup.scheduler import BackupScheduler
from portfolio_backup.infrastructure.backup.service import BackupService
from portfolio_backup.infrastructure.persistence.database import DatabaseManager
from portfolio_backup.infrastructure.persistence.sqlalchemy_table_store import (
    SqlAlchemyTableStore,
)


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create(get_backup_settings())
        >>> container.backup_service.create_backup("Avant deploiement")
    """

    settings: BackupSettings
    store: TableStore
    backup_service: BackupService
    scheduler: BackupScheduler

    # Absent quand un store est injecte
    db_manager: Optional[DatabaseManager] = None

    @classmethod
    def create(
        cls,
        settings: BackupSettings,
        store: Optional[TableStore] = None,
        scheduler: Optional[BaseScheduler] = None,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            settings: Configuration des sauvegardes.
            store: TableStore a utiliser (defaut: SQLAlchemy sur database_url).
            scheduler: Scheduler APScheduler (defaut: BackgroundScheduler).

        Returns:
            Container configure.
        """
        db_manager = None
        if store is None:
            db_manager = DatabaseManager(settings.database_url)
            # Une restauration sur base vierge a besoin des tables
            db_manager.create_tables()
            store = SqlAlchemyTableStore(db_manager)

        backup_service = BackupService(settings, store)

        return cls(
            settings=settings,
            store=store,
            backup_service=backup_service,
            scheduler=BackupScheduler(settings, backup_service, scheduler),
            db_manager=db_manager,
        )
