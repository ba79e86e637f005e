"""
BackupScheduler - Planificateur de sauvegardes.

Responsabilite unique:
----------------------
Planifier et executer les sauvegardes automatiques avec retention.

Usage:
------
    scheduler = BackupScheduler(settings, service)
    scheduler.start()  # Demarre en arriere-plan (toutes les 24h par defaut)
    scheduler.stop()   # Arrete le scheduler
"""

from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.interval import IntervalTrigger

from portfolio_backup.domain.entities.backup import BackupResult
from portfolio_backup.infrastructure.backup.config import BackupSettings
from portfolio_backup.infrastructure.backup.service import (
    AUTOMATIC_BACKUP_DESCRIPTION,
    BackupService,
)
from portfolio_backup.infrastructure.logging import get_logger

logger = get_logger(__name__)

JOB_ID = "automatic_backup"


class BackupScheduler:
    """
    Planificateur de sauvegardes automatiques.

    A chaque tick: backup "Automatic backup", puis suppression des
    snapshots au-dela de la retention. Un tick en echec est logge et
    n'empeche pas les suivants. Les ticks ne se chevauchent pas
    (max_instances=1).
    """

    def __init__(
        self,
        settings: BackupSettings,
        service: BackupService,
        scheduler: Optional[BaseScheduler] = None,
    ):
        """
        Initialise le scheduler.

        Args:
            settings: Configuration des sauvegardes.
            service: Service de backup a piloter.
            scheduler: Scheduler APScheduler (defaut: BackgroundScheduler).
        """
        self._settings = settings
        self._service = service
        self._scheduler = scheduler or BackgroundScheduler(timezone="UTC")
        self._running = False

    def start(self, interval_hours: Optional[float] = None) -> None:
        """
        Demarre le scheduler.

        Args:
            interval_hours: Intervalle entre deux backups
                (defaut: settings.backup_interval_hours).
        """
        if self._running:
            logger.warning("scheduler_already_running")
            return

        hours = interval_hours or self._settings.backup_interval_hours
        if hours <= 0:
            raise ValueError("interval_hours must be > 0")

        self._scheduler.add_job(
            self.run_cycle,
            trigger=IntervalTrigger(hours=hours),
            id=JOB_ID,
            name="Backup automatique",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

        self._running = True
        logger.info(
            "automatic_backups_scheduled",
            interval_hours=hours,
            retention=self._settings.backup_retention_count,
        )

        # Bloquant avec un BlockingScheduler
        try:
            self._scheduler.start()
        except Exception:
            self._running = False
            raise

    def stop(self) -> None:
        """Arrete le scheduler."""
        if not self._running:
            return

        self._scheduler.shutdown(wait=True)
        self._running = False

        logger.info("scheduler_stopped")

    def run_cycle(self) -> Optional[BackupResult]:
        """
        Execute un tick: backup automatique puis retention.

        Returns:
            Resultat du backup, None si le tick a echoue.
        """
        logger.info("automatic_backup_started")

        try:
            result = self._service.create_backup(AUTOMATIC_BACKUP_DESCRIPTION)
            deleted = self._service.prune_backups(self._settings.backup_retention_count)
        except Exception as e:
            logger.error("automatic_backup_failed", error=str(e), error_type=type(e).__name__)
            return None

        logger.info(
            "automatic_backup_completed",
            filename=result.filename,
            size_bytes=result.size_bytes,
            failed_tables=sorted(result.failed_tables),
            pruned=len(deleted),
        )
        return result

    def run_now(self, description: Optional[str] = "Manual backup") -> dict:
        """
        Execute un backup immediatement (sans retention).

        Returns:
            Resume du backup.
        """
        result = self._service.create_backup(description)
        return {
            "filename": result.filename,
            "tables": list(result.tables),
            "failed_tables": dict(result.failed_tables),
            "size_bytes": result.size_bytes,
        }

    @property
    def is_running(self) -> bool:
        """Retourne True si le scheduler est actif."""
        return self._running

    @property
    def next_run(self):
        """Retourne la prochaine execution planifiee."""
        if not self._running:
            return None

        job = self._scheduler.get_job(JOB_ID)
        if job:
            return job.next_run_time
        return None
