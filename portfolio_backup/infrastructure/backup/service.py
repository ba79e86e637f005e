"""
BackupService - Service de sauvegarde JSON des tables du portfolio.

Responsabilite unique:
----------------------
Executer et gerer les snapshots de la base.

Usage:
------
    service = BackupService(settings, store)
    result = service.create_backup("Avant migration")
    service.restore_backup(result.filename)

Politique d'erreur:
-------------------
- Table illisible a la sauvegarde: warning, table absente du snapshot.
- Table en echec a la restauration: warning, les autres continuent.
- Fichier absent, repertoire inaccessible, JSON invalide: exception.
"""

import json
import os
import re
import time
from contextlib import contextmanager
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from threading import Lock
from typing import Any, Callable, Iterator, List, Optional, Tuple
from uuid import UUID

from portfolio_backup.domain.entities.backup import (
    BackupData,
    BackupMetadata,
    BackupResult,
    RestoreResult,
)
from portfolio_backup.domain.exceptions import (
    BackupError,
    BackupInProgressError,
    BackupNotFoundError,
    BackupSerializationError,
    BackupStorageError,
    InvalidBackupNameError,
)
from portfolio_backup.domain.ports.table_store import TableStore
from portfolio_backup.infrastructure.backup.config import BackupSettings
from portfolio_backup.infrastructure.logging import get_logger

logger = get_logger(__name__)

BACKUP_GLOB = "backup-*.json"
AUTOMATIC_BACKUP_DESCRIPTION = "Automatic backup"

_BACKUP_NAME = re.compile(r"backup-[\w-]+\.json")


def format_timestamp(instant: datetime) -> str:
    """
    Formate un instant en ISO-8601 UTC a la milliseconde.

    Example:
        >>> format_timestamp(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        '2024-01-15T10:30:00.000Z'
    """
    instant = instant.astimezone(timezone.utc)
    return instant.strftime("%Y-%m-%dT%H:%M:%S.") + f"{instant.microsecond // 1000:03d}Z"


def backup_filename(timestamp: str) -> str:
    """
    Nom de fichier d'un snapshot.

    Les ':' et '.' du timestamp sont remplaces par '-': le nom reste
    valide sur tous les systemes de fichiers et trie chronologiquement.
    """
    return "backup-" + timestamp.replace(":", "-").replace(".", "-") + ".json"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _json_default(value: Any) -> Any:
    """Encode les types renvoyes par le store que json ne gere pas."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, UUID):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class BackupService:
    """
    Service de sauvegarde des tables du portfolio.

    Cree, liste, inspecte, restaure et supprime les snapshots.
    Une instance possede un repertoire de backup, cree a l'initialisation.
    """

    def __init__(
        self,
        settings: BackupSettings,
        store: TableStore,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialise le service de backup.

        Args:
            settings: Configuration des sauvegardes.
            store: Acces aux tables a sauvegarder.
            clock: Source de l'instant courant (defaut: UTC systeme).

        Raises:
            BackupStorageError: Si le repertoire ne peut etre cree.
        """
        self._settings = settings
        self._store = store
        self._clock = clock or _utcnow
        self._backup_dir = settings.backup_path
        self._operation_lock = Lock()

        try:
            self._backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackupStorageError(
                f"Cannot create backup directory: {e}", str(self._backup_dir)
            ) from e

    @property
    def backup_dir(self) -> Path:
        return self._backup_dir

    def create_backup(self, description: Optional[str] = None) -> BackupResult:
        """
        Cree un snapshot de toutes les tables connues du store.

        Args:
            description: Libelle optionnel.

        Returns:
            BackupResult avec le fichier cree et les tables en echec.

        Raises:
            BackupInProgressError: Si une autre operation est en cours.
            BackupSerializationError: Si les donnees ne sont pas serialisables.
            BackupStorageError: Si le fichier ne peut etre ecrit.
        """
        with self._single_flight("backup"):
            return self._create_backup(description)

    def list_backups(self) -> List[BackupMetadata]:
        """
        Liste les snapshots disponibles, le plus recent en premier.

        La taille retournee est celle du fichier sur disque. Un fichier
        illisible est ignore avec un warning.

        Returns:
            Metadonnees des snapshots lisibles (filename renseigne).
        """
        try:
            filenames = sorted(
                (path.name for path in self._backup_dir.glob(BACKUP_GLOB) if path.is_file()),
                reverse=True,
            )
        except OSError as e:
            logger.error("backup_list_failed", error=str(e))
            raise BackupStorageError(
                f"Cannot list backups: {e}", str(self._backup_dir)
            ) from e

        backups = []

        for filename in filenames:
            path = self._backup_dir / filename
            try:
                size = path.stat().st_size
                backup = self._load(path, filename)
            except (OSError, BackupError) as e:
                logger.warning("backup_file_unreadable", filename=filename, error=str(e))
                continue

            backup.metadata.size = size
            backups.append(backup.metadata)

        return backups

    def restore_backup(self, filename: str) -> RestoreResult:
        """
        Restaure un snapshot.

        Chaque table presente et non vide du snapshot est remplacee:
        toutes ces tables sont d'abord videes, enfants en premier, puis
        rechargees, parents en premier. Les tables inconnues, vides ou
        invalides sont ignorees et conservees, sauf si la suppression
        d'une table parente les vide en cascade (RestoreResult.cascaded).

        Args:
            filename: Nom du fichier a restaurer.

        Returns:
            RestoreResult avec les tables restaurees, ignorees et en echec.

        Raises:
            InvalidBackupNameError: Si le nom n'est pas un nom de backup.
            BackupNotFoundError: Si le fichier n'existe pas.
            BackupSerializationError: Si le fichier est corrompu.
            BackupInProgressError: Si une autre operation est en cours.

        Warning:
            Cette operation ecrase les donnees existantes!
        """
        path = self._resolve(filename)

        with self._single_flight("restore"):
            return self._restore_backup(path, filename)

    def delete_backup(self, filename: str) -> None:
        """
        Supprime un snapshot.

        Raises:
            InvalidBackupNameError: Si le nom n'est pas un nom de backup.
            BackupNotFoundError: Si le fichier n'existe pas.
            BackupStorageError: Si la suppression echoue.
        """
        path = self._resolve(filename)

        try:
            path.unlink()
        except FileNotFoundError:
            logger.error("backup_delete_failed", filename=filename, error="not found")
            raise BackupNotFoundError(filename) from None
        except OSError as e:
            logger.error("backup_delete_failed", filename=filename, error=str(e))
            raise BackupStorageError(f"Cannot delete backup: {e}", str(path)) from e

        logger.info("backup_deleted", filename=filename)

    def get_backup_details(self, filename: str) -> Optional[BackupData]:
        """
        Retourne le contenu complet d'un snapshot.

        Returns:
            BackupData, ou None si le fichier n'existe pas.

        Raises:
            InvalidBackupNameError: Si le nom n'est pas un nom de backup.
            BackupSerializationError: Si le fichier est corrompu.
        """
        path = self._resolve(filename)

        if not path.is_file():
            return None

        try:
            return self._load(path, filename)
        except BackupError as e:
            logger.error("backup_details_failed", filename=filename, error=str(e))
            raise

    def prune_backups(self, keep: int) -> List[str]:
        """
        Supprime tous les snapshots sauf les `keep` plus recents.

        Args:
            keep: Nombre de snapshots a conserver.

        Returns:
            Noms des fichiers supprimes.
        """
        if keep < 0:
            raise ValueError("keep must be >= 0")

        deleted = []
        for metadata in self.list_backups()[keep:]:
            self.delete_backup(metadata.filename)
            deleted.append(metadata.filename)

        if deleted:
            logger.info("backups_pruned", deleted=len(deleted), kept=keep)

        return deleted

    @contextmanager
    def _single_flight(self, operation: str) -> Iterator[None]:
        """Refuse une operation si une sauvegarde/restauration est en cours."""
        if not self._operation_lock.acquire(blocking=False):
            logger.warning("backup_operation_rejected", operation=operation)
            raise BackupInProgressError(operation)
        try:
            yield
        finally:
            self._operation_lock.release()

    def _create_backup(self, description: Optional[str]) -> BackupResult:
        start_time = time.perf_counter()
        timestamp, filename = self._next_name(self._clock())

        logger.info("backup_started", filename=filename, description=description)

        backup = BackupData(
            metadata=BackupMetadata(timestamp=timestamp, description=description)
        )
        failed_tables = {}

        for name in self._store.table_names():
            try:
                rows = self._store.select_all(name)
            except Exception as e:
                failed_tables[name] = str(e)
                logger.warning("backup_table_failed", table=name, error=str(e))
                continue

            backup.add_table(name, rows)
            logger.debug("backup_table_completed", table=name, records=len(rows))

        try:
            payload = self._serialize(backup)
            size = self._write(filename, payload)
        except BackupError as e:
            logger.error("backup_failed", filename=filename, error=str(e))
            raise

        backup.metadata.size = size
        backup.metadata.filename = filename
        duration = time.perf_counter() - start_time

        logger.info(
            "backup_completed",
            filename=filename,
            tables=len(backup.metadata.tables),
            failed_tables=len(failed_tables),
            size_bytes=size,
            duration_seconds=round(duration, 3),
        )

        return BackupResult(
            filename=filename,
            metadata=backup.metadata,
            size_bytes=size,
            duration_seconds=duration,
            failed_tables=failed_tables,
        )

    def _restore_backup(self, path: Path, filename: str) -> RestoreResult:
        start_time = time.perf_counter()
        logger.warning("restore_started", filename=filename)

        try:
            if not path.is_file():
                raise BackupNotFoundError(filename)
            backup = self._load(path, filename)
        except BackupError as e:
            logger.error("restore_failed", filename=filename, error=str(e))
            raise

        result = RestoreResult(filename=filename)
        plan = self._plan_restore(backup, result)

        # Suppressions enfants d'abord, insertions parents d'abord
        cleared = []
        for name, _ in reversed(plan):
            try:
                self._store.delete_all(name)
            except Exception as e:
                result.failed[name] = str(e)
                logger.warning("restore_table_failed", table=name, step="delete", error=str(e))
                continue

            cleared.append(name)
            for child in self._store.cascade_targets(name):
                if child in cleared or child in result.cascaded:
                    continue
                result.cascaded.append(child)
                if child in result.skipped:
                    result.skipped.remove(child)
                logger.warning("restore_table_cascaded", table=child, parent=name)

        for name, rows in plan:
            if name not in cleared:
                continue

            try:
                self._store.insert_rows(name, rows)
            except Exception as e:
                result.failed[name] = str(e)
                logger.warning("restore_table_failed", table=name, step="insert", error=str(e))
                continue

            result.restored[name] = len(rows)
            logger.debug("restore_table_completed", table=name, records=len(rows))

        result.duration_seconds = time.perf_counter() - start_time

        logger.info(
            "restore_completed",
            filename=filename,
            restored=len(result.restored),
            skipped=len(result.skipped),
            failed=len(result.failed),
            cascaded=len(result.cascaded),
            duration_seconds=round(result.duration_seconds, 3),
        )

        return result

    def _plan_restore(
        self, backup: BackupData, result: RestoreResult
    ) -> List[Tuple[str, list]]:
        """
        Selectionne les tables a remplacer, dans l'ordre du store.

        Les tables inconnues, vides ou invalides sont ajoutees a
        result.skipped, celles dont les lignes sont rejetees par le
        store a result.failed. Aucune n'est modifiee.

        Returns:
            Paires (table, lignes) a restaurer, parents d'abord.
        """
        known = self._store.table_names()
        ordered = [name for name in known if name in backup.data]
        ordered += [name for name in backup.data if name not in known]

        plan = []
        for name in ordered:
            rows = backup.data[name]

            if not self._store.has_table(name) or not isinstance(rows, list):
                result.skipped.append(name)
                logger.warning("restore_table_skipped", table=name, reason="unknown_or_invalid")
                continue

            if not rows:
                result.skipped.append(name)
                logger.info("restore_table_skipped", table=name, reason="empty")
                continue

            try:
                self._store.validate_rows(name, rows)
            except Exception as e:
                result.failed[name] = str(e)
                logger.warning("restore_table_failed", table=name, step="validate", error=str(e))
                continue

            plan.append((name, rows))

        return plan

    def _next_name(self, instant: datetime) -> Tuple[str, str]:
        """
        Timestamp et nom de fichier d'un nouveau snapshot.

        Si un snapshot porte deja ce nom (deux backups dans la meme
        milliseconde), l'instant est avance d'une milliseconde: aucun
        fichier existant n'est ecrase et l'ordre lexical reste chronologique.
        """
        while True:
            timestamp = format_timestamp(instant)
            filename = backup_filename(timestamp)
            if not (self._backup_dir / filename).exists():
                return timestamp, filename
            instant += timedelta(milliseconds=1)

    def _resolve(self, filename: str) -> Path:
        """Valide un nom de backup et retourne son chemin."""
        if not isinstance(filename, str) or not _BACKUP_NAME.fullmatch(filename):
            raise InvalidBackupNameError(filename)
        return self._backup_dir / filename

    def _serialize(self, backup: BackupData) -> str:
        try:
            return json.dumps(
                backup.to_dict(),
                indent=2,
                ensure_ascii=False,
                allow_nan=False,
                default=_json_default,
            )
        except (TypeError, ValueError) as e:
            raise BackupSerializationError(str(e)) from e

    def _write(self, filename: str, payload: str) -> int:
        """
        Ecrit le snapshot via un fichier temporaire renomme en place.

        Returns:
            Taille du fichier final en octets.
        """
        target = self._backup_dir / filename
        temp = self._backup_dir / f".{filename}.tmp"

        try:
            temp.write_text(payload, encoding="utf-8")
            os.replace(temp, target)
            return target.stat().st_size
        except OSError as e:
            try:
                temp.unlink(missing_ok=True)
            except OSError:
                logger.warning("backup_temp_cleanup_failed", path=str(temp))
            raise BackupStorageError(f"Cannot write backup: {e}", str(target)) from e

    def _load(self, path: Path, filename: str) -> BackupData:
        """
        Lit et parse un snapshot.

        Raises:
            BackupStorageError: Si le fichier est illisible.
            BackupSerializationError: Si le contenu est invalide.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise BackupNotFoundError(filename) from None
        except UnicodeDecodeError as e:
            raise BackupSerializationError(str(e), filename) from e
        except OSError as e:
            raise BackupStorageError(f"Cannot read backup: {e}", str(path)) from e

        try:
            return BackupData.from_dict(json.loads(content), filename)
        except (TypeError, ValueError) as e:
            raise BackupSerializationError(str(e), filename) from e
