"""
Backups Router - Endpoints d'administration des snapshots.

Responsabilite unique:
----------------------
Exposer le BackupService aux administrateurs.

Codes d'erreur:
---------------
- 400: Nom de fichier invalide
- 404: Backup introuvable
- 409: Une sauvegarde/restauration est deja en cours
- 500: Erreur de stockage ou de serialisation
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_backup.domain.entities.backup import BackupMetadata
from portfolio_backup.domain.exceptions import (
    BackupError,
    BackupInProgressError,
    BackupNotFoundError,
    InvalidBackupNameError,
)
from portfolio_backup.infrastructure.backup.service import BackupService
from portfolio_backup.infrastructure.logging import get_logger
from portfolio_backup.presentation.api.auth.jwt_service import TokenPayload
from portfolio_backup.presentation.api.backups.schemas import (
    BackupCreatedResponse,
    BackupDetailsResponse,
    BackupMetadataResponse,
    CreateBackupRequest,
    MessageResponse,
    RestoreResponse,
)
from portfolio_backup.presentation.api.dependencies import (
    get_backup_service,
    get_current_admin,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/admin/backups", tags=["Backups"])

_STATUS_BY_ERROR = (
    (BackupNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidBackupNameError, status.HTTP_400_BAD_REQUEST),
    (BackupInProgressError, status.HTTP_409_CONFLICT),
)


def _to_http_exception(error: BackupError) -> HTTPException:
    """Traduit une erreur du domaine en HTTPException."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error.message,
    )


def _metadata_response(metadata: BackupMetadata) -> BackupMetadataResponse:
    return BackupMetadataResponse(
        filename=metadata.filename,
        version=metadata.version,
        timestamp=metadata.timestamp,
        tables=metadata.tables,
        size=metadata.size,
        description=metadata.description,
    )


@router.post(
    "",
    response_model=BackupCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer un backup",
)
def create_backup(
    payload: Optional[CreateBackupRequest] = None,
    admin: TokenPayload = Depends(get_current_admin),
    service: BackupService = Depends(get_backup_service),
):
    """Cree un snapshot de toutes les tables."""
    description = payload.description if payload else None

    try:
        result = service.create_backup(description)
    except BackupError as e:
        raise _to_http_exception(e)

    logger.info("backup_created_via_api", filename=result.filename, admin=admin.subject)

    return BackupCreatedResponse(
        filename=result.filename,
        tables=result.tables,
        failed_tables=result.failed_tables,
        size_bytes=result.size_bytes,
    )


@router.get(
    "",
    response_model=list[BackupMetadataResponse],
    summary="Lister les backups",
)
def list_backups(
    admin: TokenPayload = Depends(get_current_admin),
    service: BackupService = Depends(get_backup_service),
):
    """Liste les backups, le plus recent en premier."""
    try:
        backups = service.list_backups()
    except BackupError as e:
        raise _to_http_exception(e)

    return [_metadata_response(metadata) for metadata in backups]


@router.get(
    "/{filename}",
    response_model=BackupDetailsResponse,
    summary="Contenu d'un backup",
)
def get_backup_details(
    filename: str,
    admin: TokenPayload = Depends(get_current_admin),
    service: BackupService = Depends(get_backup_service),
):
    """Retourne les metadonnees et les lignes d'un backup."""
    try:
        backup = service.get_backup_details(filename)
    except BackupError as e:
        raise _to_http_exception(e)

    if backup is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Backup file not found: {filename}",
        )

    return BackupDetailsResponse(
        metadata=_metadata_response(backup.metadata),
        data=backup.data,
    )


@router.post(
    "/{filename}/restore",
    response_model=RestoreResponse,
    summary="Restaurer un backup",
    description="Remplace le contenu des tables presentes dans le backup.",
)
def restore_backup(
    filename: str,
    admin: TokenPayload = Depends(get_current_admin),
    service: BackupService = Depends(get_backup_service),
):
    """Restaure un backup (destructif)."""
    logger.warning("restore_requested_via_api", filename=filename, admin=admin.subject)

    try:
        result = service.restore_backup(filename)
    except BackupError as e:
        raise _to_http_exception(e)

    message = "Backup restored successfully"
    if result.is_partial:
        message = f"Backup restored with {len(result.failed)} failed table(s)"

    return RestoreResponse(
        filename=result.filename,
        restored=result.restored,
        skipped=result.skipped,
        failed=result.failed,
        cascaded=result.cascaded,
        message=message,
    )


@router.delete(
    "/{filename}",
    response_model=MessageResponse,
    summary="Supprimer un backup",
)
def delete_backup(
    filename: str,
    admin: TokenPayload = Depends(get_current_admin),
    service: BackupService = Depends(get_backup_service),
):
    """Supprime definitivement un backup."""
    try:
        service.delete_backup(filename)
    except BackupError as e:
        raise _to_http_exception(e)

    return MessageResponse(message="Backup deleted successfully")
