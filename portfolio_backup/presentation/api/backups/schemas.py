"""
Backup Schemas - Modeles Pydantic pour les endpoints backup.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CreateBackupRequest(BaseModel):
    """Requete de creation de backup."""

    description: Optional[str] = Field(None, max_length=500)


class BackupMetadataResponse(BaseModel):
    """Metadonnees d'un backup."""

    filename: Optional[str] = None
    version: str
    timestamp: str
    tables: list[str]
    size: int
    description: Optional[str] = None


class BackupCreatedResponse(BaseModel):
    """Resultat d'une creation de backup."""

    filename: str
    tables: list[str]
    failed_tables: dict[str, str]
    size_bytes: int
    message: str = "Backup created successfully"


class BackupDetailsResponse(BaseModel):
    """Contenu complet d'un backup."""

    metadata: BackupMetadataResponse
    data: dict[str, Any]


class RestoreResponse(BaseModel):
    """Resultat d'une restauration."""

    filename: str
    restored: dict[str, int]
    skipped: list[str]
    failed: dict[str, str]
    cascaded: list[str] = []
    message: str = "Backup restored successfully"


class MessageResponse(BaseModel):
    """Reponse simple."""

    message: str
