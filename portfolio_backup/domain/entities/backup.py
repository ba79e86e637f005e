"""
Backup Entities - Artefacts de sauvegarde.

Responsabilite unique:
----------------------
Representer un snapshot JSON des tables et le resultat des operations
de sauvegarde/restauration.

Format sur disque:
------------------
    {
      "metadata": {"version": "1.0.0", "timestamp": "...", "tables": [...],
                   "size": 0, "description": "..."},
      "data": {"<table>": [{<colonne>: <valeur>, ...}, ...]}
    }
"""

from dataclasses import dataclass, field
from typing import Any, Optional

BACKUP_FORMAT_VERSION = "1.0.0"


@dataclass
class BackupMetadata:
    """
    Metadonnees d'un snapshot.

    Attributes:
        timestamp: Instant de creation (ISO-8601 UTC, millisecondes).
        version: Version du format de snapshot.
        tables: Tables incluses, dans l'ordre de sauvegarde.
        size: Taille du fichier en octets.
        description: Libelle libre optionnel.
        filename: Fichier d'origine (renseigne a la lecture, jamais ecrit).
    """

    timestamp: str
    version: str = BACKUP_FORMAT_VERSION
    tables: list[str] = field(default_factory=list)
    size: int = 0
    description: Optional[str] = None
    filename: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise les metadonnees (sans filename)."""
        payload: dict[str, Any] = {
            "version": self.version,
            "timestamp": self.timestamp,
            "tables": list(self.tables),
            "size": self.size,
        }
        if self.description is not None:
            payload["description"] = self.description
        return payload

    @classmethod
    def from_dict(
        cls, payload: Any, filename: Optional[str] = None
    ) -> "BackupMetadata":
        """
        Reconstruit les metadonnees depuis le JSON.

        Raises:
            ValueError: Si le payload n'est pas un objet avec un timestamp.
        """
        if not isinstance(payload, dict) or "timestamp" not in payload:
            raise ValueError("metadata must be an object with a timestamp")

        return cls(
            timestamp=str(payload["timestamp"]),
            version=str(payload.get("version", BACKUP_FORMAT_VERSION)),
            tables=list(payload.get("tables") or []),
            size=int(payload.get("size") or 0),
            description=payload.get("description"),
            filename=filename,
        )


@dataclass
class BackupData:
    """
    Snapshot complet: metadonnees + lignes par table.

    Une table figure dans metadata.tables si et seulement si ses lignes
    figurent dans data. Utiliser add_table() pour conserver l'invariant.
    """

    metadata: BackupMetadata
    data: dict[str, Any] = field(default_factory=dict)

    def add_table(self, name: str, rows: list[dict[str, Any]]) -> None:
        """Ajoute les lignes d'une table et l'enregistre dans les metadonnees."""
        self.data[name] = list(rows)
        self.metadata.tables.append(name)

    def row_count(self, name: str) -> int:
        """Nombre de lignes d'une table (0 si absente ou invalide)."""
        rows = self.data.get(name)
        return len(rows) if isinstance(rows, list) else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialise le snapshot."""
        return {
            "metadata": self.metadata.to_dict(),
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, payload: Any, filename: Optional[str] = None) -> "BackupData":
        """
        Reconstruit un snapshot depuis le JSON.

        Les valeurs de data ne sont pas validees ici: la restauration
        ignore les entrees qui ne sont pas des listes.

        Raises:
            ValueError: Si la structure de premier niveau est invalide.
        """
        if not isinstance(payload, dict):
            raise ValueError("backup must be a JSON object")

        metadata = BackupMetadata.from_dict(payload.get("metadata"), filename)
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise ValueError("backup data must be an object")

        return cls(metadata=metadata, data=data)


@dataclass
class BackupResult:
    """
    Resultat d'une operation de backup.

    Attributes:
        filename: Nom du fichier de backup.
        metadata: Metadonnees (taille reelle du fichier).
        size_bytes: Taille du fichier.
        duration_seconds: Duree de l'operation.
        failed_tables: Tables non sauvegardees -> message d'erreur.
    """

    filename: str
    metadata: BackupMetadata
    size_bytes: int = 0
    duration_seconds: float = 0.0
    failed_tables: dict[str, str] = field(default_factory=dict)

    @property
    def tables(self) -> list[str]:
        return self.metadata.tables

    @property
    def is_partial(self) -> bool:
        """True si au moins une table n'a pas pu etre sauvegardee."""
        return bool(self.failed_tables)


@dataclass
class RestoreResult:
    """
    Resultat d'une restauration.

    Attributes:
        filename: Fichier restaure.
        restored: Tables remplacees -> nombre de lignes inserees.
        skipped: Tables ignorees (inconnues, vides ou invalides), contenu conserve.
        failed: Tables en echec -> message d'erreur.
        cascaded: Tables non restaurees mais videes par la suppression
            d'une table parente (ON DELETE CASCADE).
        duration_seconds: Duree de l'operation.
    """

    filename: str
    restored: dict[str, int] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    cascaded: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def is_partial(self) -> bool:
        """True si au moins une table n'a pas pu etre restauree."""
        return bool(self.failed)
