"""
Exceptions metier du domaine.

Ces exceptions representent les echecs des operations de backup
et sont independantes de l'infrastructure.
"""


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class BackupError(DomainException):
    """Exception de base pour les operations de backup."""


class BackupNotFoundError(BackupError):
    """Leve quand un fichier de backup n'existe pas."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            f"Backup file not found: {filename}",
            code="BACKUP_NOT_FOUND"
        )
        self.filename = filename


class BackupStorageError(BackupError):
    """Leve quand le repertoire ou un fichier de backup est inaccessible."""

    def __init__(self, message: str, path: str | None = None) -> None:
        full_message = message
        if path:
            full_message = f"{message} ({path})"
        super().__init__(full_message, code="BACKUP_STORAGE_ERROR")
        self.path = path


class BackupSerializationError(BackupError):
    """Leve quand un backup ne peut etre serialise ou relu."""

    def __init__(self, message: str, filename: str | None = None) -> None:
        full_message = message
        if filename:
            full_message = f"Backup '{filename}': {message}"
        super().__init__(full_message, code="BACKUP_SERIALIZATION_ERROR")
        self.filename = filename


class BackupInProgressError(BackupError):
    """Leve quand une autre sauvegarde ou restauration est en cours."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cannot start {operation}: another backup operation is running",
            code="BACKUP_IN_PROGRESS"
        )
        self.operation = operation


class InvalidBackupNameError(BackupError):
    """Leve quand un nom de fichier ne correspond pas a un backup."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid backup file name: '{value}'. "
            "Expected a file name of the form backup-<timestamp>.json",
            code="INVALID_BACKUP_NAME"
        )
        self.invalid_value = value
