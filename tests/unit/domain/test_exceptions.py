"""
Tests unitaires pour les Exceptions du domaine.
"""


from portfolio_backup.domain.exceptions import (
    BackupError,
    BackupInProgressError,
    BackupNotFoundError,
    BackupSerializationError,
    BackupStorageError,
    DomainException,
    InvalidBackupNameError,
)


class TestDomainException:
    """Tests pour DomainException."""

    def test_create_with_message_only(self):
        """Test creation avec message seul."""
        exc = DomainException("Test error")
        assert exc.message == "Test error"
        assert exc.code == "DomainException"

    def test_create_with_code(self):
        """Test creation avec code."""
        exc = DomainException("Test error", code="TEST_CODE")
        assert exc.code == "TEST_CODE"

    def test_str_representation(self):
        """Test representation string."""
        exc = DomainException("Test error", code="TEST")
        assert str(exc) == "[TEST] Test error"


class TestBackupNotFoundError:
    """Tests pour BackupNotFoundError."""

    def test_create(self):
        """Test creation."""
        exc = BackupNotFoundError("backup-2024-01-15T10-30-00-000Z.json")
        assert exc.filename == "backup-2024-01-15T10-30-00-000Z.json"
        assert exc.code == "BACKUP_NOT_FOUND"
        assert exc.message == "Backup file not found: backup-2024-01-15T10-30-00-000Z.json"

    def test_is_backup_error(self):
        """Test heritage."""
        assert isinstance(BackupNotFoundError("x"), BackupError)


class TestBackupStorageError:
    """Tests pour BackupStorageError."""

    def test_create_with_path(self):
        """Test creation avec chemin."""
        exc = BackupStorageError("Permission denied", "/var/backups")
        assert exc.path == "/var/backups"
        assert exc.message == "Permission denied (/var/backups)"

    def test_create_without_path(self):
        """Test creation sans chemin."""
        exc = BackupStorageError("Disk full")
        assert exc.message == "Disk full"
        assert exc.path is None


class TestBackupSerializationError:
    """Tests pour BackupSerializationError."""

    def test_create_with_filename(self):
        """Test creation avec fichier."""
        exc = BackupSerializationError("Expecting value", "backup-x.json")
        assert exc.message == "Backup 'backup-x.json': Expecting value"
        assert exc.code == "BACKUP_SERIALIZATION_ERROR"


class TestBackupInProgressError:
    """Tests pour BackupInProgressError."""

    def test_create(self):
        """Test creation."""
        exc = BackupInProgressError("restore")
        assert exc.operation == "restore"
        assert exc.code == "BACKUP_IN_PROGRESS"
        assert "restore" in str(exc)


class TestInvalidBackupNameError:
    """Tests pour InvalidBackupNameError."""

    def test_create(self):
        """Test creation."""
        exc = InvalidBackupNameError("../etc/passwd")
        assert exc.invalid_value == "../etc/passwd"
        assert exc.code == "INVALID_BACKUP_NAME"
        assert "../etc/passwd" in str(exc)
