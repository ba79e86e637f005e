"""
Tests unitaires pour les entites de backup.
"""

import pytest

from portfolio_backup.domain.entities.backup import (
    BACKUP_FORMAT_VERSION,
    BackupData,
    BackupMetadata,
    BackupResult,
    RestoreResult,
)


class TestBackupMetadata:
    """Tests pour BackupMetadata."""

    def test_defaults(self):
        """Version courante, aucune table, taille 0."""
        metadata = BackupMetadata(timestamp="2024-01-15T10:30:00.000Z")

        assert metadata.version == BACKUP_FORMAT_VERSION
        assert metadata.tables == []
        assert metadata.size == 0
        assert metadata.description is None

    def test_to_dict_omits_filename_and_empty_description(self):
        """filename n'est jamais ecrit, description seulement si presente."""
        metadata = BackupMetadata(
            timestamp="2024-01-15T10:30:00.000Z",
            tables=["users"],
            filename="backup-2024-01-15T10-30-00-000Z.json",
        )

        assert metadata.to_dict() == {
            "version": "1.0.0",
            "timestamp": "2024-01-15T10:30:00.000Z",
            "tables": ["users"],
            "size": 0,
        }

    def test_to_dict_with_description(self):
        """La description est serialisee quand presente."""
        metadata = BackupMetadata(timestamp="t", description="Avant migration")

        assert metadata.to_dict()["description"] == "Avant migration"

    def test_from_dict_sets_filename(self):
        """from_dict renseigne le fichier d'origine."""
        metadata = BackupMetadata.from_dict(
            {"version": "1.0.0", "timestamp": "t", "tables": ["skills"], "size": 0},
            "backup-a.json",
        )

        assert metadata.filename == "backup-a.json"
        assert metadata.tables == ["skills"]

    @pytest.mark.parametrize("payload", [None, [], {"version": "1.0.0"}])
    def test_from_dict_rejects_invalid_payload(self, payload):
        """Un payload sans timestamp est invalide."""
        with pytest.raises(ValueError):
            BackupMetadata.from_dict(payload)


class TestBackupData:
    """Tests pour BackupData."""

    def test_add_table_keeps_tables_and_data_aligned(self):
        """Une table ajoutee figure dans data et dans metadata.tables."""
        backup = BackupData(metadata=BackupMetadata(timestamp="t"))

        backup.add_table("users", [{"id": 1}])
        backup.add_table("skills", [])

        assert backup.metadata.tables == ["users", "skills"]
        assert backup.data == {"users": [{"id": 1}], "skills": []}

    def test_row_count(self):
        """row_count gere les tables absentes ou invalides."""
        backup = BackupData(
            metadata=BackupMetadata(timestamp="t"),
            data={"users": [{"id": 1}, {"id": 2}], "broken": "nope"},
        )

        assert backup.row_count("users") == 2
        assert backup.row_count("broken") == 0
        assert backup.row_count("missing") == 0

    def test_from_dict(self):
        """from_dict reconstruit metadonnees et donnees."""
        backup = BackupData.from_dict(
            {
                "metadata": {"version": "1.0.0", "timestamp": "t", "tables": ["users"], "size": 0},
                "data": {"users": [{"id": 1, "username": "admin"}]},
            },
            "backup-a.json",
        )

        assert backup.metadata.filename == "backup-a.json"
        assert backup.data["users"][0]["username"] == "admin"

    def test_from_dict_rejects_non_object(self):
        """Un JSON qui n'est pas un objet est invalide."""
        with pytest.raises(ValueError):
            BackupData.from_dict([1, 2, 3])

    def test_from_dict_rejects_invalid_data(self):
        """data doit etre un objet."""
        with pytest.raises(ValueError):
            BackupData.from_dict({"metadata": {"timestamp": "t"}, "data": [1]})


class TestResults:
    """Tests pour BackupResult et RestoreResult."""

    def test_backup_result_partial(self):
        """is_partial si une table a echoue."""
        metadata = BackupMetadata(timestamp="t", tables=["users"])
        result = BackupResult(
            filename="backup-a.json",
            metadata=metadata,
            failed_tables={"skills": "boom"},
        )

        assert result.tables == ["users"]
        assert result.is_partial is True

    def test_restore_result_complete(self):
        """Une restauration sans echec n'est pas partielle."""
        result = RestoreResult(filename="backup-a.json", restored={"users": 1})

        assert result.is_partial is False
        assert result.cascaded == []
