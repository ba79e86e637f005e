"""
Tests unitaires pour le Container.
"""

from unittest.mock import MagicMock

from portfolio_backup.infrastructure.adapters.memory_table_store import InMemoryTableStore
from portfolio_backup.infrastructure.container import Container
from portfolio_backup.infrastructure.persistence.sqlalchemy_table_store import (
    SqlAlchemyTableStore,
)


class TestContainer:
    """Tests pour Container.create."""

    def test_create_with_injected_store(self, backup_settings):
        """Un store injecte est utilise tel quel, sans base."""
        store = InMemoryTableStore()

        container = Container.create(backup_settings, store=store, scheduler=MagicMock())

        assert container.store is store
        assert container.db_manager is None
        assert container.backup_service.backup_dir == backup_settings.backup_path

    def test_create_default_uses_database(self, backup_settings):
        """Sans store, le Container ouvre la base et cree les tables."""
        container = Container.create(backup_settings, scheduler=MagicMock())

        try:
            assert isinstance(container.store, SqlAlchemyTableStore)
            assert container.store.select_all("users") == []
        finally:
            container.db_manager.dispose()
