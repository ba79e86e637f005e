"""
Configuration et fixtures pytest.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from portfolio_backup.infrastructure.adapters.memory_table_store import InMemoryTableStore
from portfolio_backup.infrastructure.backup.config import BackupSettings
from portfolio_backup.infrastructure.backup.service import BackupService

# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def backup_settings(tmp_path: Path) -> BackupSettings:
    """Configuration pointant vers un repertoire temporaire."""
    return BackupSettings(
        database_url=f"sqlite:///{tmp_path / 'portfolio.db'}",
        backup_dir=str(tmp_path / "backups"),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - STORE ET SERVICE
# ═══════════════════════════════════════════════════════════════════════════════

class FakeClock:
    """Horloge deterministe: avance d'une seconde a chaque appel."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock() -> FakeClock:
    """Horloge demarrant le 15/01/2024 a 10:30 UTC."""
    return FakeClock(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))


@pytest.fixture
def store() -> InMemoryTableStore:
    """Store en memoire avec quelques lignes."""
    store = InMemoryTableStore()
    store.insert_rows("users", [{"id": 1, "username": "admin", "password": "hash"}])
    store.insert_rows("skillCategories", [{"id": 1, "name": "Backend", "order_index": 0}])
    store.insert_rows("skills", [
        {"id": 1, "category_id": 1, "name": "Python", "proficiency_level": 9},
        {"id": 2, "category_id": 1, "name": "SQL", "proficiency_level": 8},
    ])
    return store


@pytest.fixture
def service(backup_settings: BackupSettings, store: InMemoryTableStore, clock: FakeClock) -> BackupService:
    """BackupService sur store memoire et horloge deterministe."""
    return BackupService(backup_settings, store, clock=clock)


# ═══════════════════════════════════════════════════════════════════════════════
# MARKERS
# ═══════════════════════════════════════════════════════════════════════════════

def pytest_configure(config):
    """Configure les markers personnalises."""
    config.addinivalue_line("markers", "unit: Tests unitaires rapides")
    config.addinivalue_line("markers", "integration: Tests d'integration")
