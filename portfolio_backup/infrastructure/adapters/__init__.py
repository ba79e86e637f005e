"""
Adapters d'infrastructure.

Adapters disponibles:
---------------------
- InMemoryTableStore: TableStore en memoire (dev, tests)
"""

from portfolio_backup.infrastructure.adapters.memory_table_store import (
    InMemoryTableStore,
)

__all__ = ["InMemoryTableStore"]
