"""
Persistence - Acces a la base relationnelle.

    persistence/
    ├── database.py                 DatabaseManager (engine + sessions)
    ├── models/                     Modeles SQLAlchemy des 14 tables
    ├── table_registry.py           Ordre et noms logiques des tables
    └── sqlalchemy_table_store.py   Adapter TableStore
"""

from portfolio_backup.infrastructure.persistence.database import DatabaseManager
from portfolio_backup.infrastructure.persistence.sqlalchemy_table_store import (
    SqlAlchemyTableStore,
)

__all__ = ["DatabaseManager", "SqlAlchemyTableStore"]
