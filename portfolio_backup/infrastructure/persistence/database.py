"""
Gestion de la connexion a la base de donnees.

DatabaseManager encapsule la configuration SQLAlchemy et fournit un
context manager pour les sessions avec gestion automatique des
transactions (commit/rollback).

Connection Pooling:
-------------------
Pour PostgreSQL, un pool de connexions optimise est utilise:
- pool_size=5: Connexions maintenues en permanence
- max_overflow=10: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min (evite timeout)
- pool_pre_ping=True: Verification avant utilisation

Pour SQLite (dev/tests), le pool par defaut du dialecte est conserve et
les cles etrangeres sont activees a chaque connexion (PRAGMA foreign_keys),
comme sous PostgreSQL: vider une table parente vide ses enfants ON DELETE CASCADE.
"""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from portfolio_backup.infrastructure.persistence.models import Base


class DatabaseManager:
    """
    Gestionnaire central de connexion a la base de donnees.

    Attributes:
        engine: Moteur SQLAlchemy
        SessionLocal: Factory de sessions configuree

    Example:
        >>> db = DatabaseManager("sqlite:///portfolio.db")
        >>> with db.get_session() as session:
        ...     users = session.query(User).all()
        # Commit automatique si pas d'exception
        # Rollback automatique en cas d'erreur
    """

    def __init__(self, database_url: str):
        if database_url.startswith("sqlite"):
            self.engine = create_engine(database_url, echo=False)
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        else:
            self.engine = create_engine(
                database_url,
                pool_pre_ping=True,
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                echo=False,
            )
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    def create_tables(self) -> None:
        """Cree toutes les tables si elles n'existent pas."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
