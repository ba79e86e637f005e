"""
SqlAlchemyTableStore - Adapter SQLAlchemy du port TableStore.

Responsabilite unique:
----------------------
Traduire les operations tabulaires (lecture complete, purge, insertion
en masse) en requetes SQLAlchemy Core sur les tables du registre.

Chaque appel ouvre sa propre session: une erreur sur une table
n'annule pas les operations deja validees sur les autres.
"""

from datetime import date, datetime
from typing import Any

from sqlalchemy import Date, DateTime, Table, delete, insert, select

from portfolio_backup.domain.ports.table_store import TableStore
from portfolio_backup.infrastructure.logging import get_logger
from portfolio_backup.infrastructure.persistence import table_registry
from portfolio_backup.infrastructure.persistence.database import DatabaseManager

logger = get_logger(__name__)


class SqlAlchemyTableStore(TableStore):
    """
    TableStore adosse a une base relationnelle.

    Les lignes sont des dicts indexes par nom de colonne SQL.

    Example:
        >>> store = SqlAlchemyTableStore(DatabaseManager(url))
        >>> rows = store.select_all("skills")
    """

    def __init__(self, db: DatabaseManager):
        """
        Initialise l'adapter.

        Args:
            db: Gestionnaire de connexion.
        """
        self._db = db

    def table_names(self) -> list[str]:
        return table_registry.table_names()

    def select_all(self, name: str) -> list[dict[str, Any]]:
        table = self._get_table(name)

        with self._db.get_session() as session:
            result = session.execute(select(table))
            return [dict(row) for row in result.mappings().all()]

    def delete_all(self, name: str) -> None:
        table = self._get_table(name)

        with self._db.get_session() as session:
            session.execute(delete(table))

    def insert_rows(self, name: str, rows: list[dict[str, Any]]) -> None:
        if not rows:
            return

        table = self._get_table(name)
        prepared = []
        ignored = set()

        for row in rows:
            values, unknown = self._prepare_row(table, row)
            prepared.append(values)
            ignored.update(unknown)

        if ignored:
            logger.warning("restore_columns_ignored", table=name, columns=sorted(ignored))

        with self._db.get_session() as session:
            if len({frozenset(row) for row in prepared}) == 1:
                session.execute(insert(table), prepared)
            else:
                # executemany exige le meme jeu de colonnes sur chaque ligne
                for row in prepared:
                    session.execute(insert(table).values(**row))

    def cascade_targets(self, name: str) -> list[str]:
        return table_registry.cascade_children(name)

    def validate_rows(self, name: str, rows: list[Any]) -> None:
        super().validate_rows(name, rows)
        table = self._get_table(name)

        for index, row in enumerate(rows):
            try:
                self._prepare_row(table, row)
            except ValueError as e:
                raise ValueError(f"{name}[{index}]: {e}") from e

    def _get_table(self, name: str) -> Table:
        """Resout un nom logique en Table SQLAlchemy."""
        model = table_registry.get_model(name)
        if model is None:
            raise KeyError(f"Unknown table: {name}")
        return model.__table__

    def _prepare_row(
        self, table: Table, row: dict[str, Any]
    ) -> tuple[dict[str, Any], list[str]]:
        """
        Adapte une ligne de snapshot aux colonnes courantes de la table.

        Les dates serialisees en ISO sont reconverties.

        Returns:
            (valeurs inserables, colonnes inconnues ignorees)

        Raises:
            ValueError: Si une date n'est pas au format ISO-8601.
        """
        prepared = {}
        unknown = []

        for key, value in row.items():
            column = table.columns.get(key)
            if column is None:
                unknown.append(key)
                continue

            if isinstance(value, str):
                if isinstance(column.type, DateTime):
                    value = _parse_datetime(value)
                elif isinstance(column.type, Date):
                    value = date.fromisoformat(value)

            prepared[key] = value

        return prepared, unknown


def _parse_datetime(value: str) -> datetime:
    """Parse un datetime ISO-8601, suffixe 'Z' inclus."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
