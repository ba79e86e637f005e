"""
InMemoryTableStore - Implementation en memoire du TableStore.

Responsabilite unique:
----------------------
Stocker les lignes des tables en memoire (pour dev/tests).

Note:
-----
En production, utiliser SqlAlchemyTableStore. Les suppressions en
cascade du registre sont reproduites: vider skillCategories vide skills.
"""

from copy import deepcopy
from threading import Lock
from typing import Any, Iterable, Mapping, Optional

from portfolio_backup.domain.ports.table_store import TableStore
from portfolio_backup.infrastructure.persistence import table_registry


class InMemoryTableStore(TableStore):
    """
    TableStore en memoire.

    Thread-safe via Lock. Les lignes sont copiees en entree et en
    sortie: un appelant ne peut pas modifier le store par reference.

    Example:
        >>> store = InMemoryTableStore()
        >>> store.insert_rows("users", [{"id": 1, "username": "admin"}])
        >>> store.select_all("users")
        [{'id': 1, 'username': 'admin'}]
    """

    def __init__(
        self,
        names: Optional[Iterable[str]] = None,
        cascades: Optional[Mapping[str, Iterable[str]]] = None,
    ):
        """
        Initialise le store.

        Args:
            names: Tables connues, dans l'ordre des dependances
                (defaut: registre des tables du portfolio).
            cascades: Table parente -> tables videes avec elle
                (defaut: cascades du registre si names est omis, aucune sinon).
        """
        if names is None:
            ordered = table_registry.table_names()
            if cascades is None:
                cascades = {name: table_registry.cascade_children(name) for name in ordered}
        else:
            ordered = list(names)

        self._tables: dict[str, list[dict[str, Any]]] = {name: [] for name in ordered}
        self._cascades = {parent: list(children) for parent, children in (cascades or {}).items()}
        self._lock = Lock()

    def table_names(self) -> list[str]:
        return list(self._tables)

    def select_all(self, name: str) -> list[dict[str, Any]]:
        with self._lock:
            return deepcopy(self._rows(name))

    def delete_all(self, name: str) -> None:
        with self._lock:
            self._rows(name).clear()
            for child in self.cascade_targets(name):
                self._rows(child).clear()

    def insert_rows(self, name: str, rows: list[dict[str, Any]]) -> None:
        with self._lock:
            self._rows(name).extend(deepcopy(rows))

    def cascade_targets(self, name: str) -> list[str]:
        return list(self._cascades.get(name, []))

    def _rows(self, name: str) -> list[dict[str, Any]]:
        try:
            return self._tables[name]
        except KeyError:
            raise KeyError(f"Unknown table: {name}") from None
