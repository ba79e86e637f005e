"""
TableStore Port - Interface d'acces tabulaire au store relationnel.

Responsabilite unique:
----------------------
Definir le contrat minimal dont le service de backup a besoin:
lire, vider et remplir une table identifiee par son nom logique.

Usage:
------
En production, utiliser SqlAlchemyTableStore. En dev/tests,
utiliser InMemoryTableStore.
"""

from abc import ABC, abstractmethod
from typing import Any


class TableStore(ABC):
    """
    Interface pour le store relationnel.

    Chaque appel est independant: aucune transaction ne couvre
    plusieurs tables.
    """

    @abstractmethod
    def table_names(self) -> list[str]:
        """
        Retourne les noms logiques des tables connues.

        Returns:
            Liste ordonnee: toute table parente precede ses enfants.
        """
        pass

    @abstractmethod
    def select_all(self, name: str) -> list[dict[str, Any]]:
        """
        Lit toutes les lignes d'une table.

        Args:
            name: Nom logique de la table.

        Returns:
            Lignes sous forme de dicts colonne -> valeur.
        """
        pass

    @abstractmethod
    def delete_all(self, name: str) -> None:
        """
        Supprime toutes les lignes d'une table.

        Args:
            name: Nom logique de la table.
        """
        pass

    @abstractmethod
    def insert_rows(self, name: str, rows: list[dict[str, Any]]) -> None:
        """
        Insere des lignes dans une table.

        Args:
            name: Nom logique de la table.
            rows: Lignes a inserer.
        """
        pass

    def has_table(self, name: str) -> bool:
        """Verifie si le nom logique est connu du store."""
        return name in self.table_names()

    def cascade_targets(self, name: str) -> list[str]:
        """
        Tables videes en cascade par delete_all(name).

        Args:
            name: Nom logique de la table parente.

        Returns:
            Noms logiques des tables enfants (transitivement), aucune par defaut.
        """
        return []

    def validate_rows(self, name: str, rows: list[Any]) -> None:
        """
        Verifie que des lignes de snapshot sont inserables, sans rien ecrire.

        Appele avant toute suppression: une table invalide reste intacte.

        Raises:
            ValueError: Si une ligne est invalide.
        """
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                raise ValueError(f"{name}[{index}]: expected an object, got {type(row).__name__}")
