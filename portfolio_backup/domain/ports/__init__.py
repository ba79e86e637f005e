"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- TableStore: Lecture/ecriture tabulaire du store relationnel
"""

from portfolio_backup.domain.ports.table_store import TableStore

__all__ = ["TableStore"]
