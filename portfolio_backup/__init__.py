"""
Portfolio Backup - Sauvegarde et restauration du contenu du portfolio.

Couches:
--------
- domain: Artefacts de backup, exceptions, ports
- infrastructure: Persistence SQLAlchemy, service de backup, scheduler, logging
- presentation: API REST d'administration (FastAPI)
"""

__version__ = "1.0.0"
