"""
API REST - FastAPI.

Endpoints d'administration des backups, reserves aux administrateurs
(token JWT Bearer, role "admin").

Routers disponibles:
--------------------
- backups: Creation, liste, detail, restauration, suppression

Usage:
------
    uvicorn portfolio_backup.presentation.api.main:create_app --factory --reload
"""

from portfolio_backup.presentation.api.main import create_app

__all__ = ["create_app"]
