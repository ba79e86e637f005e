"""
Backups API - Administration des snapshots.

Endpoints:
----------
- POST   /admin/backups: Creer un backup
- GET    /admin/backups: Lister les backups
- GET    /admin/backups/{filename}: Contenu d'un backup
- POST   /admin/backups/{filename}/restore: Restaurer un backup
- DELETE /admin/backups/{filename}: Supprimer un backup
"""

from portfolio_backup.presentation.api.backups.router import router

__all__ = ["router"]
