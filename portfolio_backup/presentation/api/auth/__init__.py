"""
Auth API - Tokens JWT des administrateurs.
"""

from portfolio_backup.presentation.api.auth.jwt_service import JWTService, TokenPayload

__all__ = ["JWTService", "TokenPayload"]
