"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir le service de backup et le controle d'acces admin aux endpoints.

Usage:
------
    @router.get("")
    def list_backups(
        admin: TokenPayload = Depends(get_current_admin),
        service: BackupService = Depends(get_backup_service),
    ):
        ...
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio_backup.infrastructure.backup.service import BackupService
from portfolio_backup.presentation.api.auth.jwt_service import JWTService, TokenPayload
from portfolio_backup.presentation.api.config import APISettings, get_settings


# Security scheme
bearer_scheme = HTTPBearer(auto_error=False)


def get_backup_service(request: Request) -> BackupService:
    """Retourne le BackupService de l'application."""
    return request.app.state.container.backup_service


def get_jwt_service(
    settings: APISettings = Depends(get_settings)
) -> JWTService:
    """Retourne le JWTService."""
    return JWTService(settings)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Optional[TokenPayload]:
    """
    Extrait le payload du token JWT.

    Returns:
        TokenPayload si token valide, None sinon.
    """
    if not credentials:
        return None

    return jwt_service.verify_access_token(credentials.credentials)


def get_current_admin(
    payload: Optional[TokenPayload] = Depends(get_token_payload),
) -> TokenPayload:
    """
    Retourne le payload du token si l'utilisateur est admin.

    Raises:
        HTTPException 401 si non authentifie, 403 si pas admin.
    """
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not payload.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator access required",
        )

    return payload
