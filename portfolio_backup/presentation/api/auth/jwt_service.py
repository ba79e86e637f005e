"""
JWTService - Gestion des tokens JWT.

Responsabilite unique:
----------------------
Creer et valider les access tokens des administrateurs.

Usage:
------
    service = JWTService(settings)
    token = service.create_access_token("alice", "admin")
    payload = service.verify_access_token(token)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import PyJWTError

from portfolio_backup.presentation.api.config import APISettings


@dataclass
class TokenPayload:
    """
    Payload decode d'un token JWT.

    Attributes:
        subject: Identifiant de l'utilisateur.
        role: Role de l'utilisateur.
        exp: Date d'expiration.
    """

    subject: str
    role: str
    exp: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class JWTService:
    """
    Service de gestion JWT.

    Cree et valide les access tokens.
    """

    def __init__(self, settings: APISettings):
        """
        Initialise le service.

        Args:
            settings: Configuration API.
        """
        self._secret = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._access_expire = settings.jwt_access_expire_minutes

    def create_access_token(
        self, subject: str, role: str, expire_minutes: Optional[int] = None
    ) -> str:
        """
        Cree un access token.

        Args:
            subject: Identifiant de l'utilisateur.
            role: Role de l'utilisateur.
            expire_minutes: Duree de vie (defaut: configuration).

        Returns:
            Token JWT signe.
        """
        now = datetime.now(timezone.utc)
        minutes = self._access_expire if expire_minutes is None else expire_minutes

        return jwt.encode(
            {
                "sub": subject,
                "role": role,
                "type": "access",
                "exp": now + timedelta(minutes=minutes),
                "iat": now,
            },
            self._secret,
            algorithm=self._algorithm,
        )

    def verify_access_token(self, token: str) -> Optional[TokenPayload]:
        """
        Verifie un access token.

        Args:
            token: Token JWT.

        Returns:
            TokenPayload si valide, None sinon.
        """
        try:
            data = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except PyJWTError:
            return None

        if data.get("type") != "access":
            return None

        return TokenPayload(
            subject=str(data["sub"]),
            role=str(data.get("role", "")),
            exp=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
        )
