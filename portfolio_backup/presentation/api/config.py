"""
Configuration API - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration API depuis les variables d'env.

Variables:
----------
- JWT_SECRET_KEY: Cle secrete pour signer les tokens
- JWT_ALGORITHM: Algorithme (defaut: HS256)
- JWT_ACCESS_EXPIRE_MINUTES: Duree de vie des tokens
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """
    Configuration de l'API REST.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # JWT
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION"
    jwt_algorithm: str = "HS256"
    jwt_access_expire_minutes: int = 30

    # API
    api_title: str = "Portfolio Backup API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"

    # CORS
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> APISettings:
    """Retourne la configuration (cached)."""
    return APISettings()
