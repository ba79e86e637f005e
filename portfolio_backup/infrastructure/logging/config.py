"""
Logging Config - Configuration structlog des sauvegardes.

Modes:
------
- Development: Console lisible (couleurs si terminal)
- Production: Une ligne JSON par evenement, timestamp ISO UTC

Les valeurs des cles sensibles (password, token, authorization...) sont
masquees avant rendu.

Usage:
------
    configure_logging(json_logs=True, log_level="INFO")
    logger = get_logger(__name__)
    logger.warning("backup_table_failed", table="skills", error="...")
"""

import logging
import sys
import time
import uuid
from typing import Any, Optional

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SENSITIVE_KEYS = frozenset({"password", "token", "access_token", "authorization", "jwt_secret_key"})

MASK = "***"

# Bibliotheques trop bavardes en dessous de WARNING
_NOISY_LOGGERS = ("apscheduler", "sqlalchemy.engine", "uvicorn.access")

_UNLOGGED_PATHS = frozenset({"/health"})


def mask_secrets(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Processor structlog: remplace les valeurs des cles sensibles."""
    for key in event_dict:
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = MASK
    return event_dict


def build_processors(json_logs: bool) -> list:
    """
    Chaine de processors structlog.

    Args:
        json_logs: True pour un rendu JSON, False pour la console.
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        mask_secrets,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    return processors


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog et le logging standard.

    Args:
        json_logs: True pour JSON (production), False pour la console.
        log_level: Niveau minimum, parmi LOG_LEVELS (casse indifferente).

    Raises:
        ValueError: Si le niveau est inconnu.
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level!r}. Expected one of {', '.join(LOG_LEVELS)}")
    level = getattr(logging, level_name)

    structlog.configure(
        processors=build_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Retourne un logger structure."""
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware de logging des requetes d'administration.

    Chaque requete recoit un request_id (header X-Request-ID ou genere),
    lie au contexte structlog: les evenements du BackupService emis
    pendant la requete le portent aussi. Il est renvoye dans la reponse.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or get_logger("api.requests")

    async def __call__(self, request, call_next):
        if request.url.path in _UNLOGGED_PATHS:
            return await call_next(request)

        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        start_time = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self._logger.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=_elapsed_ms(start_time),
            )
            raise

        response.headers["X-Request-ID"] = request_id
        self._logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start_time),
        )
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)
