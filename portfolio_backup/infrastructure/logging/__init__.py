"""
Logging Infrastructure - Logging structure avec structlog.

Usage:
------
    from portfolio_backup.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("backup_completed", filename="backup-...json", tables=14)
"""

from portfolio_backup.infrastructure.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
