#!/usr/bin/env python3
"""
CLI de gestion des sauvegardes du portfolio.

Usage:
    python scripts/backup_cli.py create [--description TEXTE]
    python scripts/backup_cli.py list
    python scripts/backup_cli.py show NOM
    python scripts/backup_cli.py restore NOM [--yes]
    python scripts/backup_cli.py delete NOM
    python scripts/backup_cli.py prune [--keep N]
    python scripts/backup_cli.py schedule [--interval-hours H]
    python scripts/backup_cli.py token [--subject admin]
"""

import sys
import argparse
from pathlib import Path

# Ajouter le dossier parent au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

from apscheduler.schedulers.blocking import BlockingScheduler

from portfolio_backup.domain.exceptions import BackupError
from portfolio_backup.infrastructure.backup.config import get_backup_settings
from portfolio_backup.infrastructure.container import Container
from portfolio_backup.infrastructure.logging import configure_logging
from portfolio_backup.presentation.api.auth.jwt_service import JWTService
from portfolio_backup.presentation.api.config import get_settings


def cmd_create(container, args):
    result = container.backup_service.create_backup(args.description)

    print(f"✅ Backup cree: {result.filename}")
    print(f"   Tables: {len(result.tables)} | Taille: {result.size_bytes:,} octets")
    for table, error in result.failed_tables.items():
        print(f"   ⚠️ {table}: {error}")
    return 0


def cmd_list(container, args):
    backups = container.backup_service.list_backups()

    if not backups:
        print("Aucun backup")
        return 0

    for metadata in backups:
        description = metadata.description or ""
        print(f"{metadata.filename}  {metadata.size:>10,}  {len(metadata.tables):>2} tables  {description}")
    return 0


def cmd_show(container, args):
    backup = container.backup_service.get_backup_details(args.name)

    if backup is None:
        print(f"❌ Backup introuvable: {args.name}")
        return 1

    metadata = backup.metadata
    print(f"📦 {args.name}")
    print(f"   Version: {metadata.version}")
    print(f"   Date: {metadata.timestamp}")
    if metadata.description:
        print(f"   Description: {metadata.description}")
    for table in metadata.tables:
        print(f"   - {table}: {backup.row_count(table)} lignes")
    return 0


def cmd_restore(container, args):
    if not args.yes:
        answer = input(f"⚠️ Restaurer {args.name} ecrase les donnees actuelles. Continuer? [y/N] ")
        if answer.strip().lower() not in ("y", "yes", "o", "oui"):
            print("Annule")
            return 1

    result = container.backup_service.restore_backup(args.name)

    for table, count in result.restored.items():
        print(f"   ✅ {table}: {count} lignes")
    for table in result.skipped:
        print(f"   ⏭️ {table}: ignoree")
    for table in result.cascaded:
        print(f"   ⚠️ {table}: videe par cascade")
    for table, error in result.failed.items():
        print(f"   ❌ {table}: {error}")

    return 1 if result.is_partial else 0


def cmd_delete(container, args):
    container.backup_service.delete_backup(args.name)
    print(f"🗑️ Backup supprime: {args.name}")
    return 0


def cmd_prune(container, args):
    keep = args.keep or container.settings.backup_retention_count
    deleted = container.backup_service.prune_backups(keep)

    print(f"🗑️ {len(deleted)} backup(s) supprime(s), {keep} conserve(s)")
    return 0


def cmd_schedule(container, args):
    interval = args.interval_hours or container.settings.backup_interval_hours
    print(f"⏰ Backup automatique toutes les {interval}h (Ctrl+C pour arreter)")

    try:
        container.scheduler.start(interval)
    except (KeyboardInterrupt, SystemExit):
        container.scheduler.stop()
    return 0


def cmd_token(args):
    token = JWTService(get_settings()).create_access_token(
        subject=args.subject,
        role="admin",
        expire_minutes=args.expire_minutes,
    )
    print(token)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Gestion des sauvegardes JSON du portfolio"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Cree un backup")
    create.add_argument("--description", "-d", help="Libelle du backup")

    subparsers.add_parser("list", help="Liste les backups")

    show = subparsers.add_parser("show", help="Affiche le contenu d'un backup")
    show.add_argument("name")

    restore = subparsers.add_parser("restore", help="Restaure un backup")
    restore.add_argument("name")
    restore.add_argument("--yes", "-y", action="store_true", help="Pas de confirmation")

    delete = subparsers.add_parser("delete", help="Supprime un backup")
    delete.add_argument("name")

    prune = subparsers.add_parser("prune", help="Garde les N backups les plus recents")
    prune.add_argument("--keep", type=int, help="Nombre de backups a conserver")

    schedule = subparsers.add_parser("schedule", help="Lance les backups automatiques")
    schedule.add_argument("--interval-hours", type=float, help="Intervalle en heures")

    token = subparsers.add_parser("token", help="Genere un token admin")
    token.add_argument("--subject", default="admin")
    token.add_argument("--expire-minutes", type=int)

    return parser


COMMANDS = {
    "create": cmd_create,
    "list": cmd_list,
    "show": cmd_show,
    "restore": cmd_restore,
    "delete": cmd_delete,
    "prune": cmd_prune,
    "schedule": cmd_schedule,
}


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.command == "token":
        return cmd_token(args)

    settings = get_backup_settings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)

    scheduler = None
    if args.command == "schedule":
        scheduler = BlockingScheduler(timezone="UTC")

    try:
        container = Container.create(settings, scheduler=scheduler)
        return COMMANDS[args.command](container, args)
    except BackupError as e:
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
